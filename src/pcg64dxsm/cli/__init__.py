"""PCG64-DXSM command-line interface."""
