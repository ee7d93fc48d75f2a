"""
PCG64-DXSM core: errors, data models and configuration.
"""
