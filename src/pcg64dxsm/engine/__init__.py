"""
PCG64-DXSM engine

Layers, leaves first:
- wide: fixed-width 128/64-bit arithmetic
- inverse: modular inverse modulo 2^128
- affine: affine-transform composition for jump-ahead
- seeding: seed inputs and entropy sources
- sampling: Lemire bounded sampling
- generator: the Pcg64Dxsm generator and its positioning API
"""

from .affine import AffineTransform, compose
from .generator import Pcg64Dxsm, dxsm
from .inverse import mod_inverse_pow2
from .sampling import check_bound, lemire_below
from .seeding import (
    BytesSeed,
    EntropySeed,
    EntropySource,
    FixedEntropySource,
    PairSeed,
    SeedInput,
    SystemEntropySource,
    parse_uint128,
)

__all__ = [
    # Generator
    "Pcg64Dxsm",
    "dxsm",
    # Seeding
    "SeedInput",
    "EntropySeed",
    "BytesSeed",
    "PairSeed",
    "EntropySource",
    "SystemEntropySource",
    "FixedEntropySource",
    "parse_uint128",
    # Positioning
    "AffineTransform",
    "compose",
    "mod_inverse_pow2",
    # Sampling
    "check_bound",
    "lemire_below",
]
