"""
PCG64-DXSM - deterministic pseudo-random engine

A 128-bit linear congruential generator whose state is passed through the
DXSM (double xorshift multiply) permutation, giving 64-bit outputs with a
period of 2^128.

Components:
- Pcg64Dxsm: seeding, raw draws, exact advance/seek/jump in O(log n)
- int_below: unbiased bounded integers via Lemire's method
- RandomToolkit: shuffles, UUIDs, strings, dice and dates on top of the
  three primitives next_uint64 / next_float64 / int_below

Not suitable for cryptography.
"""

from pcg64dxsm.core.errors import (
    BoundError,
    EntropyUnavailableError,
    PcgError,
    RangeError,
    SeedError,
    SeedLengthError,
    SeedParseError,
    StateImportError,
    UsageError,
)
from pcg64dxsm.core.models import GeneratorStateRecord, SeedRecord
from pcg64dxsm.engine import (
    BytesSeed,
    EntropySeed,
    EntropySource,
    FixedEntropySource,
    PairSeed,
    Pcg64Dxsm,
    SystemEntropySource,
)
from pcg64dxsm.toolkit import RandomToolkit, UniformSource

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Generator
    "Pcg64Dxsm",
    "EntropySeed",
    "BytesSeed",
    "PairSeed",
    "EntropySource",
    "SystemEntropySource",
    "FixedEntropySource",
    # Models
    "GeneratorStateRecord",
    "SeedRecord",
    # Helpers
    "RandomToolkit",
    "UniformSource",
    # Errors
    "PcgError",
    "SeedError",
    "EntropyUnavailableError",
    "SeedLengthError",
    "SeedParseError",
    "UsageError",
    "BoundError",
    "RangeError",
    "StateImportError",
]
