"""
PCG64-DXSM Constants - TigerStyle

All limits are explicit, named with units, big-endian naming convention.
Category comes first, specifics last: SEED_BYTES_COUNT_FULL not FULL_SEED_BYTES.

The PCG_* values are protocol constants: changing any of them breaks
bit-compatibility with every other PCG64-DXSM stream seeded the same way.
"""

# =============================================================================
# Word Sizes
# =============================================================================

UINT64_BITS: int = 64
UINT128_BITS: int = 128
UINT64_MODULUS: int = 1 << UINT64_BITS
UINT128_MODULUS: int = 1 << UINT128_BITS
UINT64_MASK: int = UINT64_MODULUS - 1
UINT128_MASK: int = UINT128_MODULUS - 1

# =============================================================================
# PCG Protocol Constants
# =============================================================================

PCG_MULTIPLIER: int = 0xDA942042E4DD58B5  # LCG multiplier, used as a 128-bit value
PCG_DXSM_MULTIPLIER: int = 0xDA942042E4DD58B5  # 64-bit multiplier of the output stage
PCG_JUMP_DISTANCE: int = 210306068529402873165736369884012333109  # ~phi * 2^127
PCG_PERIOD: int = UINT128_MODULUS

# =============================================================================
# Seeding
# =============================================================================

SEED_BYTES_COUNT_STATE_ONLY: int = 16  # state only, increment defaults to 1
SEED_BYTES_COUNT_FULL: int = 32  # state then increment
SEED_INCREMENT_DEFAULT: int = 1

# =============================================================================
# Sampling Limits
# =============================================================================

SAMPLE_BOUND_MIN: int = 1
SAMPLE_BOUND_MAX: int = UINT64_MODULUS  # widest bound Lemire's 64-bit method covers
FLOAT_MANTISSA_BITS: int = 53
FLOAT_MANTISSA_SCALE: float = float(1 << FLOAT_MANTISSA_BITS)

# =============================================================================
# State Export
# =============================================================================

STATE_HEX_DIGITS_COUNT: int = 32  # zero-padded width of exported 128-bit words

# =============================================================================
# Toolkit Defaults
# =============================================================================

STRING_POOL_DEFAULT: str = (
    "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz_-"
)
HEX_ALPHABET_LOWER: str = "0123456789abcdef"
HEX_ALPHABET_UPPER: str = "0123456789ABCDEF"
UUID_BYTES_COUNT: int = 16
PERCENT_MAX: int = 100
