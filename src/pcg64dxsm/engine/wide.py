"""
Wide-integer arithmetic

Fixed-width unsigned operations on Python ints. Wraparound modulo 2^128
(or 2^64) is the LCG's arithmetic, so none of these ever signal overflow.
"""

from __future__ import annotations

from ..constants import UINT64_BITS, UINT64_MASK, UINT128_MASK


def mask128(value: int) -> int:
    """Reduce an integer (of any sign or width) modulo 2^128."""
    return value & UINT128_MASK


def mask64(value: int) -> int:
    """Reduce an integer (of any sign or width) modulo 2^64."""
    return value & UINT64_MASK


def add128(a: int, b: int) -> int:
    return (a + b) & UINT128_MASK


def mul128(a: int, b: int) -> int:
    """Low 128 bits of the full product."""
    return (a * b) & UINT128_MASK


def high64(value: int) -> int:
    """High 64 bits of a 128-bit value."""
    return (value >> UINT64_BITS) & UINT64_MASK


def low64(value: int) -> int:
    return value & UINT64_MASK


def mul_wide64(a: int, b: int) -> tuple[int, int]:
    """Multiply a 64-bit word by a factor of at most 2^64.

    Returns:
        ``(high, low)`` halves of the product. ``b`` may be exactly 2^64 so
        that bounded sampling can cover the full 64-bit range.
    """
    assert 0 <= a <= UINT64_MASK, "left operand must fit in 64 bits"
    assert 0 <= b <= UINT64_MASK + 1, "right operand must be at most 2^64"
    product = a * b
    return product >> UINT64_BITS, product & UINT64_MASK
