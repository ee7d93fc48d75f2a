"""
Bounded sampling with Lemire's multiply-and-reject method.

Maps a uniform 64-bit draw into ``[0, bound)`` without modulo bias and
without floating point: the high word of ``draw * bound`` is the sample, and
the low word tells whether the draw fell into the small biased region that
must be rejected.
"""

from __future__ import annotations

from typing import Callable

from ..constants import SAMPLE_BOUND_MAX, SAMPLE_BOUND_MIN, UINT64_MASK
from ..core.errors import BoundError
from .wide import mul_wide64


def check_bound(bound: int) -> int:
    """Validate a sampling bound and return it as an int.

    Raises:
        BoundError: If ``bound`` is not an integer in ``[1, 2^64]``.
    """
    if isinstance(bound, bool) or not isinstance(bound, int):
        raise BoundError(f"bound must be an integer, got {type(bound).__name__}")
    if not SAMPLE_BOUND_MIN <= bound <= SAMPLE_BOUND_MAX:
        raise BoundError(
            f"bound ({bound}) must be in [{SAMPLE_BOUND_MIN}, {SAMPLE_BOUND_MAX}]"
        )
    return bound


def lemire_below(draw: Callable[[], int], bound: int) -> int:
    """Return an unbiased integer uniformly distributed in ``[0, bound)``.

    Args:
        draw: Callable returning uniform 64-bit integers.
        bound: Exclusive upper limit, ``1 <= bound <= 2^64``.

    The rejection threshold ``2^64 mod bound`` is only computed when the
    first product lands in the low region, so most calls cost one draw and
    one multiply.
    """
    check_bound(bound)

    high, low = mul_wide64(draw(), bound)
    if low < bound:
        threshold = (-bound & UINT64_MASK) % bound
        while low < threshold:
            high, low = mul_wide64(draw(), bound)
    return high
