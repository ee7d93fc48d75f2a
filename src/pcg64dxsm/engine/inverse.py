"""
Modular inverse modulo a power of two (Newton/Hensel lifting).

Used to build the backward LCG step: undoing ``state*MUL + inc`` needs the
inverse of ``MUL`` modulo 2^128.
"""

from __future__ import annotations

from ..constants import UINT128_BITS


def mod_inverse_pow2(a: int, bits: int = UINT128_BITS) -> int:
    """Return ``inv`` such that ``a * inv == 1 (mod 2^bits)``.

    Starts from ``inv = 1`` (the inverse modulo 2) and applies the Newton step
    ``inv <- inv * (2 - a*inv)``, which doubles the number of correct low bits
    each time. The last step is clamped to exactly ``bits``.

    Args:
        a: An odd integer. Even values have no inverse; callers guarantee
            oddness (LCG multipliers are odd by construction).
        bits: Width of the modulus, in bits.

    TigerStyle: Assert precondition and postcondition.
    """
    assert bits > 0, f"bits ({bits}) must be positive"
    assert a & 1 == 1, f"a ({a:#x}) must be odd to be invertible mod 2^{bits}"

    inv = 1
    precision = 1
    while precision < bits:
        precision = min(precision * 2, bits)
        mask = (1 << precision) - 1
        inv = (inv * ((2 - a * inv) & mask)) & mask

    mask = (1 << bits) - 1
    inv &= mask

    # Postcondition
    assert (a * inv) & mask == 1, "Newton lifting failed to converge"
    return inv
