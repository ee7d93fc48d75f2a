"""
Affine transforms over Z/2^128

A single LCG step is the affine map ``s -> multiplier*s + offset``. Applying
it ``n`` times is again affine, so jump-ahead reduces to raising the step to
the ``n``-th power by repeated squaring.
"""

from __future__ import annotations

from dataclasses import dataclass

from .inverse import mod_inverse_pow2
from .wide import mask128, mul128


@dataclass(frozen=True)
class AffineTransform:
    """The map ``state' = multiplier*state + offset (mod 2^128)``."""

    multiplier: int
    offset: int

    def __post_init__(self) -> None:
        assert self.multiplier == mask128(self.multiplier), "multiplier must be reduced"
        assert self.offset == mask128(self.offset), "offset must be reduced"

    @classmethod
    def identity(cls) -> AffineTransform:
        return cls(multiplier=1, offset=0)

    @classmethod
    def lcg_step(cls, multiplier: int, increment: int) -> AffineTransform:
        """One forward LCG step."""
        return cls(multiplier=mask128(multiplier), offset=mask128(increment))

    @classmethod
    def lcg_step_inverse(cls, multiplier: int, increment: int) -> AffineTransform:
        """The step that undoes one forward LCG step.

        From ``s' = a*s + c`` it follows ``s = a^-1 * s' - a^-1 * c``.
        """
        inverse = mod_inverse_pow2(mask128(multiplier))
        return cls(multiplier=inverse, offset=mask128(-inverse * increment))

    def apply(self, state: int) -> int:
        return mask128(self.multiplier * state + self.offset)

    def then(self, other: AffineTransform) -> AffineTransform:
        """Transform equal to applying ``self`` first, then ``other``."""
        return compose(other, self)

    def power(self, count: int) -> AffineTransform:
        """Transform equal to applying ``self`` ``count`` times.

        Binary exponentiation: O(log count) compositions, so counts close to
        the 2^128 period are as cheap as small ones.
        """
        assert count >= 0, f"count ({count}) must be non-negative"

        accumulated = AffineTransform.identity()
        current = self
        remaining = count
        while remaining > 0:
            if remaining & 1:
                accumulated = compose(current, accumulated)
            current = compose(current, current)
            remaining >>= 1
        return accumulated


def compose(second: AffineTransform, first: AffineTransform) -> AffineTransform:
    """Transform equal to applying ``first`` then ``second``.

    ``second(first(s)) = m2*(m1*s + c1) + c2``.
    """
    return AffineTransform(
        multiplier=mul128(second.multiplier, first.multiplier),
        offset=mask128(second.multiplier * first.offset + second.offset),
    )
