"""
Arithmetic Layer Tests

Wide-integer helpers, modular inverse, and affine-transform composition.
"""

import pytest

from pcg64dxsm.constants import PCG_MULTIPLIER, UINT64_MASK, UINT128_MASK
from pcg64dxsm.engine.affine import AffineTransform, compose
from pcg64dxsm.engine.inverse import mod_inverse_pow2
from pcg64dxsm.engine.wide import (
    add128,
    high64,
    low64,
    mask64,
    mask128,
    mul128,
    mul_wide64,
)


# =============================================================================
# Wide Integer Tests
# =============================================================================


class TestWide:
    """Tests for fixed-width arithmetic."""

    def test_add128_wraps(self):
        """Test addition wraps at 2^128."""
        assert add128(UINT128_MASK, 1) == 0
        assert add128(UINT128_MASK, 5) == 4

    def test_mul128_keeps_low_bits(self):
        """Test multiplication keeps the low 128 bits."""
        assert mul128(1 << 127, 2) == 0
        assert mul128(UINT128_MASK, UINT128_MASK) == 1

    def test_masks_reduce_negative_values(self):
        """Test masks map negatives to their two's complement residue."""
        assert mask128(-1) == UINT128_MASK
        assert mask64(-1) == UINT64_MASK

    def test_high_low_split(self):
        """Test splitting a 128-bit word."""
        value = 0x0123456789ABCDEF_FEDCBA9876543210
        assert high64(value) == 0x0123456789ABCDEF
        assert low64(value) == 0xFEDCBA9876543210

    def test_mul_wide64(self):
        """Test 64x64 product halves."""
        high, low = mul_wide64(UINT64_MASK, UINT64_MASK)
        assert high == UINT64_MASK - 1
        assert low == 1

    def test_mul_wide64_accepts_two_to_the_64(self):
        """Test the factor 2^64 shifts the word into the high half."""
        assert mul_wide64(0xABC, 1 << 64) == (0xABC, 0)

    def test_mul_wide64_rejects_wide_left_operand(self):
        """Test precondition on the left operand."""
        with pytest.raises(AssertionError):
            mul_wide64(1 << 64, 1)


# =============================================================================
# Modular Inverse Tests
# =============================================================================


class TestModInverse:
    """Tests for mod_inverse_pow2."""

    @pytest.mark.parametrize("a", [1, 3, PCG_MULTIPLIER, UINT128_MASK, (1 << 127) + 1])
    def test_inverse_property(self, a):
        """Test a * inv == 1 mod 2^128."""
        inv = mod_inverse_pow2(a)
        assert 0 <= inv <= UINT128_MASK
        assert (a * inv) & UINT128_MASK == 1

    def test_matches_builtin_pow(self):
        """Test agreement with Python's modular inverse."""
        assert mod_inverse_pow2(PCG_MULTIPLIER) == pow(PCG_MULTIPLIER, -1, 1 << 128)

    @pytest.mark.parametrize("bits", [1, 7, 64, 100])
    def test_other_widths(self, bits):
        """Test widths that are not powers of two clamp the last step."""
        inv = mod_inverse_pow2(PCG_MULTIPLIER, bits)
        assert (PCG_MULTIPLIER * inv) % (1 << bits) == 1

    def test_even_input_fails(self):
        """Test that even values fail the precondition."""
        with pytest.raises(AssertionError):
            mod_inverse_pow2(4)


# =============================================================================
# Affine Transform Tests
# =============================================================================


class TestAffineTransform:
    """Tests for AffineTransform composition and powers."""

    STEP = AffineTransform.lcg_step(PCG_MULTIPLIER, 0x1234567)

    def test_identity(self):
        """Test identity leaves the state untouched."""
        assert AffineTransform.identity().apply(987654321) == 987654321

    def test_compose_order(self):
        """Test compose(second, first) applies first, then second."""
        first = AffineTransform(multiplier=3, offset=5)
        second = AffineTransform(multiplier=7, offset=11)
        state = 100
        assert compose(second, first).apply(state) == second.apply(first.apply(state))
        assert first.then(second) == compose(second, first)

    @pytest.mark.parametrize("count", [0, 1, 2, 3, 10, 255, 1000])
    def test_power_matches_repeated_application(self, count):
        """Test power(n) equals applying the step n times."""
        state = 0xDEADBEEF
        expected = state
        for _ in range(count):
            expected = self.STEP.apply(expected)
        assert self.STEP.power(count).apply(state) == expected

    def test_power_of_period_is_identity(self):
        """Test a full LCG period returns to the start."""
        assert self.STEP.power(1 << 128) == AffineTransform.identity()

    def test_inverse_step_undoes_step(self):
        """Test the inverse step reverses one forward step."""
        back = AffineTransform.lcg_step_inverse(PCG_MULTIPLIER, 0x1234567)
        state = 0x0123456789ABCDEF0123456789ABCDEF
        assert back.apply(self.STEP.apply(state)) == state
        assert compose(back, self.STEP) == AffineTransform.identity()

    def test_negative_power_fails(self):
        """Test precondition on negative counts."""
        with pytest.raises(AssertionError):
            self.STEP.power(-1)

    def test_unreduced_fields_fail(self):
        """Test fields must be reduced modulo 2^128."""
        with pytest.raises(AssertionError):
            AffineTransform(multiplier=1 << 128, offset=0)
