"""
Bounded Sampling and Seed Input Tests
"""

from collections import Counter

import pytest

from pcg64dxsm import (
    BoundError,
    BytesSeed,
    EntropyUnavailableError,
    FixedEntropySource,
    PairSeed,
    Pcg64Dxsm,
    SeedParseError,
)
from pcg64dxsm.engine.sampling import check_bound, lemire_below
from pcg64dxsm.engine.seeding import EntropySeed, parse_uint, resolve_seed


def scripted(values):
    """Draw function replaying fixed 64-bit values, counting calls."""
    it = iter(values)
    calls = []

    def draw():
        value = next(it)
        calls.append(value)
        return value

    return draw, calls


# =============================================================================
# Lemire Sampling Tests
# =============================================================================


class TestLemire:
    """Tests for lemire_below and Pcg64Dxsm.int_below."""

    def test_high_word_is_result(self):
        """Test the result is the high word of draw * bound."""
        # (2^63 + 1) * 10 = 5 * 2^64 + 10: high word 5, low word 10 >= bound
        draw, calls = scripted([(1 << 63) + 1])
        assert lemire_below(draw, 10) == 5
        assert len(calls) == 1

    def test_rejects_biased_region(self):
        """Test draws whose low word falls under the threshold are redrawn."""
        # For bound 3 the threshold is 2^64 mod 3 == 1, so a zero low word
        # is rejected.
        draw, calls = scripted([0, 1 << 63])
        assert lemire_below(draw, 3) == 1
        assert len(calls) == 2

    def test_bound_one_is_always_zero(self, rng):
        """Test the degenerate bound."""
        assert all(rng.int_below(1) == 0 for _ in range(50))

    def test_bound_two_to_the_64_returns_raw_draw(self, rng):
        """Test the widest bound passes the draw through."""
        assert rng.int_below(1 << 64) == 0x6F95E9A9F4D09945

    def test_regression_values(self, rng):
        """Test fixed outputs for small and large bounds."""
        assert [rng.int_below(6) for _ in range(10)] == [2, 3, 2, 2, 3, 1, 3, 2, 3, 4]
        rng.reset()
        assert [rng.int_below(10**18) for _ in range(2)] == [
            435881237023581742,
            654801741409242982,
        ]

    @pytest.mark.parametrize("bound", [0, -1, (1 << 64) + 1, 2.5, "6", True, None])
    def test_invalid_bound_fails_without_drawing(self, rng, bound):
        """Test invalid bounds fail before any draw."""
        with pytest.raises(BoundError):
            rng.int_below(bound)
        assert rng.pos() == 0

    def test_check_bound_accepts_limits(self):
        """Test both ends of the valid range."""
        assert check_bound(1) == 1
        assert check_bound(1 << 64) == 1 << 64

    @pytest.mark.parametrize("bound", [2, 6, 7, 100])
    def test_range(self, rng, bound):
        """Test no sample reaches the bound."""
        assert all(0 <= rng.int_below(bound) < bound for _ in range(2000))

    def test_uniformity(self, rng):
        """Test each outcome is close to N/B."""
        bound, samples = 6, 60_000
        counts = Counter(rng.int_below(bound) for _ in range(samples))
        assert set(counts) == set(range(bound))
        expected = samples / bound
        # ~6 standard deviations
        assert all(abs(counts[k] - expected) < 550 for k in range(bound))

    def test_uniformity_non_power_of_two_large_bound(self, rng):
        """Test a bound near 2^63 splits evenly into halves."""
        bound = (1 << 63) + 12345
        half = bound // 2
        lower = sum(rng.int_below(bound) < half for _ in range(20_000))
        assert abs(lower - 10_000) < 500


# =============================================================================
# Seed Input Tests
# =============================================================================


class TestSeedInputs:
    """Tests for parse_uint and the seed variants."""

    @pytest.mark.parametrize(
        "text, value",
        [
            ("0x10", 16),
            ("0XfF", 255),
            ("10", 10),
            (" 42 ", 42),
            ("ff", 255),
            ("0x0", 0),
        ],
    )
    def test_parse_uint(self, text, value):
        """Test string forms."""
        assert parse_uint(text) == value

    def test_parse_uint_passes_ints_through(self):
        """Test ints are returned unreduced."""
        assert parse_uint(1 << 200) == 1 << 200
        assert parse_uint(-3) == -3

    def test_pair_seed_reduces(self):
        """Test PairSeed stores reduced integers."""
        seed = PairSeed(state="0x1", increment=-1)
        assert seed.state == 1
        assert seed.increment == (1 << 128) - 1

    def test_resolve_rejects_unknown_inputs(self):
        """Test raw values must be wrapped in a seed variant."""
        with pytest.raises(SeedParseError):
            resolve_seed(b"\x00" * 16)

    def test_bytes_seed_rejects_int(self):
        """Test an int is not mistaken for a byte count."""
        with pytest.raises(SeedParseError):
            BytesSeed(16)

    def test_bytes_seed_resolves_halves(self, counting_bytes):
        """Test state and increment come from the two halves, big-endian."""
        state, increment = BytesSeed(counting_bytes).resolve()
        assert state == 0x000102030405060708090A0B0C0D0E0F
        assert increment == 0x101112131415161718191A1B1C1D1E1F

    def test_fixed_entropy_consumes_buffer(self):
        """Test reads advance through the buffer and then fail."""
        source = FixedEntropySource(bytes(range(40)))
        assert source.read(32) == bytes(range(32))
        assert source.read(8) == bytes(range(32, 40))
        with pytest.raises(EntropyUnavailableError):
            source.read(1)

    def test_short_entropy_read_fails(self):
        """Test a source returning too few bytes is rejected."""

        class ShortSource:
            def read(self, count: int) -> bytes:
                return b"\x01" * (count - 1)

        with pytest.raises(EntropyUnavailableError):
            Pcg64Dxsm(EntropySeed(ShortSource()))
