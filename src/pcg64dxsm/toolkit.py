"""
RandomToolkit - convenience helpers over a uniform source

Everything here is built from three primitives only: ``next_uint64``,
``next_float64`` and ``int_below``. The toolkit never touches generator
internals, so it works with any object providing those methods.

Usage:
    from pcg64dxsm import Pcg64Dxsm, RandomToolkit

    rand = RandomToolkit(Pcg64Dxsm.from_seed(42, 54))
    rand.integer(1, 6)
    rand.shuffle(cards)
    rand.uuid4()
"""

from __future__ import annotations

import math
import sys
import uuid
from datetime import datetime, timedelta
from typing import Any, Callable, MutableSequence, Protocol, Sequence, TypeVar, runtime_checkable

from .constants import (
    HEX_ALPHABET_LOWER,
    HEX_ALPHABET_UPPER,
    PERCENT_MAX,
    SAMPLE_BOUND_MAX,
    STRING_POOL_DEFAULT,
    UUID_BYTES_COUNT,
)
from .core.errors import RangeError

T = TypeVar("T")

_BYTES_PER_DRAW = 8
_MILLISECOND = timedelta(milliseconds=1)


@runtime_checkable
class UniformSource(Protocol):
    """The primitives a toolkit needs from a generator."""

    def next_uint64(self) -> int:
        ...

    def next_float64(self) -> float:
        ...

    def int_below(self, bound: int) -> int:
        ...


def _whole(value: Any, name: str) -> int:
    """Floor a real number to an int, rejecting bools and non-finite values."""
    if isinstance(value, bool):
        raise RangeError(f"{name} must be a number, got bool")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and math.isfinite(value):
        return math.floor(value)
    raise RangeError(f"{name} must be a finite number, got {value!r}")


def _finite(value: Any, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise RangeError(f"{name} must be a finite number, got {value!r}")
    result = float(value)
    if not math.isfinite(result):
        raise RangeError(f"{name} must be a finite number, got {value!r}")
    return result


def _slice_bounds(seq: Sequence[Any], begin: Any, end: Any) -> tuple[int, int]:
    start = 0 if begin is None else max(0, _whole(begin, "begin"))
    stop = len(seq) if end is None else min(len(seq), _whole(end, "end"))
    if stop <= start:
        raise RangeError(f"empty range [{start}, {stop}) in sequence of length {len(seq)}")
    return start, stop


class RandomToolkit:
    """Higher-level random helpers bound to one uniform source."""

    def __init__(self, source: UniformSource) -> None:
        assert isinstance(source, UniformSource), "source must provide the uniform primitives"
        self._source = source

    @property
    def source(self) -> UniformSource:
        return self._source

    # =========================================================================
    # Numbers
    # =========================================================================

    def integer(self, low: int, high: int) -> int:
        """Uniform integer in [low, high]; reversed endpoints are swapped.

        Raises:
            RangeError: If an endpoint is not an integer or the range holds
                more than 2^64 values.
        """
        for name, value in (("low", low), ("high", high)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise RangeError(f"{name} must be an integer, got {value!r}")
        if high < low:
            low, high = high, low
        span = high - low + 1
        if span > SAMPLE_BOUND_MAX:
            raise RangeError(f"range [{low}, {high}] exceeds 2^64 values")
        return self._source.int_below(span) + low

    def real(self, low: float, high: float, inclusive: bool = False) -> float:
        """Uniform float in [low, high), or approximately [low, high] when inclusive."""
        a = _finite(low, "low")
        b = _finite(high, "high")
        if b < a:
            a, b = b, a
        span = b - a + (sys.float_info.epsilon if inclusive else 0.0)
        if not math.isfinite(span):
            raise RangeError(f"range [{a}, {b}] is too wide for a float")
        x = self._source.next_float64()
        if inclusive and x == 0.0:
            x = math.ulp(0.0)
        return a + x * span

    # =========================================================================
    # Booleans
    # =========================================================================

    def boolean(self) -> bool:
        """Fair coin."""
        return self._source.int_below(2) == 1

    def boolean_percent(self, percentage: float) -> bool:
        """True with the given percent chance (0..100)."""
        p = _finite(percentage, "percentage")
        if not 0 <= p <= PERCENT_MAX:
            raise RangeError(f"percentage ({percentage}) must be in [0, {PERCENT_MAX}]")
        return self._source.int_below(PERCENT_MAX) < p

    def boolean_ratio(self, numerator: int, denominator: int) -> bool:
        """True with probability ``numerator / denominator``, exactly."""
        if not all(isinstance(v, int) and not isinstance(v, bool) for v in (numerator, denominator)):
            raise RangeError("numerator and denominator must be integers")
        if not (0 < denominator <= SAMPLE_BOUND_MAX and 0 <= numerator <= denominator):
            raise RangeError(f"invalid ratio {numerator}/{denominator}")
        return self._source.int_below(denominator) < numerator

    # =========================================================================
    # Sequences
    # =========================================================================

    def pick(self, seq: Sequence[T], begin: int | None = None, end: int | None = None) -> T:
        """Uniform element of ``seq[begin:end]``.

        Raises:
            RangeError: If the slice is empty.
        """
        start, stop = _slice_bounds(seq, begin, end)
        return seq[self._source.int_below(stop - start) + start]

    def picker(
        self, seq: Sequence[T], begin: int | None = None, end: int | None = None
    ) -> Callable[[], T]:
        """Callable that picks from a fixed slice. The slice is validated now."""
        start, stop = _slice_bounds(seq, begin, end)
        return lambda: self.pick(seq, start, stop)

    def shuffle(self, items: MutableSequence[T]) -> MutableSequence[T]:
        """Fisher-Yates shuffle in place. Returns ``items`` for chaining."""
        for i in range(len(items) - 1, 0, -1):
            j = self._source.int_below(i + 1)
            items[i], items[j] = items[j], items[i]
        return items

    def sample(self, population: Sequence[T], k: int) -> list[T]:
        """``k`` distinct elements (clamped to [0, len]) in random order."""
        count = max(0, min(len(population), _whole(k, "k")))
        pool = list(population)
        self.shuffle(pool)
        return pool[:count]

    # =========================================================================
    # Dice
    # =========================================================================

    def die(self, sides: int) -> int:
        """Roll one die; fewer than one side counts as one."""
        return self.integer(1, max(1, _whole(sides, "sides")))

    def dice(self, sides: int, count: int) -> list[int]:
        faces = max(1, _whole(sides, "sides"))
        return [self.integer(1, faces) for _ in range(max(0, _whole(count, "count")))]

    # =========================================================================
    # Bytes, Identifiers, Text
    # =========================================================================

    def random_bytes(self, length: int) -> bytes:
        """``length`` bytes, eight per draw, most significant byte first."""
        size = max(0, _whole(length, "length"))
        out = bytearray()
        while len(out) < size:
            word = self._source.next_uint64().to_bytes(_BYTES_PER_DRAW, "big")
            out += word[: size - len(out)]
        return bytes(out)

    def uuid4(self) -> str:
        """Random (version 4, RFC 4122 variant) UUID in canonical form."""
        raw = bytearray(self.random_bytes(UUID_BYTES_COUNT))
        raw[6] = (raw[6] & 0x0F) | 0x40
        raw[8] = (raw[8] & 0x3F) | 0x80
        return str(uuid.UUID(bytes=bytes(raw)))

    def string(self, length: int, pool: str | None = None) -> str:
        """Random string drawn character by character from ``pool``."""
        chars = STRING_POOL_DEFAULT if pool is None else pool
        size = max(0, _whole(length, "length"))
        if size and not chars:
            raise RangeError("pool must not be empty")
        return "".join(chars[self._source.int_below(len(chars))] for _ in range(size))

    def hex(self, length: int, upper: bool = False) -> str:
        alphabet = HEX_ALPHABET_UPPER if upper else HEX_ALPHABET_LOWER
        size = max(0, _whole(length, "length"))
        return "".join(alphabet[self._source.int_below(16)] for _ in range(size))

    # =========================================================================
    # Dates
    # =========================================================================

    def date(self, start: datetime, end: datetime) -> datetime:
        """Uniform datetime in [start, end] at millisecond resolution.

        Offsets are whole milliseconds counted from the earlier endpoint.
        """
        if not (isinstance(start, datetime) and isinstance(end, datetime)):
            raise RangeError("start and end must be datetime instances")
        try:
            if end < start:
                start, end = end, start
            span = (end - start) // _MILLISECOND + 1
        except TypeError as e:
            raise RangeError(f"cannot compare start and end: {e}") from e
        if span > SAMPLE_BOUND_MAX:
            raise RangeError("date range exceeds 2^64 milliseconds")
        return start + self._source.int_below(span) * _MILLISECOND
