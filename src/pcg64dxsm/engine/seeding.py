"""
Seed inputs and entropy sources

A generator is seeded from exactly one of three inputs:

- ``EntropySeed``: 32 bytes from a secure entropy source
- ``BytesSeed``: 16 raw bytes (state only) or 32 raw bytes (state, increment)
- ``PairSeed``: an explicit (state, increment) pair of integers or numeric strings

Each input resolves to an unreduced ``(state, increment)`` pair; the
generator takes care of reduction, odd-forcing and the canonical seeding step.
"""

from __future__ import annotations

import logging
import re
import secrets
from dataclasses import dataclass, field
from typing import Protocol, Sequence, Union, runtime_checkable

from ..constants import (
    SEED_BYTES_COUNT_FULL,
    SEED_BYTES_COUNT_STATE_ONLY,
    SEED_INCREMENT_DEFAULT,
)
from ..core.errors import EntropyUnavailableError, SeedLengthError, SeedParseError
from .wide import mask128

logger = logging.getLogger(__name__)

_DECIMAL_RE = re.compile(r"^[0-9]+$")
_HEX_RE = re.compile(r"^[0-9a-f]+$")


# =============================================================================
# Entropy Sources
# =============================================================================


@runtime_checkable
class EntropySource(Protocol):
    """Capability to read secure random bytes.

    Abstract interface allows swapping the system source for a fixed one in
    tests.
    """

    def read(self, count: int) -> bytes:
        """Return exactly ``count`` random bytes."""
        ...


class SystemEntropySource:
    """Entropy from the operating system via ``secrets``."""

    def read(self, count: int) -> bytes:
        try:
            return secrets.token_bytes(count)
        except (NotImplementedError, OSError) as e:
            raise EntropyUnavailableError(f"system entropy source failed: {e}") from e


@dataclass
class FixedEntropySource:
    """Deterministic byte source that replays a fixed buffer.

    Reads consume the buffer front to back; running out is reported as
    unavailable entropy.
    """

    data: bytes
    _offset: int = field(default=0, init=False)

    def read(self, count: int) -> bytes:
        assert count >= 0, f"count ({count}) must be non-negative"
        end = self._offset + count
        if end > len(self.data):
            raise EntropyUnavailableError(
                f"fixed entropy exhausted: requested {count} bytes, "
                f"{len(self.data) - self._offset} remaining"
            )
        chunk = bytes(self.data[self._offset:end])
        self._offset = end
        return chunk


# =============================================================================
# Numeric Parsing
# =============================================================================


def parse_uint(value: int | str) -> int:
    """Convert an int or numeric string to an unbounded integer.

    Strings are trimmed and lowercased, then read as hex when prefixed with
    ``0x``, decimal when made only of decimal digits, and hex when made only
    of hex digits.

    Raises:
        SeedParseError: For other types or unparseable strings.
    """
    if isinstance(value, bool):
        raise SeedParseError(f"cannot convert bool to a 128-bit integer: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip().lower()
        if text.startswith("0x") and _HEX_RE.match(text[2:]):
            return int(text[2:], 16)
        if _DECIMAL_RE.match(text):
            return int(text, 10)
        if _HEX_RE.match(text):
            return int(text, 16)
        raise SeedParseError(f"invalid integer string: {value!r}")
    raise SeedParseError(f"cannot convert {type(value).__name__} to a 128-bit integer")


def parse_uint128(value: int | str) -> int:
    """``parse_uint`` reduced modulo 2^128."""
    return mask128(parse_uint(value))


def bytes_to_uint(data: bytes) -> int:
    return int.from_bytes(data, "big")


def _normalize_bytes(data: bytes | bytearray | memoryview | Sequence[int]) -> bytes:
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    if isinstance(data, (int, str)):
        raise SeedParseError(f"seed bytes must be a byte sequence, got {type(data).__name__}")
    try:
        return bytes(data)
    except (TypeError, ValueError) as e:
        raise SeedParseError(f"seed bytes must be integers in 0..255: {e}") from e


# =============================================================================
# Seed Inputs
# =============================================================================


@dataclass(frozen=True)
class EntropySeed:
    """Seed from a secure entropy source (the default)."""

    source: EntropySource = field(default_factory=SystemEntropySource)

    def resolve(self) -> tuple[int, int]:
        data = self.source.read(SEED_BYTES_COUNT_FULL)
        if len(data) != SEED_BYTES_COUNT_FULL:
            raise EntropyUnavailableError(
                f"entropy source returned {len(data)} bytes, expected {SEED_BYTES_COUNT_FULL}"
            )
        half = SEED_BYTES_COUNT_STATE_ONLY
        return bytes_to_uint(data[:half]), bytes_to_uint(data[half:])


@dataclass(frozen=True)
class BytesSeed:
    """Seed from 16 (state only) or 32 (state, increment) raw bytes."""

    data: bytes

    def __post_init__(self) -> None:
        normalized = _normalize_bytes(self.data)
        if len(normalized) not in (SEED_BYTES_COUNT_STATE_ONLY, SEED_BYTES_COUNT_FULL):
            raise SeedLengthError(
                f"seed bytes must be {SEED_BYTES_COUNT_STATE_ONLY} or "
                f"{SEED_BYTES_COUNT_FULL} long, got {len(normalized)}"
            )
        object.__setattr__(self, "data", normalized)

    def resolve(self) -> tuple[int, int]:
        if len(self.data) == SEED_BYTES_COUNT_STATE_ONLY:
            return bytes_to_uint(self.data), SEED_INCREMENT_DEFAULT
        half = SEED_BYTES_COUNT_STATE_ONLY
        return bytes_to_uint(self.data[:half]), bytes_to_uint(self.data[half:])


@dataclass(frozen=True)
class PairSeed:
    """Seed from an explicit (state, increment) pair."""

    state: int
    increment: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "state", parse_uint128(self.state))
        object.__setattr__(self, "increment", parse_uint128(self.increment))

    def resolve(self) -> tuple[int, int]:
        return self.state, self.increment


SeedInput = Union[EntropySeed, BytesSeed, PairSeed]


def resolve_seed(seed: SeedInput) -> tuple[int, int]:
    """Resolve a seed input to ``(state, increment)`` reduced modulo 2^128."""
    if not isinstance(seed, (EntropySeed, BytesSeed, PairSeed)):
        raise SeedParseError(f"unsupported seed input: {type(seed).__name__}")
    state, increment = seed.resolve()
    logger.debug("Resolved %s", type(seed).__name__)
    return mask128(state), mask128(increment)
