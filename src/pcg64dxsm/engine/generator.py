"""
Pcg64Dxsm - the PCG64-DXSM generator

128-bit LCG state, 128-bit odd increment (the stream), DXSM output
permutation, and exact positioning in both directions.

TigerStyle:
- Output is derived from the state *before* each step
- Positioning never replays draws; it applies a single affine transform
- Every failing call raises before any state is touched
"""

from __future__ import annotations

import logging
import math
import re
from typing import Any, Mapping, Sequence

from pydantic import ValidationError

from ..constants import (
    FLOAT_MANTISSA_BITS,
    FLOAT_MANTISSA_SCALE,
    PCG_DXSM_MULTIPLIER,
    PCG_JUMP_DISTANCE,
    PCG_MULTIPLIER,
    UINT64_BITS,
    UINT64_MASK,
)
from ..core.errors import SeedError, StateImportError, UsageError
from ..core.models import GeneratorStateRecord, SeedRecord, hex128
from .affine import AffineTransform
from .sampling import lemire_below
from .seeding import (
    BytesSeed,
    EntropySeed,
    EntropySource,
    PairSeed,
    SeedInput,
    parse_uint128,
    resolve_seed,
)
from .wide import add128, high64, low64, mask128

logger = logging.getLogger(__name__)

_POSITION_RE = re.compile(r"^-?[0-9]+$")


def _as_step_count(value: Any, name: str) -> int:
    """Normalize a signed step count. Floats are truncated toward zero."""
    if isinstance(value, bool):
        raise UsageError(f"{name} must be an integer, got bool")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and math.isfinite(value):
        return math.trunc(value)
    raise UsageError(f"{name} must be a finite integer, got {value!r}")


def _positioning_transform(delta: int, increment: int) -> AffineTransform:
    """Affine map that moves a state ``delta`` steps along the stream."""
    if delta >= 0:
        return AffineTransform.lcg_step(PCG_MULTIPLIER, increment).power(delta)
    return AffineTransform.lcg_step_inverse(PCG_MULTIPLIER, increment).power(-delta)


def dxsm(state: int) -> int:
    """DXSM output permutation of a 128-bit state."""
    hi = high64(state)
    lo = low64(state) | 1
    hi ^= hi >> 32
    hi = (hi * PCG_DXSM_MULTIPLIER) & UINT64_MASK
    hi ^= hi >> 48
    hi = (hi * lo) & UINT64_MASK
    return hi


class Pcg64Dxsm:
    """PCG64-DXSM pseudo-random generator.

    Usage:
        rng = Pcg64Dxsm(PairSeed(state=0x1234, increment=0x5678))
        rng.next_uint64()
        rng.int_below(6)
        rng.seek(10**30)          # exact, O(log n)
        worker = rng.jumped(1)    # independent, non-overlapping stream

    Not thread-safe. Give each thread its own instance via ``jumped``.
    """

    def __init__(self, seed: SeedInput | None = None) -> None:
        """Seed a generator.

        Args:
            seed: One of ``EntropySeed``, ``BytesSeed``, ``PairSeed``. Omitted
                means 32 bytes from the system entropy source.

        Raises:
            SeedError: If the seed input is malformed or entropy is unavailable.
        """
        if seed is None:
            seed = EntropySeed()

        state, increment = resolve_seed(seed)
        self._seed = SeedRecord(seed_state=state, seed_increment=increment | 1)
        self._state = 0
        self._increment = 0
        self._position = 0
        self._restart()

        logger.debug("Seeded generator from %s (increment=%s)", type(seed).__name__, hex128(self._increment))

    # =========================================================================
    # Factories
    # =========================================================================

    @classmethod
    def from_seed(cls, state: int | str, increment: int | str) -> Pcg64Dxsm:
        """Seed from an explicit (state, increment) pair."""
        return cls(PairSeed(state=state, increment=increment))

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview | Sequence[int]) -> Pcg64Dxsm:
        """Seed from 16 or 32 raw bytes."""
        return cls(BytesSeed(data=data))

    @classmethod
    def from_entropy(cls, source: EntropySource | None = None) -> Pcg64Dxsm:
        """Seed from a secure entropy source (system source by default)."""
        if source is None:
            return cls(EntropySeed())
        return cls(EntropySeed(source=source))

    @classmethod
    def from_state(cls, record: GeneratorStateRecord | Mapping[str, Any]) -> Pcg64Dxsm:
        """Rebuild a generator from an exported state record."""
        rng = cls.__new__(cls)
        rng.import_state(record)
        return rng

    # =========================================================================
    # Introspection
    # =========================================================================

    @property
    def state(self) -> int:
        """Live 128-bit LCG register."""
        return self._state

    @property
    def increment(self) -> int:
        """Odd 128-bit stream increment."""
        return self._increment

    @property
    def seed_record(self) -> SeedRecord:
        return self._seed

    def pos(self) -> int:
        """Net number of draws since the seed point (may be negative)."""
        return self._position

    @property
    def position(self) -> int:
        return self._position

    def __repr__(self) -> str:
        return (
            f"Pcg64Dxsm(state={hex128(self._state)}, "
            f"increment={hex128(self._increment)}, position={self._position})"
        )

    # =========================================================================
    # Core Draws
    # =========================================================================

    def _step(self) -> int:
        """Advance the LCG once and return DXSM of the previous state."""
        old = self._state
        self._state = mask128(old * PCG_MULTIPLIER + self._increment)
        return dxsm(old)

    def next_uint64(self) -> int:
        """Next raw 64-bit output."""
        self._position += 1
        return self._step()

    def next_float64(self) -> float:
        """Uniform float in [0, 1) built from the top 53 bits of a draw."""
        return (self.next_uint64() >> (UINT64_BITS - FLOAT_MANTISSA_BITS)) / FLOAT_MANTISSA_SCALE

    def random(self) -> float:
        """Alias of ``next_float64``."""
        return self.next_float64()

    def int_below(self, bound: int) -> int:
        """Unbiased integer in [0, bound) for ``1 <= bound <= 2^64``.

        Raises:
            BoundError: If ``bound`` is outside that range (no draw is made).
        """
        return lemire_below(self.next_uint64, bound)

    # =========================================================================
    # Positioning
    # =========================================================================

    def _restart(self) -> None:
        """Return to the seed point: canonical step plus one uncounted draw."""
        self._state = add128(self._seed.seed_state, self._seed.seed_increment)
        self._increment = self._seed.seed_increment
        self._step()
        self._position = 0

    def advance(self, delta: int) -> Pcg64Dxsm:
        """Move ``delta`` steps forward (or backward when negative).

        Equivalent to ``delta`` draws (or undoing ``-delta`` draws) in
        O(log |delta|) time. Returns ``self``.
        """
        steps = _as_step_count(delta, "delta")
        if steps == 0:
            return self

        self._state = _positioning_transform(steps, self._increment).apply(self._state)
        self._position += steps
        return self

    def seek(self, position: int) -> Pcg64Dxsm:
        """Jump to an absolute position measured from the seed point.

        Always recomputes from the seed record, so the result does not depend
        on the current position. Returns ``self``.
        """
        target = _as_step_count(position, "position")
        self._restart()
        if target != 0:
            self.advance(target)

        logger.debug("Seeked to position %d", target)
        return self

    def reset(self) -> Pcg64Dxsm:
        """Return to position 0."""
        return self.seek(0)

    def clone(self) -> Pcg64Dxsm:
        """Fully independent copy."""
        twin = self.__class__.__new__(self.__class__)
        twin._seed = self._seed
        twin._state = self._state
        twin._increment = self._increment
        twin._position = self._position
        return twin

    __copy__ = clone

    def __deepcopy__(self, memo: dict) -> Pcg64Dxsm:
        return self.clone()

    def jumped(self, jumps: int = 1) -> Pcg64Dxsm:
        """Copy advanced by ``jumps * PCG_JUMP_DISTANCE``; ``self`` is unchanged.

        Consecutive jump counts give streams far enough apart to hand one to
        each parallel worker.
        """
        count = _as_step_count(jumps, "jumps")
        twin = self.clone()
        twin.advance(PCG_JUMP_DISTANCE * count)

        logger.debug("Created generator jumped by %d", count)
        return twin

    # =========================================================================
    # State Export / Import
    # =========================================================================

    def export_state(self) -> GeneratorStateRecord:
        """Snapshot of state, increment and position."""
        return GeneratorStateRecord(
            state=hex128(self._state),
            increment=hex128(self._increment),
            position=str(self._position),
        )

    def import_state(self, record: GeneratorStateRecord | Mapping[str, Any]) -> Pcg64Dxsm:
        """Load an exported snapshot. The increment is forced odd.

        The seed record is re-derived by rewinding the imported position, so
        ``seek``/``reset`` stay exact after an import.

        Raises:
            StateImportError: If the record is malformed. The generator is
                left unchanged.
        """
        if not isinstance(record, GeneratorStateRecord):
            try:
                record = GeneratorStateRecord.model_validate(dict(record))
            except (ValidationError, TypeError, ValueError) as e:
                raise StateImportError(f"invalid state record: {e}") from e

        try:
            state = parse_uint128(record.state)
            increment = parse_uint128(record.increment) | 1
        except SeedError as e:
            raise StateImportError(f"invalid state record: {e}") from e
        text = record.position.strip()
        if not _POSITION_RE.match(text):
            raise StateImportError(f"invalid position: {record.position!r}")
        position = int(text)

        # Walk back to the seed point, then undo the mixing draw and the
        # canonical ``state + increment`` step.
        origin = _positioning_transform(-position, increment).apply(state)
        premix = AffineTransform.lcg_step_inverse(PCG_MULTIPLIER, increment).apply(origin)
        seed_state = mask128(premix - increment)

        self._seed = SeedRecord(seed_state=seed_state, seed_increment=increment)
        self._state = state
        self._increment = increment
        self._position = position

        logger.debug("Imported state at position %d", position)
        return self
