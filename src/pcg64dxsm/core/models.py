"""
PCG64-DXSM Data Models

- GeneratorStateRecord: portable snapshot of a generator (export/import)
- SeedRecord: the seed parameters a generator can always rewind to
"""

from dataclasses import dataclass
from typing import Any

from pydantic import AliasChoices, BaseModel, Field, field_validator

from pcg64dxsm.constants import STATE_HEX_DIGITS_COUNT


def hex128(value: int) -> str:
    """Format a 128-bit word as ``0x`` plus 32 zero-padded hex digits."""
    return f"0x{value:0{STATE_HEX_DIGITS_COUNT}x}"


# =============================================================================
# State Export
# =============================================================================


class GeneratorStateRecord(BaseModel):
    """Exported generator state.

    ``state`` and ``increment`` are hex strings, ``position`` a decimal
    string, so the record survives JSON without precision loss. Integers are
    accepted on input and converted to the canonical string forms. The
    ``inc``/``counter`` keys of other PCG64-DXSM exporters are accepted too.
    """

    state: str
    increment: str = Field(validation_alias=AliasChoices("increment", "inc"))
    position: str = Field(default="0", validation_alias=AliasChoices("position", "counter"))

    @field_validator("state", "increment", mode="before")
    @classmethod
    def _word_to_str(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
            return hex128(value)
        return value

    @field_validator("position", mode="before")
    @classmethod
    def _position_to_str(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


# =============================================================================
# Seed Record
# =============================================================================


@dataclass(frozen=True)
class SeedRecord:
    """Seed parameters before the canonical seeding step.

    ``seed_increment`` is stored already forced odd.
    """

    seed_state: int
    seed_increment: int

    def __post_init__(self) -> None:
        assert self.seed_increment & 1 == 1, "seed increment must be odd"
