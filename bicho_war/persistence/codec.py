"""
JSON codec for saved boards.

A save file holds a 2D array of creature objects:

    [[{"health": 10, "type": "NORMAL"}, {"health": 0, "type": "VACIO"}], ...]

Type labels are case-sensitive.
"""

import logging
from pathlib import Path
from typing import Literal, Optional, Sequence

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from bicho_war.gameplay.creatures import Creature, CreatureType

logger = logging.getLogger(__name__)


class SaveFileError(IOError):
    """A save file could not be written, read or parsed."""


class CreatureRecord(BaseModel):
    """Schema for one serialized cell."""

    health: int = Field(default=0)
    type: Literal["NORMAL", "ALIEN", "VACIO"] = Field(default="VACIO")

    @classmethod
    def from_creature(cls, creature: Creature) -> "CreatureRecord":
        return cls(health=creature.health, type=creature.creature_type.label)

    def to_creature(self) -> Creature:
        return Creature(CreatureType.from_label(self.type), self.health)


# A JSON null document decodes to None
_board_adapter = TypeAdapter(Optional[list[list[CreatureRecord]]])


def encode_board(rows: Sequence[Sequence[Creature]]) -> str:
    """Serialize nested rows of creatures to JSON text."""
    records = [[CreatureRecord.from_creature(c) for c in row] for row in rows]
    return _board_adapter.dump_json(records).decode("utf-8")


def decode_board(text: str) -> list[list[Creature]] | None:
    """
    Parse JSON text into nested rows of creatures.

    Returns None for a null document. Row lengths are not checked here.
    Raises SaveFileError on malformed JSON or schema violations.
    """
    try:
        records = _board_adapter.validate_json(text)
    except ValidationError as e:
        raise SaveFileError(f"Invalid save data: {e}") from e

    if records is None:
        return None
    return [[record.to_creature() for record in row] for row in records]


def write_board(path: str | Path, rows: Sequence[Sequence[Creature]]) -> None:
    """Write the board to path, overwriting any existing file."""
    data = encode_board(rows)
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(data)
    except OSError as e:
        raise SaveFileError(f"Could not write save file {path}: {e}") from e
    logger.debug(f"Wrote board to {path} ({len(data)} bytes)")


def read_board(path: str | Path) -> list[list[Creature]] | None:
    """
    Read a board from path.

    Returns None if the file does not exist (or holds a null document).
    Raises SaveFileError if it exists but can't be read or parsed.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except FileNotFoundError:
        logger.debug(f"No save file at {path}")
        return None
    except (OSError, UnicodeDecodeError) as e:
        raise SaveFileError(f"Could not read save file {path}: {e}") from e

    logger.debug(f"Read board from {path} ({len(text)} chars)")
    return decode_board(text)
