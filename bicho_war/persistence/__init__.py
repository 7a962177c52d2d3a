"""
Save file persistence for the game board.
"""

from bicho_war.persistence.codec import (
    CreatureRecord,
    SaveFileError,
    decode_board,
    encode_board,
    read_board,
    write_board,
)

__all__ = [
    "CreatureRecord",
    "SaveFileError",
    "decode_board",
    "encode_board",
    "read_board",
    "write_board",
]
