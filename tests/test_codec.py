"""
Tests for the save file codec.
"""
import json

import pytest

from bicho_war.gameplay.creatures import Creature, CreatureType
from bicho_war.persistence.codec import (
    CreatureRecord,
    SaveFileError,
    decode_board,
    encode_board,
    read_board,
    write_board,
)


def sample_rows():
    return [
        [Creature(CreatureType.NORMAL, 10), Creature(CreatureType.ALIEN, 15)],
        [Creature.empty(), Creature(CreatureType.NORMAL, 0)],
    ]


class TestEncode:
    """Tests for the JSON layout."""

    def test_format(self):
        """Cells become {health, type} objects with type labels."""
        data = json.loads(encode_board(sample_rows()))
        assert data == [
            [{"health": 10, "type": "NORMAL"}, {"health": 15, "type": "ALIEN"}],
            [{"health": 0, "type": "VACIO"}, {"health": 0, "type": "NORMAL"}],
        ]

    def test_record_from_creature(self):
        record = CreatureRecord.from_creature(Creature(CreatureType.ALIEN, 3))
        assert record.health == 3
        assert record.type == "ALIEN"


class TestDecode:
    """Tests for parsing save data."""

    def test_decode(self):
        """Decoding gives back equal creatures."""
        text = '[[{"health": 10, "type": "NORMAL"}, {"health": 0, "type": "VACIO"}]]'
        rows = decode_board(text)
        assert rows == [[Creature(CreatureType.NORMAL, 10), Creature.empty()]]

    def test_decode_null(self):
        """A null document decodes to None."""
        assert decode_board("null") is None

    def test_missing_fields_default(self):
        """Missing fields default to an empty cell."""
        rows = decode_board("[[{}]]")
        assert rows == [[Creature.empty()]]

    def test_negative_health_clamps(self):
        rows = decode_board('[[{"health": -4, "type": "ALIEN"}]]')
        assert rows[0][0].health == 0

    def test_ragged_rows_pass_through(self):
        """Row lengths are the engine's concern."""
        rows = decode_board('[[{}, {}], [{}]]')
        assert [len(r) for r in rows] == [2, 1]

    @pytest.mark.parametrize("text", [
        "not json",
        '{"health": 1}',
        '[[{"health": 1, "type": "normal"}]]',
        '[[{"health": "lots", "type": "ALIEN"}]]',
        "[1, 2]",
    ])
    def test_invalid(self, text):
        """Malformed data raises SaveFileError."""
        with pytest.raises(SaveFileError):
            decode_board(text)

    def test_save_file_error_is_ioerror(self):
        assert issubclass(SaveFileError, IOError)


class TestFiles:
    """Tests for reading and writing save files."""

    def test_write_then_read(self, tmp_path):
        path = tmp_path / "partida.json"
        write_board(path, sample_rows())
        assert read_board(path) == sample_rows()

    def test_write_overwrites(self, tmp_path):
        path = tmp_path / "partida.json"
        path.write_text("old contents", encoding="utf-8")
        write_board(path, [[Creature.empty()]])
        assert json.loads(path.read_text(encoding="utf-8")) == [[{"health": 0, "type": "VACIO"}]]

    def test_read_missing(self, tmp_path):
        """A missing file reads as None."""
        assert read_board(tmp_path / "nothing.json") is None

    def test_read_garbage(self, tmp_path):
        path = tmp_path / "partida.json"
        path.write_text("{{{", encoding="utf-8")
        with pytest.raises(SaveFileError):
            read_board(path)

    def test_read_directory(self, tmp_path):
        """A path that can't be read raises SaveFileError."""
        with pytest.raises(SaveFileError):
            read_board(tmp_path)

    def test_write_into_missing_directory(self, tmp_path):
        with pytest.raises(SaveFileError):
            write_board(tmp_path / "missing" / "partida.json", sample_rows())
