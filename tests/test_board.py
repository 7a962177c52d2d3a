"""
Tests for the board grid.
"""
import pytest

from bicho_war.gameplay.board import Board
from bicho_war.gameplay.creatures import Creature, CreatureType


class TestBoard:
    """Tests for Board class."""

    def test_create_board(self):
        """Board initializes with correct dimensions, all empty."""
        board = Board(3, 4)
        assert board.rows == 3
        assert board.cols == 4
        assert board.shape == (3, 4)
        for _, _, creature in board.iter_cells():
            assert creature == Creature.empty()

    def test_in_bounds(self):
        """in_bounds correctly identifies valid coordinates."""
        board = Board(3, 4)

        assert board.in_bounds(0, 0)
        assert board.in_bounds(2, 3)

        assert not board.in_bounds(-1, 0)
        assert not board.in_bounds(0, -1)
        assert not board.in_bounds(3, 0)
        assert not board.in_bounds(0, 4)

    def test_get_set(self):
        """Cells can be read and replaced."""
        board = Board(2, 2)
        alien = Creature(CreatureType.ALIEN)

        assert board.set(1, 0, alien)
        assert board.get(1, 0) is alien

    def test_get_set_out_of_bounds(self):
        """Out of bounds reads give None and writes fail."""
        board = Board(2, 2)
        assert board.get(2, 0) is None
        assert not board.set(0, 5, Creature(CreatureType.NORMAL))

    def test_iter_cells_row_major(self):
        """iter_cells walks rows first."""
        board = Board(2, 3)
        coords = [(r, c) for r, c, _ in board.iter_cells()]
        assert coords == [(0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2)]

    def test_fill(self):
        """fill replaces every cell with a new creature."""
        board = Board(2, 2)
        board.fill(lambda: Creature(CreatureType.NORMAL))
        creatures = [creature for _, _, creature in board.iter_cells()]
        assert all(c == Creature(CreatureType.NORMAL, 10) for c in creatures)
        # Each cell is its own object
        assert len({id(c) for c in creatures}) == 4

    def test_rejects_zero_size(self):
        with pytest.raises(ValueError):
            Board(0, 3)


class TestBoardCopies:
    """Tests for building and copying boards."""

    def test_from_rows(self):
        """from_rows copies the given creatures."""
        source = Creature(CreatureType.NORMAL, 5)
        board = Board.from_rows([[source, Creature.empty()], [Creature.empty(), Creature.empty()]])
        assert board.shape == (2, 2)
        assert board.get(0, 0) == source
        assert board.get(0, 0) is not source

    def test_from_rows_ragged(self):
        """Ragged input is rejected."""
        with pytest.raises(ValueError):
            Board.from_rows([[Creature.empty(), Creature.empty()], [Creature.empty()]])

    def test_from_rows_empty(self):
        with pytest.raises(ValueError):
            Board.from_rows([])
        with pytest.raises(ValueError):
            Board.from_rows([[]])

    def test_snapshot_is_detached(self):
        """Mutating a snapshot doesn't touch the board."""
        board = Board(2, 2)
        board.set(0, 0, Creature(CreatureType.ALIEN))
        snap = board.snapshot()
        snap[0][0].damage_by_bomb()
        assert board.get(0, 0).health == 20
        assert isinstance(snap, tuple)
        assert isinstance(snap[0], tuple)

    def test_equality(self):
        """Boards compare cell by cell."""
        a = Board(2, 2)
        b = Board(2, 2)
        assert a == b
        b.set(1, 1, Creature(CreatureType.NORMAL))
        assert a != b
        assert a != Board(2, 3)

    def test_copy(self):
        board = Board(2, 2)
        board.set(0, 1, Creature(CreatureType.NORMAL, 7))
        clone = board.copy()
        assert clone == board
        clone.get(0, 1).damage_by_bomb()
        assert board.get(0, 1).health == 7
