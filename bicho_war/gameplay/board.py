"""
Board grid system.
NO UI DEPENDENCIES.
"""
from typing import Callable, Iterator, List, Optional, Sequence, Tuple

from .creatures import Creature


class Board:
    """
    Fixed-size grid of creatures, stored row-major.

    Coordinate system:
    - (0, 0) is top-left
    - row increases downward
    - col increases to the right
    """

    def __init__(self, rows: int, cols: int):
        if rows < 1 or cols < 1:
            raise ValueError(f"Board needs at least one row and column, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self._cells: List[List[Creature]] = [
            [Creature.empty() for _ in range(cols)] for _ in range(rows)
        ]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Creature]]) -> 'Board':
        """
        Build a board from nested rows of creatures (copied).
        Raises ValueError if the input is empty or ragged.
        """
        if not rows or not rows[0]:
            raise ValueError("Board rows must not be empty")
        width = len(rows[0])
        for index, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(
                    f"Row {index} has {len(row)} cells, expected {width}"
                )

        board = cls(len(rows), width)
        for r, row in enumerate(rows):
            for c, creature in enumerate(row):
                board._cells[r][c] = creature.copy()
        return board

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.rows, self.cols)

    def in_bounds(self, row: int, col: int) -> bool:
        """Check if coordinates are within board bounds."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def get(self, row: int, col: int) -> Optional[Creature]:
        """Get the creature at coordinates, or None if out of bounds."""
        if not self.in_bounds(row, col):
            return None
        return self._cells[row][col]

    def set(self, row: int, col: int, creature: Creature) -> bool:
        """
        Put a creature in a cell.
        Returns False if coordinates are out of bounds.
        """
        if not self.in_bounds(row, col):
            return False
        self._cells[row][col] = creature
        return True

    def fill(self, factory: Callable[[], Creature]) -> None:
        """Replace every cell with a fresh creature from factory, row-major."""
        for row in self._cells:
            for c in range(self.cols):
                row[c] = factory()

    def iter_cells(self) -> Iterator[Tuple[int, int, Creature]]:
        """Iterate over (row, col, creature) in row-major order."""
        for r, row in enumerate(self._cells):
            for c, creature in enumerate(row):
                yield r, c, creature

    def copy(self) -> 'Board':
        return Board.from_rows(self._cells)

    def snapshot(self) -> Tuple[Tuple[Creature, ...], ...]:
        """Immutable nested copy of the grid."""
        return tuple(
            tuple(creature.copy() for creature in row) for row in self._cells
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.shape == other.shape and self._cells == other._cells

    def __repr__(self) -> str:
        return f"Board({self.rows}x{self.cols})"
