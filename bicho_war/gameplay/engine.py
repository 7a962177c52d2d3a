"""
Main engine class - owns the board and runs every game action.
NO UI DEPENDENCIES.

This is the central gameplay module. It can be fully tested
without any presentation layer.
"""
import logging
import random
from pathlib import Path
from typing import Iterator, Optional, Sequence, Tuple, Union

from bicho_war.config import GameSettings, get_settings
from bicho_war.persistence.codec import read_board, write_board

from .board import Board
from .creatures import Creature, CreatureType
from .statistics import GameStatistics

logger = logging.getLogger(__name__)

# populate_random draws an index into this tuple for every cell
SPAWN_TABLE = (CreatureType.EMPTY, CreatureType.NORMAL, CreatureType.ALIEN)


class InvalidConfiguration(ValueError):
    """Board dimensions outside the allowed range."""


class GameEngine:
    """
    One game session: a board of creatures plus its statistics.

    The engine is the only thing that mutates the board. Callers get copies
    of creatures, never references into the grid.

    Usage:
        engine = GameEngine(3, 3, rng=random.Random(7))
        engine.populate_random()
        engine.shoot(0, 0)
        if engine.is_game_over():
            print(engine.statistics.report())
    """

    def __init__(
        self,
        rows: Optional[int] = None,
        cols: Optional[int] = None,
        *,
        settings: Optional[GameSettings] = None,
        rng: Optional[random.Random] = None,
        save_path: Union[str, Path, None] = None,
    ):
        self.settings = settings if settings is not None else get_settings()
        rows = self.settings.default_rows if rows is None else rows
        cols = self.settings.default_cols if cols is None else cols
        self._validate_board_size(rows, cols)

        self._rows = rows
        self._cols = cols
        self._board = Board(rows, cols)
        self._rng = rng if rng is not None else random.Random(self.settings.random_seed)
        self._statistics = GameStatistics()
        self.save_path = Path(save_path if save_path is not None else self.settings.save_file)

    def _validate_board_size(self, rows: int, cols: int) -> None:
        low, high = self.settings.min_board_size, self.settings.max_board_size
        if not self.settings.board_size_allowed(rows):
            raise InvalidConfiguration(f"Rows must be between {low} and {high}, got {rows}")
        if not self.settings.board_size_allowed(cols):
            raise InvalidConfiguration(f"Columns must be between {low} and {high}, got {cols}")

    # =========================================================================
    # STATE ACCESS
    # =========================================================================

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def statistics(self) -> GameStatistics:
        return self._statistics

    def in_bounds(self, row: int, col: int) -> bool:
        return self._board.in_bounds(row, col)

    def get_creature(self, row: int, col: int) -> Optional[Creature]:
        """Copy of the creature at coordinates, or None if out of bounds."""
        creature = self._board.get(row, col)
        return creature.copy() if creature is not None else None

    def place_creature(self, row: int, col: int, creature: Creature) -> bool:
        """Put a copy of creature in a cell. False if out of bounds."""
        return self._board.set(row, col, creature.copy())

    def snapshot(self) -> Tuple[Tuple[Creature, ...], ...]:
        """Immutable copy of the whole board, row-major."""
        return self._board.snapshot()

    def iter_cells(self) -> Iterator[Tuple[int, int, Creature]]:
        """Iterate over (row, col, creature copy) in row-major order."""
        for row, col, creature in self._board.iter_cells():
            yield row, col, creature.copy()

    def living_count(self) -> int:
        return sum(1 for _, _, creature in self._board.iter_cells() if creature.is_alive)

    def board_to_string(self) -> str:
        """Compact text dump: one line per row, cells as [row,col]=TEXT."""
        lines = []
        for r in range(self._rows):
            cells = [f"[{r},{c}]={self._board.get(r, c)}" for c in range(self._cols)]
            lines.append("  ".join(cells))
        return "\n".join(lines)

    # =========================================================================
    # BOARD SETUP
    # =========================================================================

    def reset_board(self) -> None:
        """Empty every cell."""
        self._board.fill(Creature.empty)

    def populate_random(self) -> None:
        """
        Fill each cell independently with EMPTY, NORMAL or ALIEN,
        each with probability 1/3. Creatures start at default health.
        """
        def spawn() -> Creature:
            return Creature(SPAWN_TABLE[self._rng.randrange(len(SPAWN_TABLE))])

        self._board.fill(spawn)
        logger.debug(f"Populated board: {self.living_count()} living creatures")

    def set_board(self, new_board: Union[Board, Sequence[Sequence[Creature]], None]) -> bool:
        """
        Replace the board with a copy of new_board.

        Returns False, leaving the board untouched, if new_board is None,
        empty, ragged, or doesn't match the configured dimensions.
        """
        if new_board is None:
            return False
        if isinstance(new_board, Board):
            candidate = new_board.copy()
        else:
            try:
                candidate = Board.from_rows(new_board)
            except ValueError as e:
                logger.warning(f"Rejected board: {e}")
                return False

        if candidate.shape != (self._rows, self._cols):
            logger.warning(
                f"Rejected board: {candidate.rows}x{candidate.cols} does not match "
                f"{self._rows}x{self._cols}"
            )
            return False

        self._board = candidate
        return True

    def new_game(self) -> None:
        """Start a fresh session on the same board size."""
        self.reset_board()
        self._statistics = GameStatistics()
        logger.info(f"New game started ({self._rows}x{self._cols})")

    # =========================================================================
    # ACTIONS
    # =========================================================================

    def shoot(self, row: int, col: int) -> bool:
        """
        Fire a bullet at a cell.
        Returns True if it hit a living creature. Out of bounds is a miss.
        """
        self._statistics.increment_turns()

        creature = self._board.get(row, col)
        if creature is None:
            self._statistics.record_shot(False)
            logger.debug(f"Shot at ({row}, {col}) is out of bounds")
            return False

        was_alive = creature.is_alive
        hit = creature.damage_by_bullet(self.settings.bullet_damage)
        self._statistics.record_shot(hit)

        if was_alive and creature.is_dead:
            self._record_defeat(creature, row, col)

        logger.debug(f"Shot at ({row}, {col}): hit={hit}, now {creature}")
        return hit

    def bomb_at(self, row: int, col: int) -> bool:
        """
        Drop a bomb on a cell, killing whatever lives there.
        Returns True if the target was alive.
        """
        self._statistics.increment_turns()
        self._statistics.record_bomb()

        creature = self._board.get(row, col)
        if creature is None:
            logger.debug(f"Bomb at ({row}, {col}) is out of bounds")
            return False

        was_alive = creature.is_alive
        hit = creature.damage_by_bomb()

        if was_alive and creature.is_dead:
            self._record_defeat(creature, row, col)

        logger.debug(f"Bomb at ({row}, {col}): hit={hit}")
        return hit

    def bomb_random(self) -> bool:
        """Bomb a uniformly random cell."""
        row = self._rng.randrange(self._rows)
        col = self._rng.randrange(self._cols)
        return self.bomb_at(row, col)

    def mutate_weakest(self) -> bool:
        """
        Mutate the living creature with the lowest health.

        Ties go to the first one found in row-major order.
        Returns False if nothing is alive.
        """
        weakest: Optional[Creature] = None
        position = None
        for row, col, creature in self._board.iter_cells():
            if creature.is_alive and (weakest is None or creature.health < weakest.health):
                weakest = creature
                position = (row, col)

        if weakest is None:
            return False

        weakest.mutate(self.settings.mutation_multiplier)
        self._statistics.record_mutation()
        logger.debug(f"Mutated creature at {position}: now {weakest}")
        return True

    def is_game_over(self) -> bool:
        """True when no living creature remains."""
        return all(creature.is_dead for _, _, creature in self._board.iter_cells())

    def _record_defeat(self, creature: Creature, row: int, col: int) -> None:
        self._statistics.record_defeat(creature.creature_type)
        logger.debug(
            f"Defeated {creature.creature_type.label} at ({row}, {col}), "
            f"+{creature.creature_type.points} points"
        )

    # =========================================================================
    # PERSISTENCE
    # =========================================================================

    def save(self, path: Union[str, Path, None] = None) -> Path:
        """
        Write the board to the save file, overwriting it.
        Raises SaveFileError if the write fails.
        """
        target = Path(path) if path is not None else self.save_path
        write_board(target, self._board.snapshot())
        logger.info(f"Game saved to {target}")
        return target

    def load(self, path: Union[str, Path, None] = None) -> bool:
        """
        Replace the board with the one in the save file.

        Returns False if there is no save file or its dimensions don't match.
        Raises SaveFileError if the file exists but can't be read or parsed;
        the board is left untouched in every failure case.
        """
        source = Path(path) if path is not None else self.save_path
        loaded = read_board(source)
        if loaded is None:
            logger.info(f"Nothing to load from {source}")
            return False

        if not self.set_board(loaded):
            return False

        logger.info(f"Game loaded from {source}")
        return True

    def __repr__(self) -> str:
        return f"GameEngine({self._rows}x{self._cols}, living={self.living_count()})"
