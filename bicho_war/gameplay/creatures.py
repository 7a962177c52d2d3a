"""
Creature types and the creatures that occupy board cells.
NO UI DEPENDENCIES.
"""
from enum import Enum
from typing import Optional

from .constants import (
    ALIEN_HEALTH,
    BULLET_DAMAGE,
    MUTATION_MULTIPLIER,
    NORMAL_HEALTH,
    POINTS_ALIEN,
    POINTS_NORMAL,
)


class CreatureType(Enum):
    """
    Every kind of cell occupant.

    Each member carries (label, default health, points for a defeat). The
    label is the name shown in a creature's text form and written to save
    files.
    """
    NORMAL = ("NORMAL", NORMAL_HEALTH, POINTS_NORMAL)
    ALIEN = ("ALIEN", ALIEN_HEALTH, POINTS_ALIEN)
    EMPTY = ("VACIO", 0, 0)

    @property
    def label(self) -> str:
        return self.value[0]

    @property
    def default_health(self) -> int:
        return self.value[1]

    @property
    def points(self) -> int:
        return self.value[2]

    @classmethod
    def from_label(cls, label: str) -> 'CreatureType':
        """Resolve a save-file label back to its type."""
        for creature_type in cls:
            if creature_type.label == label:
                return creature_type
        raise ValueError(f"Unknown creature type label: {label!r}")

    def __str__(self) -> str:
        return self.label


class Creature:
    """
    A bicho sitting in a board cell.

    The type is fixed at construction; health is mutable and never negative.
    """

    def __init__(self, creature_type: CreatureType, health: Optional[int] = None):
        if not isinstance(creature_type, CreatureType):
            raise TypeError(f"creature_type must be a CreatureType, got {creature_type!r}")
        self._creature_type = creature_type
        self._health = 0
        self.health = creature_type.default_health if health is None else health

    @classmethod
    def empty(cls) -> 'Creature':
        """An empty cell occupant."""
        return cls(CreatureType.EMPTY, 0)

    @property
    def creature_type(self) -> CreatureType:
        return self._creature_type

    @property
    def health(self) -> int:
        return self._health

    @health.setter
    def health(self, value: int) -> None:
        # Negative values clamp to zero
        self._health = max(0, int(value))

    @property
    def is_dead(self) -> bool:
        return self._health == 0

    @property
    def is_alive(self) -> bool:
        return self._health > 0

    # =========================================================================
    # DAMAGE AND MUTATION
    # =========================================================================

    def damage_by_bullet(self, damage: int = BULLET_DAMAGE) -> bool:
        """
        Apply bullet damage.
        Returns True if the creature was alive before the shot, False if it
        was already dead (no-op).
        """
        if self.is_dead:
            return False
        self.health = self._health - damage
        return True

    def damage_by_bomb(self) -> bool:
        """
        Kill the creature instantly.
        Returns True if it was alive before the bomb.
        """
        if self.is_dead:
            return False
        self.health = 0
        return True

    def mutate(self, multiplier: int = MUTATION_MULTIPLIER) -> bool:
        """Multiply health. Dead creatures don't mutate."""
        if self._health > 0:
            self.health = self._health * multiplier
            return True
        return False

    def copy(self) -> 'Creature':
        return Creature(self._creature_type, self._health)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Creature):
            return NotImplemented
        return self._creature_type is other._creature_type and self._health == other._health

    def __str__(self) -> str:
        if self.is_dead:
            return f"{self._creature_type.label}-X"
        return f"{self._creature_type.label}-{self._health}"

    def __repr__(self) -> str:
        return f"Creature({self._creature_type.name}, health={self._health})"
