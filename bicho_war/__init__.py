"""
Bicho War - turn-based grid combat engine.

Players shoot, bomb and mutate the creatures ("bichos") on a small board,
with session statistics and JSON save files. Presentation is left to the
caller.
"""

from bicho_war.config import GameSettings, get_settings
from bicho_war.gameplay.board import Board
from bicho_war.gameplay.creatures import Creature, CreatureType
from bicho_war.gameplay.engine import GameEngine, InvalidConfiguration
from bicho_war.gameplay.statistics import GameStatistics
from bicho_war.persistence.codec import SaveFileError

__version__ = "1.0.0"

__all__ = [
    "Board",
    "Creature",
    "CreatureType",
    "GameEngine",
    "GameSettings",
    "GameStatistics",
    "InvalidConfiguration",
    "SaveFileError",
    "get_settings",
]
