"""
Pytest fixtures for engine tests.
"""

import random

import pytest

from bicho_war.config import GameSettings
from bicho_war.gameplay.engine import GameEngine


@pytest.fixture
def settings() -> GameSettings:
    """Default rules, independent of the environment's cached settings."""
    return GameSettings()


@pytest.fixture
def engine(settings, tmp_path) -> GameEngine:
    """A 2x2 engine with a seeded random source and a temp save file."""
    return GameEngine(
        2, 2,
        settings=settings,
        rng=random.Random(1234),
        save_path=tmp_path / "partida.json",
    )


