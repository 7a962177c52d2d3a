"""
Configuration management for the Bicho War engine.
Uses pydantic-settings for environment variable parsing.
"""

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from bicho_war.gameplay import constants


class GameSettings(BaseSettings):
    """Game rules loaded from environment variables (prefix BICHOS_)."""

    # Combat
    bullet_damage: int = Field(
        default=constants.BULLET_DAMAGE,
        ge=1,
        description="Health removed by a single bullet"
    )
    mutation_multiplier: int = Field(
        default=constants.MUTATION_MULTIPLIER,
        ge=1,
        description="Multiplier applied to a creature's health when it mutates"
    )

    # Board
    min_board_size: int = Field(
        default=constants.MIN_BOARD_SIZE,
        ge=1,
        description="Smallest allowed number of rows or columns"
    )
    max_board_size: int = Field(
        default=constants.MAX_BOARD_SIZE,
        description="Largest allowed number of rows or columns"
    )
    default_rows: int = Field(default=constants.DEFAULT_ROWS)
    default_cols: int = Field(default=constants.DEFAULT_COLS)

    # Persistence
    save_file: str = Field(
        default=constants.SAVE_FILE,
        description="Path of the JSON save file"
    )

    # Randomness
    random_seed: int | None = Field(
        default=None,
        description="Seed for the engine's random source. None means unseeded"
    )

    model_config = SettingsConfigDict(
        env_prefix="BICHOS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    @model_validator(mode="after")
    def check_board_bounds(self) -> "GameSettings":
        if self.min_board_size > self.max_board_size:
            raise ValueError(
                f"min_board_size ({self.min_board_size}) is larger than "
                f"max_board_size ({self.max_board_size})"
            )
        for name in ("default_rows", "default_cols"):
            value = getattr(self, name)
            if not self.min_board_size <= value <= self.max_board_size:
                raise ValueError(
                    f"{name} must be between {self.min_board_size} "
                    f"and {self.max_board_size}, got {value}"
                )
        return self

    def board_size_allowed(self, size: int) -> bool:
        """True if size is a valid number of rows or columns."""
        return self.min_board_size <= size <= self.max_board_size


@lru_cache()
def get_settings() -> GameSettings:
    """
    Get cached settings instance.
    Engines created without explicit settings share this one.
    """
    return GameSettings()
