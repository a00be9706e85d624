"""
Runtime configuration for snakegame.

Defaults come from domain.constants; any of them can be overridden through
environment variables (a local .env file is honoured via python-dotenv) and
then through command line flags.

Environment variables:
    SNAKE_WIDTH, SNAKE_HEIGHT   board size in cells
    SNAKE_TICK_MS               tick interval in milliseconds
    SNAKE_FOOD_COUNT            food items kept on the board
    SNAKE_SEED                  seed for food placement
"""

import os
from dataclasses import dataclass, field
from typing import Optional, Tuple

from dotenv import load_dotenv

from snakegame.domain import constants
from snakegame.domain.constants import Direction


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"Environment variable {name} must be an integer, got {raw!r}")


@dataclass
class GameConfig:
    width: int = constants.BOARD_WIDTH
    height: int = constants.BOARD_HEIGHT
    tick_ms: int = constants.TICK_INTERVAL_MS
    initial_head: Tuple[int, int] = constants.INITIAL_HEAD
    initial_tail: Tuple[int, int] = constants.INITIAL_TAIL
    initial_direction: Direction = field(default=constants.INITIAL_DIRECTION)
    food_count: int = constants.FOOD_COUNT
    seed: Optional[int] = None

    @property
    def tick_seconds(self) -> float:
        return self.tick_ms / 1000.0

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "GameConfig":
        """Build a config from the process environment (and .env, if present)."""
        load_dotenv(dotenv_path)
        return cls(
            width=_env_int("SNAKE_WIDTH", constants.BOARD_WIDTH),
            height=_env_int("SNAKE_HEIGHT", constants.BOARD_HEIGHT),
            tick_ms=_env_int("SNAKE_TICK_MS", constants.TICK_INTERVAL_MS),
            food_count=_env_int("SNAKE_FOOD_COUNT", constants.FOOD_COUNT),
            seed=_env_int("SNAKE_SEED", None),
        )

    def validate(self) -> "GameConfig":
        """
        Check the configuration describes a playable board.

        Raises:
            ValueError: if any setting is out of range.
        """
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Board size must be positive, got {self.width}x{self.height}")
        if self.tick_ms <= 0:
            raise ValueError(f"Tick interval must be positive, got {self.tick_ms} ms")
        if self.food_count < 1:
            raise ValueError(f"Food count must be at least 1, got {self.food_count}")

        for label, (x, y) in (("head", self.initial_head), ("tail", self.initial_tail)):
            if not (0 <= x < self.width and 0 <= y < self.height):
                raise ValueError(
                    f"Initial {label} {(x, y)} is outside the {self.width}x{self.height} board"
                )

        hx, hy = self.initial_head
        tx, ty = self.initial_tail
        if abs(hx - tx) + abs(hy - ty) != 1:
            raise ValueError(
                f"Initial head {self.initial_head} and tail {self.initial_tail} must be adjacent"
            )

        # The starting direction must not point straight back into the tail
        if (hx + self.initial_direction.dx, hy + self.initial_direction.dy) == (tx, ty):
            raise ValueError(
                f"Initial direction {self.initial_direction.name} points into the tail"
            )

        free_cells = self.width * self.height - 2
        if self.food_count > free_cells:
            raise ValueError(
                f"Cannot place {self.food_count} food items on a board with {free_cells} free cells"
            )
        return self
