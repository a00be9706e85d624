"""
Game constants for snakegame.
"""

from enum import Enum
from typing import Dict, Optional


class Direction(Enum):
    """
    Cardinal movement directions.

    Each value is (dx, dy, order). y grows downward, so UP is (0, -1).
    ``order`` walks the compass counter-clockwise starting at RIGHT;
    neighbouring directions differ by 1 and opposites by 2.
    """

    RIGHT = (1, 0, 0)
    UP = (0, -1, 1)
    LEFT = (-1, 0, 2)
    DOWN = (0, 1, 3)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def order(self) -> int:
        return self.value[2]

    @property
    def key(self) -> str:
        """The input key identifier that selects this direction."""
        return f"Arrow{self.name.capitalize()}"


# Movement directions
UP = Direction.UP
DOWN = Direction.DOWN
LEFT = Direction.LEFT
RIGHT = Direction.RIGHT

KEY_TO_DIRECTION: Dict[str, Direction] = {
    "ArrowUp": UP,
    "ArrowDown": DOWN,
    "ArrowLeft": LEFT,
    "ArrowRight": RIGHT,
}


def direction_for_key(key: str) -> Optional[Direction]:
    """Look up the direction for an input key; unknown keys return None."""
    return KEY_TO_DIRECTION.get(key)


def is_reversal_of(a: Direction, b: Direction) -> bool:
    """True when ``a`` is the exact opposite of ``b``."""
    return abs(a.order - b.order) % 4 == 2


def opposite(direction: Direction) -> Direction:
    order = (direction.order + 2) % 4
    return next(d for d in Direction if d.order == order)


# Game settings
BOARD_WIDTH = 19
BOARD_HEIGHT = 19
TICK_INTERVAL_MS = 200
INITIAL_HEAD = (9, 9)
INITIAL_TAIL = (9, 10)
INITIAL_DIRECTION = UP
FOOD_COUNT = 1
