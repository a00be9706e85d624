"""
Food placement for the game engine.
"""

import logging
import random
from typing import Iterable, Optional

from .errors import GameInvariantError
from .position import Position
from .snake import Snake

logger = logging.getLogger(__name__)


class FoodSpawner:
    """
    Picks free cells for new food.

    Cells are sampled uniformly at random until one is free of the snake and
    of existing food. Sampling stops after ``max_attempts`` tries, after which
    the free cells are enumerated and one is chosen from them, so a nearly
    full board cannot stall a tick.
    """

    def __init__(
        self,
        width: int,
        height: int,
        rng: Optional[random.Random] = None,
        max_attempts: Optional[int] = None
    ):
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random()
        if max_attempts is None:
            max_attempts = 4 * width * height
        self.max_attempts = max_attempts

    def spawn(self, snake: Snake, food: Iterable[Position]) -> Optional[Position]:
        """
        Return a cell occupied by neither the snake nor any food.

        Returns None only when the board has no free cell left.
        """
        occupied_food = set(food)

        for _ in range(self.max_attempts):
            x = self.rng.randrange(self.width)
            y = self.rng.randrange(self.height)
            position = Position(x, y)
            if snake.contains(position) or position in occupied_food:
                continue
            return self._checked(position, snake, occupied_food)

        logger.warning(
            f"No free cell found after {self.max_attempts} random attempts, "
            "falling back to enumerating free cells"
        )
        free_cells = [
            Position(x, y)
            for y in range(self.height)
            for x in range(self.width)
            if not snake.contains(Position(x, y)) and Position(x, y) not in occupied_food
        ]
        if not free_cells:
            return None
        return self._checked(self.rng.choice(free_cells), snake, occupied_food)

    def _checked(self, position: Position, snake: Snake, food: set) -> Position:
        if not (0 <= position.x < self.width and 0 <= position.y < self.height):
            raise GameInvariantError(f"Food spawned off the board at {position}")
        if snake.contains(position) or position in food:
            raise GameInvariantError(f"Food spawned on an occupied cell at {position}")
        return position
