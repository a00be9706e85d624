"""
Single-player snake game state machine.

The game never schedules anything itself: the host calls ``tick()`` on a
fixed period and forwards key presses to ``on_key()`` / ``on_input()``.
Input only records the pending direction, so ``tick()`` is the sole place
where the snake, the food and the score change.
"""

import logging
import random
from enum import Enum
from typing import List, Optional

from snakegame.config import GameConfig
from snakegame.domain import (
    BoardSnapshot,
    Direction,
    FoodSpawner,
    GameInvariantError,
    Position,
    Snake,
    direction_for_key,
    is_reversal_of,
)

logger = logging.getLogger(__name__)


class GamePhase(Enum):
    IDLE = "idle"
    RUNNING = "running"
    GAME_OVER = "game_over"


class SnakeGame:
    """
    Manages:
      - Board (width, height)
      - The snake
      - Food on the board
      - Current and pending direction
      - Score
      - Phase (idle -> running -> game_over)
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rng: Optional[random.Random] = None,
        spawner: Optional[FoodSpawner] = None
    ):
        self.config = (config or GameConfig()).validate()
        self.width = self.config.width
        self.height = self.config.height

        if spawner is None:
            if rng is None:
                rng = random.Random(self.config.seed)
            spawner = FoodSpawner(self.width, self.height, rng=rng)
        self.spawner = spawner

        self.phase = GamePhase.IDLE
        self.snake: Optional[Snake] = None
        self.food: List[Position] = []
        self.direction: Direction = self.config.initial_direction
        self.pending_direction: Direction = self.config.initial_direction
        self.score = 0
        self.tick_count = 0
        self.death_reason: Optional[str] = None

    @property
    def running(self) -> bool:
        return self.phase == GamePhase.RUNNING

    @property
    def game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    def start(self) -> BoardSnapshot:
        """Place the snake and the first food, and enter the running phase."""
        if self.phase != GamePhase.IDLE:
            raise GameInvariantError(f"Cannot start a game in phase {self.phase.value}")

        self.snake = Snake(
            Position(*self.config.initial_head),
            Position(*self.config.initial_tail)
        )
        self.food = []
        self.direction = self.config.initial_direction
        self.pending_direction = self.config.initial_direction
        self.score = 0
        self.tick_count = 0
        self.death_reason = None
        self.phase = GamePhase.RUNNING

        for _ in range(self.config.food_count):
            self._spawn_food()

        logger.info(
            f"Game started on a {self.width}x{self.height} board, "
            f"snake at {self.snake.head}, food at {self.food}"
        )
        return self.snapshot()

    def on_input(self, direction: Direction) -> bool:
        """
        Request a direction for the next tick.

        The request is dropped when the game is over or when it reverses the
        direction the snake is currently moving in. A later accepted request
        replaces an earlier one; nothing is queued.

        Returns:
            True if the request became the pending direction.
        """
        if self.phase == GamePhase.GAME_OVER:
            return False
        if is_reversal_of(direction, self.direction):
            logger.debug(f"Ignoring reversal {direction.name} while moving {self.direction.name}")
            return False
        self.pending_direction = direction
        return True

    def on_key(self, key: str) -> bool:
        """Translate a key identifier and forward it; unknown keys are ignored."""
        direction = direction_for_key(key)
        if direction is None:
            return False
        return self.on_input(direction)

    def tick(self) -> Optional[BoardSnapshot]:
        """
        Execute one simulation step:
          1) If the game is not running, do nothing
          2) Adopt the pending direction
          3) End the game if the next head hits the body or leaves the board
          4) Eat food (grow + score + respawn) or move

        Returns:
            The snapshot to render, or None if no step was taken.
        """
        if self.phase != GamePhase.RUNNING:
            return None

        self.tick_count += 1
        self.direction = self.pending_direction
        next_head = self.snake.head.moved_by(self.direction)

        if self.snake.contains_body(next_head):
            self._end_game("self")
            return self.snapshot()

        if self.is_out_of_bounds(next_head):
            self._end_game("wall")
            return self.snapshot()

        if next_head in self.food:
            self.food.remove(next_head)
            self.snake.grow_into(self.direction)
            self.score += 1
            logger.info(
                f"Tick {self.tick_count}: ate food at {next_head}, "
                f"score {self.score}, length {self.snake.length()}"
            )
            # With several food items a failed spawn can leave reachable food behind
            if not self._spawn_food() and not self.food:
                self._end_game("board_full")
        else:
            self.snake.move(self.direction)

        return self.snapshot()

    def is_out_of_bounds(self, position: Position) -> bool:
        return not (0 <= position.x < self.width and 0 <= position.y < self.height)

    def snapshot(self) -> BoardSnapshot:
        """
        Return a snapshot of the current board.
        """
        snake_cells = [p.as_tuple() for p in self.snake.segments()] if self.snake else []
        return BoardSnapshot(
            tick=self.tick_count,
            width=self.width,
            height=self.height,
            snake=snake_cells,
            food=[p.as_tuple() for p in self.food],
            score=self.score,
            direction=self.direction.name,
            phase=self.phase.value,
            death_reason=self.death_reason
        )

    def _spawn_food(self) -> bool:
        position = self.spawner.spawn(self.snake, self.food)
        if position is None:
            return False
        self.food.append(position)
        return True

    def _end_game(self, reason: str):
        self.phase = GamePhase.GAME_OVER
        self.death_reason = reason
        logger.info(
            f"Game Over: {reason} after {self.tick_count} ticks, final score {self.score}"
        )

    def __repr__(self):
        return (
            f"<SnakeGame phase={self.phase.value}, tick={self.tick_count}, "
            f"score={self.score}, direction={self.direction.name}>"
        )
