"""
BoardSnapshot entity - a snapshot of the game at a point in time.
"""

from typing import List, Tuple, Optional


class BoardSnapshot:
    """
    A read-only picture of the board handed to renderers after each tick.

    Attributes:
        tick: number of ticks processed so far
        width, height: board dimensions
        snake: list of (x, y) from head at index 0 to tail at the end
        food: list of (x, y) positions of all food on the board
        score: food eaten so far
        direction: name of the current direction
        phase: 'idle', 'running' or 'game_over'
        death_reason: 'self', 'wall' or 'board_full' once the game is over
    """

    def __init__(
        self,
        tick: int,
        width: int,
        height: int,
        snake: List[Tuple[int, int]],
        food: List[Tuple[int, int]],
        score: int,
        direction: str,
        phase: str,
        death_reason: Optional[str] = None
    ):
        self.tick = tick
        self.width = width
        self.height = height
        self.snake = tuple(snake)
        self.food = tuple(food)
        self.score = score
        self.direction = direction
        self.phase = phase
        self.death_reason = death_reason

    @property
    def game_over(self) -> bool:
        return self.phase == "game_over"

    @property
    def head(self) -> Optional[Tuple[int, int]]:
        return self.snake[0] if self.snake else None

    @property
    def tail(self) -> Optional[Tuple[int, int]]:
        return self.snake[-1] if self.snake else None

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        A = food
        H = snake head
        o = snake body
        T = snake tail
        Row 0 is printed first since y grows downward, x-axis labels at bottom.
        """
        # Create empty board
        board = [['.' for _ in range(self.width)] for _ in range(self.height)]

        # Place food
        for fx, fy in self.food:
            board[fy][fx] = 'A'

        # Place snake, tail first so the head wins if they ever coincide
        last = len(self.snake) - 1
        for pos_idx in range(last, -1, -1):
            x, y = self.snake[pos_idx]
            if not (0 <= x < self.width and 0 <= y < self.height):
                continue
            if pos_idx == 0:
                board[y][x] = 'H'
            elif pos_idx == last:
                board[y][x] = 'T'
            else:
                board[y][x] = 'o'

        result = []
        for y in range(self.height):
            result.append(f"{y:2d} {' '.join(board[y])}")

        # Only the last digit of each column fits in a single-character cell
        result.append("   " + " ".join(str(i % 10) for i in range(self.width)))

        return "\n".join(result)

    def to_dict(self) -> dict:
        return {
            "tick": self.tick,
            "board": {"width": self.width, "height": self.height},
            "snake": [list(p) for p in self.snake],
            "food": [list(p) for p in self.food],
            "score": self.score,
            "direction": self.direction,
            "phase": self.phase,
            "death_reason": self.death_reason,
        }

    def __repr__(self):
        return (
            f"<BoardSnapshot tick={self.tick}, food={list(self.food)}, "
            f"length={len(self.snake)}, score={self.score}, phase={self.phase}>"
        )
