"""
Position value object - a single cell on the board.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Position:
    """
    An integer (x, y) cell coordinate.

    Positions are immutable: every operation returns a new value, so a
    position can be shared between the snake, the food list and snapshots
    without copying.
    """

    x: int
    y: int

    def translate(self, dx: int, dy: int) -> "Position":
        """Return this position shifted by (dx, dy)."""
        return Position(self.x + dx, self.y + dy)

    def moved_by(self, direction) -> "Position":
        """Return this position shifted one step along ``direction``."""
        return self.translate(direction.dx, direction.dy)

    def copy(self) -> "Position":
        return Position(self.x, self.y)

    def equals(self, other: "Position") -> bool:
        return self.x == other.x and self.y == other.y

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def __repr__(self):
        return f"Position({self.x}, {self.y})"
