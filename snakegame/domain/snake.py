"""
Snake entity for the game engine.
"""

from collections import deque
from typing import List

from .constants import Direction
from .errors import GameInvariantError
from .position import Position


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        head: the leading cell
        body: deque of interior cells, nearest-to-head first (may be empty)
        tail: the trailing cell

    Head, body and tail together form one head-to-tail sequence, so a new
    snake with only a head and a tail has length 2.
    """

    def __init__(self, head: Position, tail: Position):
        if head == tail:
            raise GameInvariantError(f"Snake head and tail overlap at {head}")
        self.head = head
        self.body: deque = deque()
        self.tail = tail

    def move(self, direction: Direction) -> None:
        """Advance one cell keeping the same length."""
        self.body.appendleft(self.head)
        self.tail = self.body.pop()
        self.head = self.head.moved_by(direction)

    def grow_into(self, direction: Direction) -> None:
        """Advance one cell leaving the tail in place (length + 1)."""
        self.body.appendleft(self.head)
        self.head = self.head.moved_by(direction)

    def length(self) -> int:
        return len(self.body) + 2

    def contains(self, position: Position) -> bool:
        """True if any part of the snake, head and tail included, is on ``position``."""
        if position == self.head or position == self.tail:
            return True
        return self.contains_body(position)

    def contains_body(self, position: Position) -> bool:
        """
        True if an interior segment is on ``position``.

        Head and tail are excluded. This is the next-head collision test:
        on a plain move the tail vacates its cell before the head arrives,
        so stepping onto the tail is allowed.
        """
        return position in self.body

    def segments(self) -> List[Position]:
        """Return every cell from head to tail."""
        return [self.head, *self.body, self.tail]

    def __len__(self):
        return self.length()

    def __repr__(self):
        return f"<Snake head={self.head} length={self.length()} tail={self.tail}>"
