"""
Domain entities for the snakegame engine.

This module contains the core game entities that are independent of
host concerns (terminal, timers, image output, etc.).
"""

from .constants import (
    Direction, UP, DOWN, LEFT, RIGHT,
    KEY_TO_DIRECTION, direction_for_key, is_reversal_of, opposite,
)
from .errors import GameInvariantError
from .position import Position
from .snake import Snake
from .food import FoodSpawner
from .snapshot import BoardSnapshot

__all__ = [
    'Direction', 'UP', 'DOWN', 'LEFT', 'RIGHT',
    'KEY_TO_DIRECTION', 'direction_for_key', 'is_reversal_of', 'opposite',
    'GameInvariantError',
    'Position',
    'Snake',
    'FoodSpawner',
    'BoardSnapshot',
]
