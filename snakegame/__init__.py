"""
snakegame - a single-player grid snake game.

The engine (``SnakeGame``) is a plain state machine; scheduling, input and
drawing live in ``snakegame.services`` and the terminal front end in
``snakegame.cli``.
"""

from .config import GameConfig
from .game import GamePhase, SnakeGame

__all__ = [
    'GameConfig',
    'GamePhase',
    'SnakeGame',
]

__version__ = "0.1.0"
