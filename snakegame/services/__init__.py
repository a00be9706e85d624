"""
Host adapters for the snake game: timer, input, rendering and the session
that wires them to a SnakeGame.
"""

from .timer import IntervalTimer
from .input_source import InputSource, ScriptedInput
from .renderer import Renderer, TextRenderer
from .frame_renderer import FrameRenderer
from .session import GameSession

__all__ = [
    'IntervalTimer',
    'InputSource',
    'ScriptedInput',
    'Renderer',
    'TextRenderer',
    'FrameRenderer',
    'GameSession',
]
