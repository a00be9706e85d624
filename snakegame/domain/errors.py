"""
Exceptions raised by the game engine.
"""


class GameInvariantError(RuntimeError):
    """
    Raised when the game reaches a state the rules should make impossible,
    e.g. food placed on the snake. This is a programming defect, not a
    recoverable condition; game over is never reported through exceptions.
    """
