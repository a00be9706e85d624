"""
Renderer interface and the plain text renderer.
"""

import sys
from typing import TextIO, Optional

from snakegame.domain.snapshot import BoardSnapshot


class Renderer:
    """
    Base class/interface for drawing the board.

    ``render`` redraws the whole board for one tick; ``render_game_over``
    draws the final overlay with the score.
    """

    def render(self, snapshot: BoardSnapshot):
        raise NotImplementedError

    def render_game_over(self, snapshot: BoardSnapshot):
        raise NotImplementedError

    def close(self):
        """Release any resources held by the renderer."""


def status_line(snapshot: BoardSnapshot) -> str:
    return (
        f"Tick {snapshot.tick} | Score : {snapshot.score} | "
        f"Length {len(snapshot.snake)} | {snapshot.direction}"
    )


def game_over_lines(snapshot: BoardSnapshot) -> list:
    lines = ["GAME OVER", f"Score : {snapshot.score}"]
    if snapshot.death_reason:
        lines.append(f"Reason : {snapshot.death_reason}")
    return lines


class TextRenderer(Renderer):
    """Writes each frame as text to a stream (stdout by default)."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdout

    def render(self, snapshot: BoardSnapshot):
        self.stream.write("\n" + snapshot.print_board() + "\n")
        self.stream.write(status_line(snapshot) + "\n")
        self.stream.flush()

    def render_game_over(self, snapshot: BoardSnapshot):
        self.stream.write("\n".join(game_over_lines(snapshot)) + "\n")
        self.stream.flush()

    def close(self):
        self.stream.flush()
