"""
Tests for the text and image renderers.
"""

import io
import os
import sys
from unittest.mock import MagicMock

import pytest
from PIL import Image

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from snakegame.domain import BoardSnapshot
from snakegame.services import FrameRenderer, TextRenderer
from snakegame.services.frame_renderer import (
    CELL_SIZE,
    ColorScheme,
    MARGIN,
    darken_color,
    hex_to_rgb,
)


def snapshot(**overrides):
    values = dict(
        tick=4,
        width=5,
        height=4,
        snake=[(2, 1), (2, 2), (3, 2)],
        food=[(0, 0)],
        score=2,
        direction="UP",
        phase="running",
    )
    values.update(overrides)
    return BoardSnapshot(**values)


class TestTextRenderer:
    def test_render_writes_board_and_status(self):
        stream = io.StringIO()
        TextRenderer(stream).render(snapshot())

        output = stream.getvalue()
        assert " 0 A . . . ." in output
        assert " 1 . . H . ." in output
        assert " 2 . . o T ." in output
        assert "Score : 2" in output
        assert "Length 3" in output

    def test_game_over_message(self):
        stream = io.StringIO()
        TextRenderer(stream).render_game_over(
            snapshot(phase="game_over", death_reason="self", score=7)
        )

        assert stream.getvalue().splitlines() == ["GAME OVER", "Score : 7", "Reason : self"]

    def test_close_flushes_stream(self):
        """close() flushes whatever the stream still buffers."""
        stream = MagicMock()
        TextRenderer(stream).close()
        stream.flush.assert_called_once()


class TestColorHelpers:
    def test_hex_to_rgb(self):
        """Hex strings parse with or without the leading hash."""
        assert hex_to_rgb("#EA2014") == (234, 32, 20)
        assert hex_to_rgb("ea2014") == (234, 32, 20)

    def test_darken_color(self):
        """Each channel is scaled by 1 - amount."""
        assert darken_color("#646464", 0.5) == (50, 50, 50)


class TestFrameRenderer:
    def cell_center(self, x, y):
        return (
            MARGIN + x * CELL_SIZE + CELL_SIZE // 2,
            MARGIN + y * CELL_SIZE + CELL_SIZE - 4,
        )

    def test_frame_size(self):
        renderer = FrameRenderer()
        img = renderer.render_frame(snapshot())
        assert img.size == renderer.image_size(snapshot())
        assert img.width == 2 * MARGIN + 5 * CELL_SIZE

    def test_cells_use_role_colors(self):
        img = FrameRenderer().render_frame(snapshot())

        assert img.getpixel(self.cell_center(0, 0)) == hex_to_rgb(ColorScheme.FOOD)
        assert img.getpixel(self.cell_center(3, 2)) == hex_to_rgb(ColorScheme.SNAKE)
        assert img.getpixel(self.cell_center(2, 1)) == darken_color(ColorScheme.SNAKE, 0.3)
        assert img.getpixel(self.cell_center(4, 3)) == hex_to_rgb(ColorScheme.BACKGROUND)

    def test_render_collects_frames(self):
        renderer = FrameRenderer()
        renderer.render(snapshot())
        renderer.render(snapshot(tick=5))
        renderer.render_game_over(snapshot(phase="game_over", death_reason="wall"))
        assert len(renderer.frames) == 3

    def test_save_gif(self, tmp_path):
        renderer = FrameRenderer(fps=5)
        renderer.render(snapshot())
        renderer.render(snapshot(tick=5, snake=[(2, 0), (2, 1), (2, 2)]))
        renderer.render_game_over(snapshot(phase="game_over", death_reason="wall"))

        path = renderer.save_gif(str(tmp_path / "out" / "session.gif"))

        with Image.open(path) as gif:
            assert gif.format == "GIF"
            assert gif.n_frames == 3

    def test_save_without_frames_fails(self, tmp_path):
        with pytest.raises(ValueError):
            FrameRenderer().save_gif(str(tmp_path / "empty.gif"))
