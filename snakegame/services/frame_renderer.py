"""
Frame Renderer for Snake Game Sessions

Draws each board snapshot to a PIL (Pillow) image and can write the
collected frames out as an animated GIF:
- Board background with grid
- Food cells
- Snake body, with a darker head with eyes
- Score bar under the board
- "GAME OVER" overlay with the final score
"""

import logging
import os
from typing import List, Optional, Tuple

from PIL import Image, ImageDraw, ImageFont

from snakegame.domain.snapshot import BoardSnapshot
from .renderer import Renderer, game_over_lines, status_line

logger = logging.getLogger(__name__)

CELL_SIZE = 20  # Size of each grid cell in pixels
MARGIN = 10
STATUS_BAR_HEIGHT = 24


class ColorScheme:
    """Colour configuration for frames"""

    SNAKE = "#4F7022"
    BACKGROUND = "#000000"
    BORDER = "#FFFFFF"
    GRID_LINE = "#1F2937"
    FOOD = "#EA2014"
    FOOD_STEM = "#8B4513"

    STATUS_TEXT = "#FFFFFF"
    OVERLAY_TEXT = "#FFFFFF"


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Parse "#RRGGBB" (leading hash optional) into an (r, g, b) tuple."""
    r, g, b = bytes.fromhex(hex_color.lstrip("#"))
    return (r, g, b)


def darken_color(hex_color: str, amount: float = 0.3) -> Tuple[int, int, int]:
    """Scale each channel of ``hex_color`` down by ``amount`` (0..1)."""
    factor = max(0.0, 1.0 - amount)
    r, g, b = (int(channel * factor) for channel in hex_to_rgb(hex_color))
    return (r, g, b)


class FrameRenderer(Renderer):
    """Render board snapshots to images"""

    def __init__(self, cell_size: int = CELL_SIZE, fps: int = 5):
        self.cell_size = cell_size
        self.fps = fps
        self.frames: List[Image.Image] = []
        self.font = ImageFont.load_default()

    def image_size(self, snapshot: BoardSnapshot) -> Tuple[int, int]:
        width = 2 * MARGIN + snapshot.width * self.cell_size
        height = 2 * MARGIN + snapshot.height * self.cell_size + STATUS_BAR_HEIGHT
        return width, height

    def render(self, snapshot: BoardSnapshot):
        self.frames.append(self.render_frame(snapshot))

    def render_game_over(self, snapshot: BoardSnapshot):
        img = self.render_frame(snapshot)
        draw = ImageDraw.Draw(img)
        board_pixel_height = snapshot.height * self.cell_size
        line_height = 16
        lines = game_over_lines(snapshot)
        y = MARGIN + (board_pixel_height - line_height * len(lines)) // 2
        for line in lines:
            draw.text(
                (MARGIN + self.cell_size, y),
                line,
                fill=hex_to_rgb(ColorScheme.OVERLAY_TEXT),
                font=self.font
            )
            y += line_height
        self.frames.append(img)

    def render_frame(self, snapshot: BoardSnapshot) -> Image.Image:
        """Render a single frame of the game"""
        img = Image.new('RGB', self.image_size(snapshot), hex_to_rgb(ColorScheme.BORDER))
        draw = ImageDraw.Draw(img)

        self._draw_board(draw, snapshot)

        status_y = 2 * MARGIN + snapshot.height * self.cell_size
        draw.rectangle(
            [0, status_y - MARGIN // 2, img.width, img.height],
            fill=hex_to_rgb(ColorScheme.BACKGROUND)
        )
        draw.text(
            (MARGIN, status_y),
            status_line(snapshot),
            fill=hex_to_rgb(ColorScheme.STATUS_TEXT),
            font=self.font
        )
        return img

    def _draw_board(self, draw: ImageDraw.ImageDraw, snapshot: BoardSnapshot):
        """Draw the grid, food and snake"""
        cell_size = self.cell_size
        board_pixel_width = snapshot.width * cell_size
        board_pixel_height = snapshot.height * cell_size

        draw.rectangle(
            [MARGIN, MARGIN, MARGIN + board_pixel_width, MARGIN + board_pixel_height],
            fill=hex_to_rgb(ColorScheme.BACKGROUND)
        )

        # Draw grid
        for i in range(snapshot.width + 1):
            draw.line(
                [MARGIN + i * cell_size, MARGIN, MARGIN + i * cell_size, MARGIN + board_pixel_height],
                fill=hex_to_rgb(ColorScheme.GRID_LINE),
                width=1
            )
        for i in range(snapshot.height + 1):
            draw.line(
                [MARGIN, MARGIN + i * cell_size, MARGIN + board_pixel_width, MARGIN + i * cell_size],
                fill=hex_to_rgb(ColorScheme.GRID_LINE),
                width=1
            )

        # Draw food
        for food_x, food_y in snapshot.food:
            x = MARGIN + food_x * cell_size
            y = MARGIN + food_y * cell_size
            draw.rectangle(
                [x + 2, y + 4, x + cell_size - 2, y + cell_size - 2],
                fill=hex_to_rgb(ColorScheme.FOOD)
            )
            # Stem
            stem_x = x + cell_size // 2
            draw.rectangle(
                [stem_x - 1, y, stem_x + 1, y + 5],
                fill=hex_to_rgb(ColorScheme.FOOD_STEM)
            )

        if not snapshot.snake:
            return

        color = hex_to_rgb(ColorScheme.SNAKE)

        # Draw body and tail
        for pos_x, pos_y in snapshot.snake[1:]:
            self._draw_cell(
                draw,
                MARGIN + pos_x * cell_size,
                MARGIN + pos_y * cell_size,
                cell_size,
                color,
                padding=1
            )

        # Draw head with eyes
        head_x, head_y = snapshot.head
        if not (0 <= head_x < snapshot.width and 0 <= head_y < snapshot.height):
            return
        px = MARGIN + head_x * cell_size
        py = MARGIN + head_y * cell_size
        self._draw_cell(draw, px, py, cell_size, darken_color(ColorScheme.SNAKE, 0.3), padding=0)

        eye_size = max(2, cell_size // 5)
        eye_y = py + cell_size // 3
        draw.ellipse(
            [px + cell_size // 4, eye_y, px + cell_size // 4 + eye_size, eye_y + eye_size],
            fill=(255, 255, 255)
        )
        draw.ellipse(
            [px + 3 * cell_size // 4 - eye_size, eye_y, px + 3 * cell_size // 4, eye_y + eye_size],
            fill=(255, 255, 255)
        )

    def _draw_cell(
        self,
        draw: ImageDraw.ImageDraw,
        x: int,
        y: int,
        size: int,
        color: Tuple[int, int, int],
        padding: int = 1
    ):
        """Draw a single cell (for snake segments)"""
        draw.rectangle(
            [x + padding, y + padding, x + size - padding, y + size - padding],
            fill=color
        )

    def save_gif(self, output_path: str, fps: Optional[int] = None) -> str:
        """
        Write the collected frames as an animated GIF

        Args:
            output_path: Destination file
            fps: Playback speed (defaults to the renderer's fps)

        Returns:
            Path to the written file
        """
        if not self.frames:
            raise ValueError("No frames have been rendered yet")

        fps = fps or self.fps
        directory = os.path.dirname(output_path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        logger.info(f"Writing {len(self.frames)} frames to {output_path}")
        first, *rest = self.frames
        first.save(
            output_path,
            save_all=True,
            append_images=rest,
            duration=int(1000 / fps),
            loop=0
        )
        return output_path
