"""
Frame rendering for gridsnake using PIL (Pillow).

Each call paints the current game state into an image the size of the
drawing surface:
- Black board background
- Every snake cell and the apple at cell * scale, sized scale x scale
- A centered message once the game is over

Frames are kept so a whole session can be written out as an animated GIF.
"""

import logging
import os
from typing import List, Tuple

from PIL import Image, ImageDraw, ImageFont

from gridsnake.domain.constants import DEFAULT_TICK_HZ

logger = logging.getLogger(__name__)

FONT_CANDIDATES = ("DejaVuSansMono.ttf", "Menlo.ttc", "consola.ttf")


class ColorScheme:
    """Colors of the board pieces"""

    BACKGROUND = "#000000"
    SNAKE = "#00FF7F"  # springgreen
    APPLE = "#FF6347"  # tomato
    TEXT = "#FFFFFF"


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert hex color to RGB tuple"""
    hex_color = hex_color.lstrip('#')
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))


def load_font(size: int) -> ImageFont.ImageFont:
    """Load a monospace font, falling back to PIL's built-in bitmap font."""
    for name in FONT_CANDIDATES:
        try:
            return ImageFont.truetype(name, size)
        except OSError:
            continue
    return ImageFont.load_default()


class FrameRenderer:
    """Paints game states into PIL images and keeps them as frames."""

    def __init__(self, scale: int = 1, keep_frames: bool = True):
        if scale < 1:
            raise ValueError(f"Scale must be at least 1, got {scale}.")
        self.scale = scale
        self.keep_frames = keep_frames
        self.frames: List[Image.Image] = []
        self.font = load_font(scale * 2)

    def __call__(self, state) -> None:
        frame = self.render(state)
        if self.keep_frames:
            self.frames.append(frame)

    def render(self, state) -> Image.Image:
        """Render a single frame of the game"""
        width = state.bounds.width * self.scale
        height = state.bounds.height * self.scale

        img = Image.new('RGB', (width, height), hex_to_rgb(ColorScheme.BACKGROUND))
        draw = ImageDraw.Draw(img)

        for cell in state.snake.positions:
            self._draw_cell(draw, cell.x, cell.y, hex_to_rgb(ColorScheme.SNAKE))

        self._draw_cell(draw, state.apple.position.x, state.apple.position.y, hex_to_rgb(ColorScheme.APPLE))

        if state.over:
            self._draw_message(draw, state.message, width, height)

        return img

    def _draw_cell(self, draw: ImageDraw.ImageDraw, x: int, y: int, color: Tuple[int, int, int]):
        """Fill one board cell"""
        left = x * self.scale
        top = y * self.scale
        draw.rectangle(
            [left, top, left + self.scale - 1, top + self.scale - 1],
            fill=color
        )

    def _draw_message(self, draw: ImageDraw.ImageDraw, text: str, width: int, height: int):
        bbox = draw.textbbox((0, 0), text, font=self.font)
        text_width = bbox[2] - bbox[0]
        text_height = bbox[3] - bbox[1]
        draw.text(
            (width // 2 - text_width // 2, height // 2 - text_height // 2),
            text,
            fill=hex_to_rgb(ColorScheme.TEXT),
            font=self.font
        )

    def save_gif(self, output_path: str, fps: float = DEFAULT_TICK_HZ) -> str:
        """
        Write the collected frames as an animated GIF.

        Args:
            output_path: Destination file
            fps: Playback speed, defaults to the game's tick rate

        Returns:
            Path to the written file
        """
        if not self.frames:
            raise ValueError("No frames to save.")

        directory = os.path.dirname(output_path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        first, *rest = self.frames
        first.save(
            output_path,
            save_all=True,
            append_images=rest,
            duration=int(1000 / fps),
            loop=0
        )
        logger.info(f"Saved {len(self.frames)} frames to {output_path}")
        return output_path
