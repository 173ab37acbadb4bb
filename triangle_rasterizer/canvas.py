#
# PROJECT: triangle-rasterizer
# MODULE: triangle_rasterizer/canvas.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import numpy as np
from PIL import Image

from .color import Color, BACKGROUND
from .errors import PixelOutOfBoundsError


class Canvas:
    """
    Width x height RGB image buffer.

    Pixels live in a (height, width, 3) uint8 array, row-major, indexed as
    pixels[y, x]. Every pixel starts at the background color.
    """
    __slots__ = ['w', 'h', 'background', 'pixels']

    def __init__(self, w: int, h: int, background: Color = BACKGROUND):
        if w <= 0 or h <= 0:
            raise ValueError(f"Canvas dimensions must be positive, got {w}x{h}")
        self.w, self.h = w, h
        self.background = background
        self.pixels = np.empty((h, w, 3), dtype=np.uint8)
        self.pixels[:, :] = background.to_pixel()

    def __repr__(self):
        return f"Canvas({self.w}x{self.h})"

    @property
    def width(self) -> int:
        return self.w

    @property
    def height(self) -> int:
        return self.h

    def in_bounds(self, x, y) -> bool:
        return 0 <= x < self.w and 0 <= y < self.h

    def set_pixel(self, x, y, color: Color):
        if not self.in_bounds(x, y):
            raise PixelOutOfBoundsError(x, y, self.w, self.h)
        self.pixels[y, x] = color.to_pixel()

    def get_pixel(self, x, y) -> Color:
        if not self.in_bounds(x, y):
            raise PixelOutOfBoundsError(x, y, self.w, self.h)
        r, g, b = self.pixels[y, x]
        return Color(int(r), int(g), int(b))

    def tobytes(self) -> bytes:
        return self.pixels.tobytes()

    def to_image(self) -> Image.Image:
        """Pillow RGB image sharing the canvas dimensions."""
        # (h, w, 3) uint8 is decoded as RGB by Pillow
        return Image.fromarray(self.pixels)
