#
# PROJECT: triangle-rasterizer
# MODULE: triangle_rasterizer/errors.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

class RasterError(Exception):
    """Base class for every error raised by the rasterizer."""


class InvalidVertexError(RasterError, ValueError):
    """A vertex lies outside [0, width) x [0, height)."""


class PixelOutOfBoundsError(RasterError, IndexError):
    """A pixel write was attempted outside the canvas."""

    def __init__(self, x, y, width, height):
        super().__init__(
            f"Pixel ({x}, {y}) is outside the {width}x{height} canvas")
        self.x, self.y = x, y
        self.width, self.height = width, height


class EncodeError(RasterError, RuntimeError):
    """The image could not be encoded or written to disk."""
