#
# PROJECT: triangle-rasterizer
# MODULE: triangle_rasterizer/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

from .geometry import Point, Vector, BoundingBox
from .color import Color, parse_hex_color, BACKGROUND
from .triangle import Triangle
from .canvas import Canvas
from .rasterizer import rasterize, fill_triangle
from .encoder import save_image
from .config import RasterConfig
from .errors import RasterError, InvalidVertexError, PixelOutOfBoundsError, EncodeError
