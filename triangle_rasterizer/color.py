#
# PROJECT: triangle-rasterizer
# MODULE: triangle_rasterizer/color.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import math
from dataclasses import dataclass
from numbers import Integral


def parse_hex_color(hex_str):
    """
    Parse a hex color string to an (r, g, b) tuple.
    Accepts: '#RRGGBB' or 'RRGGBB' (case-insensitive).
    Returns: (r, g, b) tuple with values 0-255, or None on failure.
    """
    if hex_str is None:
        return None
    val = str(hex_str).strip().lstrip('#')
    if len(val) != 6:
        return None
    try:
        r = int(val[0:2], 16)
        g = int(val[2:4], 16)
        b = int(val[4:6], 16)
        return (r, g, b)
    except ValueError:
        return None


def _truncate_channel(value: float) -> int:
    """Round toward zero and saturate to the 8-bit range."""
    if math.isnan(value):
        return 0
    return max(0, min(255, int(value)))


@dataclass(frozen=True)
class Color:
    """RGB triple of 8-bit channels."""
    r: int
    g: int
    b: int

    def __post_init__(self):
        for name in ('r', 'g', 'b'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, Integral):
                raise TypeError(f"Color.{name} must be an integer, got {value!r}")
            if not 0 <= value <= 255:
                raise ValueError(f"Color.{name} must be in [0, 255], got {value}")
            object.__setattr__(self, name, int(value))

    def __iter__(self):
        yield self.r
        yield self.g
        yield self.b

    @classmethod
    def from_hex(cls, hex_str) -> 'Color':
        rgb = parse_hex_color(hex_str)
        if rgb is None:
            raise ValueError(f"Invalid hex color {hex_str!r}, expected #RRGGBB")
        return cls(*rgb)

    @classmethod
    def blend(cls, colors, weights) -> 'Color':
        """
        Weighted sum of colors, channel by channel.
        Each channel is computed in floating point and truncated (not rounded)
        to an 8-bit value.
        """
        channels = [0.0, 0.0, 0.0]
        for color, weight in zip(colors, weights):
            channels[0] += color.r * weight
            channels[1] += color.g * weight
            channels[2] += color.b * weight
        return cls(*(_truncate_channel(c) for c in channels))

    def to_pixel(self):
        """Channel tuple in the order of the RGB output buffer."""
        return (self.r, self.g, self.b)

    def to_hex(self) -> str:
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"


BACKGROUND = Color(0, 0, 0)
BLACK = BACKGROUND
WHITE = Color(255, 255, 255)
RED = Color(255, 0, 0)
GREEN = Color(0, 255, 0)
BLUE = Color(0, 0, 255)
