#
# PROJECT: triangle-rasterizer
# MODULE: triangle_rasterizer/parsing.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import argparse

from .color import Color
from .geometry import Point

VERTEX_FORMAT_ERROR = "Could not parse into vertex. Should be in the form `(x, y)`"


def parse_vertex(text: str) -> Point:
    """
    Parse '(x, y)' into a Point. Whitespace around each number is allowed.
    Raises argparse.ArgumentTypeError so it can be used as an argparse `type=`.
    """
    val = str(text).strip()
    if not (val.startswith('(') and val.endswith(')')):
        raise argparse.ArgumentTypeError(VERTEX_FORMAT_ERROR)
    parts = val[1:-1].split(',')
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(VERTEX_FORMAT_ERROR)
    try:
        x, y = (int(p.strip()) for p in parts)
        return Point(x, y)
    except ValueError:
        # Non-numeric or negative coordinate
        raise argparse.ArgumentTypeError(VERTEX_FORMAT_ERROR) from None


def parse_color(text: str) -> Color:
    """argparse `type=` wrapper around Color.from_hex."""
    try:
        return Color.from_hex(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None
