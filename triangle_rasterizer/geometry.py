#
# PROJECT: triangle-rasterizer
# MODULE: triangle_rasterizer/geometry.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

from dataclasses import dataclass
from numbers import Integral
from typing import Optional


@dataclass(frozen=True)
class Point:
    """Immutable integer pixel coordinate. Both axes are non-negative."""
    x: int
    y: int

    def __post_init__(self):
        for name in ('x', 'y'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, Integral):
                raise TypeError(f"Point.{name} must be an integer, got {value!r}")
            if value < 0:
                raise ValueError(f"Point.{name} must be non-negative, got {value}")
            # Normalise numpy integers so equality and hashing stay plain ints
            object.__setattr__(self, name, int(value))

    def __iter__(self):
        yield self.x
        yield self.y

    def __sub__(self, other):
        if isinstance(other, Point):
            return Vector.sub(self, other)
        return NotImplemented

    def is_at(self, xy) -> bool:
        """Exact comparison against a bare (x, y) pair."""
        x, y = xy
        return self.x == x and self.y == y


class Vector:
    """2D floating point difference of two points."""
    __slots__ = ('u', 'v')

    def __init__(self, u: float, v: float):
        self.u = float(u)
        self.v = float(v)

    def __repr__(self):
        return f"Vector({self.u:.2f}, {self.v:.2f})"

    def __iter__(self):
        yield self.u
        yield self.v

    def __eq__(self, other):
        if isinstance(other, Vector):
            return self.u == other.u and self.v == other.v
        return NotImplemented

    @classmethod
    def sub(cls, a, b) -> 'Vector':
        """a - b, with each coordinate cast to float. Accepts Points or pairs."""
        ax, ay = a
        bx, by = b
        return cls(float(ax) - float(bx), float(ay) - float(by))

    def dot(self, other) -> float:
        return self.u * other.u + self.v * other.v

    def cross(self, other) -> float:
        """Z component of the 3D cross product of the two vectors."""
        return self.u * other.v - self.v * other.u


class BoundingBox:
    """
    Inclusive integer rectangle [x0, x1] x [y0, y1].
    Both endpoints are part of iteration.
    """
    __slots__ = ('x0', 'x1', 'y0', 'y1')

    def __init__(self, x0: int, x1: int, y0: int, y1: int):
        if x0 > x1 or y0 > y1:
            raise ValueError(f"Empty bounding box x=[{x0}, {x1}] y=[{y0}, {y1}]")
        self.x0, self.x1 = x0, x1
        self.y0, self.y1 = y0, y1

    def __repr__(self):
        return f"BoundingBox(x=[{self.x0}, {self.x1}], y=[{self.y0}, {self.y1}])"

    def __eq__(self, other):
        if isinstance(other, BoundingBox):
            return ((self.x0, self.x1, self.y0, self.y1) ==
                    (other.x0, other.x1, other.y0, other.y1))
        return NotImplemented

    @classmethod
    def from_points(cls, *points) -> 'BoundingBox':
        xs = [p.x for p in points]
        ys = [p.y for p in points]
        return cls(min(xs), max(xs), min(ys), max(ys))

    @classmethod
    def from_triangle(cls, triangle) -> 'BoundingBox':
        return cls.from_points(triangle.p1, triangle.p2, triangle.p3)

    def xs(self) -> range:
        return range(self.x0, self.x1 + 1)

    def ys(self) -> range:
        return range(self.y0, self.y1 + 1)

    @property
    def width(self) -> int:
        return self.x1 - self.x0 + 1

    @property
    def height(self) -> int:
        return self.y1 - self.y0 + 1

    @property
    def area(self) -> int:
        """Number of pixels covered by the box."""
        return self.width * self.height

    def contains(self, point) -> bool:
        x, y = point
        return self.x0 <= x <= self.x1 and self.y0 <= y <= self.y1

    def clamp(self, width: int, height: int) -> Optional['BoundingBox']:
        """
        Intersect with the canvas [0, width-1] x [0, height-1].
        Returns None when nothing of the box lies on the canvas.
        """
        x0, x1 = max(0, self.x0), min(width - 1, self.x1)
        y0, y1 = max(0, self.y0), min(height - 1, self.y1)
        if x0 > x1 or y0 > y1:
            return None
        return BoundingBox(x0, x1, y0, y1)
