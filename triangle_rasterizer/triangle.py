#
# PROJECT: triangle-rasterizer
# MODULE: triangle_rasterizer/triangle.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import math

from .color import Color, BACKGROUND, RED, GREEN, BLUE
from .geometry import Point, Vector, BoundingBox

_NAN_COORDS = (math.nan, math.nan, math.nan)


class Triangle:
    """
    Three integer vertices with one color each (c1 at p1, c2 at p2, c3 at p3).

    Colors are interpolated across the interior with barycentric weights.
    Collinear or coincident vertices are accepted; such a triangle covers
    nothing and every query returns the background color.
    """
    __slots__ = ('p1', 'p2', 'p3', 'c1', 'c2', 'c3', '_v0', '_v1',
                 '_d00', '_d01', '_d11', '_denom')

    def __init__(self, p1: Point, p2: Point, p3: Point,
                 c1: Color = RED, c2: Color = GREEN, c3: Color = BLUE):
        p1, p2, p3 = (p if isinstance(p, Point) else Point(*p)
                      for p in (p1, p2, p3))
        object.__setattr__(self, 'p1', p1)
        object.__setattr__(self, 'p2', p2)
        object.__setattr__(self, 'p3', p3)
        object.__setattr__(self, 'c1', c1)
        object.__setattr__(self, 'c2', c2)
        object.__setattr__(self, 'c3', c3)

        # Edge vectors and their dot products only depend on the vertices
        v0 = Vector.sub(p2, p1)
        v1 = Vector.sub(p3, p1)
        d00 = v0.dot(v0)
        d01 = v0.dot(v1)
        d11 = v1.dot(v1)
        object.__setattr__(self, '_v0', v0)
        object.__setattr__(self, '_v1', v1)
        object.__setattr__(self, '_d00', d00)
        object.__setattr__(self, '_d01', d01)
        object.__setattr__(self, '_d11', d11)
        object.__setattr__(self, '_denom', d00 * d11 - d01 * d01)

    def __setattr__(self, name, value):
        raise AttributeError("Triangle is immutable")

    def __repr__(self):
        return (f"Triangle(({self.p1.x}, {self.p1.y}) {self.c1.to_hex()}, "
                f"({self.p2.x}, {self.p2.y}) {self.c2.to_hex()}, "
                f"({self.p3.x}, {self.p3.y}) {self.c3.to_hex()})")

    @property
    def vertices(self):
        return (self.p1, self.p2, self.p3)

    @property
    def colors(self):
        return (self.c1, self.c2, self.c3)

    def bounding_box(self) -> BoundingBox:
        return BoundingBox.from_triangle(self)

    def is_vertex(self, point) -> bool:
        """Exact integer match against one of the three vertices."""
        return any(p.is_at(point) for p in self.vertices)

    def signed_area(self) -> float:
        """Half the cross product of the two edges leaving p1."""
        return 0.5 * self._v0.cross(self._v1)

    def is_degenerate(self) -> bool:
        return self.signed_area() == 0.0

    def barycentric(self, point):
        """
        Barycentric coordinates (u, v, w) of point relative to (p1, p2, p3),
        by projecting point - p1 onto the two edges leaving p1.

        Returns (nan, nan, nan) for a degenerate triangle.
        """
        if self._denom == 0.0:
            return _NAN_COORDS

        v2 = Vector.sub(point, self.p1)
        d20 = v2.dot(self._v0)
        d21 = v2.dot(self._v1)

        # Divide rather than multiply by 1/denom so a vertex maps to exactly 1.0
        v = (self._d11 * d20 - self._d01 * d21) / self._denom
        w = (self._d00 * d21 - self._d01 * d20) / self._denom
        u = 1.0 - v - w
        return (u, v, w)

    def contains(self, point) -> bool:
        """Inside the triangle or on its boundary."""
        return all(0.0 <= c <= 1.0 for c in self.barycentric(point))

    def color_at(self, point) -> Color:
        """Interpolated color at point, or BACKGROUND when outside."""
        if self.is_degenerate():
            return BACKGROUND

        for p, c in zip(self.vertices, self.colors):
            if p.is_at(point):
                return c

        u, v, w = self.barycentric(point)
        if 0.0 <= u <= 1.0 and 0.0 <= v <= 1.0 and 0.0 <= w <= 1.0:
            return Color.blend(self.colors, (u, v, w))
        return BACKGROUND
