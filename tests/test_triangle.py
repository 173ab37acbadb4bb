"""Test barycentric coordinates and per-point color interpolation.

Tests for triangle_rasterizer.triangle:
    - Vertices map to their own color exactly
    - Barycentric coordinates sum to 1
    - Edge midpoints count as inside and receive a blended color
    - Points past an edge receive the background color
    - Degenerate (collinear / coincident) triangles never crash and always
      yield the background color

Reference triangle: (0,0) red, (4,0) green, (0,4) blue.

Run:
    pytest tests/test_triangle.py -v
"""
import math

import pytest

from triangle_rasterizer.color import Color, BACKGROUND, RED, GREEN, BLUE
from triangle_rasterizer.geometry import Point
from triangle_rasterizer.triangle import Triangle


@pytest.fixture
def rgb_triangle():
    return Triangle(Point(0, 0), Point(4, 0), Point(0, 4), RED, GREEN, BLUE)


@pytest.fixture
def skewed_triangle():
    return Triangle(Point(3, 7), Point(50, 12), Point(20, 49),
                    Color(17, 200, 33), Color(250, 1, 99), Color(0, 128, 255))


@pytest.fixture
def collinear_triangle():
    return Triangle(Point(0, 0), Point(2, 2), Point(4, 4))


def test_default_colors_are_rgb():
    t = Triangle(Point(0, 0), Point(1, 0), Point(0, 1))
    assert t.colors == (RED, GREEN, BLUE)


def test_accepts_coordinate_pairs():
    t = Triangle((0, 0), (4, 0), (0, 4))
    assert t.p2 == Point(4, 0)


def test_triangle_is_immutable(rgb_triangle):
    with pytest.raises(AttributeError):
        rgb_triangle.p1 = Point(1, 1)


def test_is_vertex(rgb_triangle):
    assert rgb_triangle.is_vertex(Point(4, 0))
    assert rgb_triangle.is_vertex((0, 4))
    assert not rgb_triangle.is_vertex((1, 0))


@pytest.mark.parametrize("fixture", ["rgb_triangle", "skewed_triangle"])
def test_vertices_keep_their_color(fixture, request):
    t = request.getfixturevalue(fixture)
    for p, c in zip(t.vertices, t.colors):
        assert t.color_at(p) == c


def test_barycentric_at_vertices_is_exact(skewed_triangle):
    t = skewed_triangle
    assert t.barycentric(t.p1) == (1.0, 0.0, 0.0)
    assert t.barycentric(t.p2) == (0.0, 1.0, 0.0)
    assert t.barycentric(t.p3) == (0.0, 0.0, 1.0)


@pytest.mark.parametrize("point", [(0, 0), (1, 1), (13, 2), (60, 60), (25, 30), (0, 49)])
def test_barycentric_sums_to_one(skewed_triangle, point):
    assert sum(skewed_triangle.barycentric(point)) == pytest.approx(1.0)


def test_barycentric_interior(rgb_triangle):
    u, v, w = rgb_triangle.barycentric((1, 1))
    assert (u, v, w) == pytest.approx((0.5, 0.25, 0.25))
    assert all(0.0 < c < 1.0 for c in (u, v, w))


def test_interior_blend(rgb_triangle):
    assert rgb_triangle.color_at((1, 1)) == Color(127, 63, 63)


@pytest.mark.parametrize("point, expected", [
    ((2, 0), Color(127, 127, 0)),   # midpoint p1-p2
    ((0, 2), Color(127, 0, 127)),   # midpoint p1-p3
    ((2, 2), Color(0, 127, 127)),   # midpoint p2-p3
])
def test_edge_midpoints_are_inside(rgb_triangle, point, expected):
    assert rgb_triangle.contains(point)
    assert rgb_triangle.color_at(point) == expected


@pytest.mark.parametrize("point", [(4, 4), (3, 2), (2, 3)])
def test_outside_points_are_background(rgb_triangle, point):
    assert not rgb_triangle.contains(point)
    assert rgb_triangle.color_at(point) == BACKGROUND


def test_signed_area(rgb_triangle):
    assert rgb_triangle.signed_area() == 8.0
    flipped = Triangle(Point(0, 0), Point(0, 4), Point(4, 0))
    assert flipped.signed_area() == -8.0
    assert not rgb_triangle.is_degenerate()


def test_winding_does_not_change_coverage(rgb_triangle):
    flipped = Triangle(Point(0, 0), Point(0, 4), Point(4, 0), RED, BLUE, GREEN)
    for x in range(5):
        for y in range(5):
            assert flipped.color_at((x, y)) == rgb_triangle.color_at((x, y))


def test_collinear_triangle_is_degenerate(collinear_triangle):
    assert collinear_triangle.is_degenerate()
    assert all(math.isnan(c) for c in collinear_triangle.barycentric((1, 1)))


def test_collinear_triangle_yields_background(collinear_triangle):
    for x in range(6):
        for y in range(6):
            assert collinear_triangle.color_at((x, y)) == BACKGROUND
            assert not collinear_triangle.contains((x, y))


def test_coincident_vertices_yield_background():
    t = Triangle(Point(3, 3), Point(3, 3), Point(3, 3))
    assert t.is_degenerate()
    assert t.color_at((3, 3)) == BACKGROUND
