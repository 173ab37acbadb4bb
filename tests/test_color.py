"""Test the 8-bit RGB color model.

Tests for triangle_rasterizer.color:
    - Hex parsing ('#RRGGBB' / 'RRGGBB', case-insensitive)
    - Channel range validation
    - Weighted blending with truncation toward zero
    - Conversion to the output pixel format

Run:
    pytest tests/test_color.py -v
"""
import pytest

from triangle_rasterizer.color import (
    Color, parse_hex_color, BACKGROUND, RED, GREEN, BLUE, WHITE)


@pytest.mark.parametrize("text, expected", [
    ("#FF0000", (255, 0, 0)),
    ("00ff00", (0, 255, 0)),
    ("  #1a1A2e ", (26, 26, 46)),
    ("#FFF", None),
    ("#GG0000", None),
    ("", None),
    (None, None),
])
def test_parse_hex_color(text, expected):
    assert parse_hex_color(text) == expected


def test_from_hex():
    assert Color.from_hex("#0000FF") == BLUE
    with pytest.raises(ValueError):
        Color.from_hex("blue")


def test_to_hex():
    assert Color(255, 136, 0).to_hex() == "#FF8800"


def test_background_is_black():
    assert BACKGROUND == Color(0, 0, 0)
    assert BACKGROUND.to_pixel() == (0, 0, 0)


@pytest.mark.parametrize("rgb", [(256, 0, 0), (0, -1, 0), (0, 0, 1000)])
def test_channel_out_of_range(rgb):
    with pytest.raises(ValueError):
        Color(*rgb)


def test_channel_must_be_integer():
    with pytest.raises(TypeError):
        Color(0.5, 0, 0)


def test_blend_truncates_toward_zero():
    # 127.5 -> 127, not 128
    assert Color.blend((RED, GREEN), (0.5, 0.5)) == Color(127, 127, 0)
    assert Color.blend((RED, GREEN, BLUE), (0.5, 0.25, 0.25)) == Color(127, 63, 63)


def test_blend_single_weight_is_exact():
    c = Color(17, 200, 33)
    assert Color.blend((c, WHITE, WHITE), (1.0, 0.0, 0.0)) == c


def test_blend_saturates_rounding_overshoot():
    assert Color.blend((WHITE,), (1.0000000001,)) == WHITE
    assert Color.blend((WHITE,), (-1e-12,)) == BACKGROUND
