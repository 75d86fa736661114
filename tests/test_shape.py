import pytest

from chartstyle.color import BLUE, RED, WHITE, HSLColor
from chartstyle.shape import ShapeStyle


def test_from_color_defaults():
    style = ShapeStyle.from_color(RED)
    assert style.color == RED.to_rgba()
    assert style.filled is False
    assert style.stroke_width == 1


def test_as_filled_keeps_stroke_width():
    style = ShapeStyle.from_color(BLUE).with_stroke_width(4).as_filled()
    assert style.filled is True
    assert style.stroke_width == 4
    assert style.color == BLUE.to_rgba()


def test_with_stroke_width_keeps_fill():
    style = ShapeStyle.from_color(RED).as_filled().with_stroke_width(2)
    assert style.filled is True
    assert style.stroke_width == 2


def test_original_unchanged():
    base = ShapeStyle.from_color(RED)
    base.as_filled()
    base.with_stroke_width(7)
    assert base == ShapeStyle.from_color(RED)


def test_backend_color_matches_color():
    mixed = WHITE.mix(0.5)
    style = ShapeStyle.from_color(mixed)
    assert style.backend_color() == mixed.to_backend_color()


def test_from_hsl_color():
    color = HSLColor(0.0, 1.0, 0.5)
    assert ShapeStyle.from_color(color).backend_color() == RED.to_backend_color()


def test_negative_stroke_width_rejected():
    with pytest.raises(ValueError):
        ShapeStyle.from_color(RED).with_stroke_width(-1)