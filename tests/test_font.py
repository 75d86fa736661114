import pytest

from chartstyle.color import RED
from chartstyle.font import (
    FontDesc,
    FontError,
    FontFamily,
    FontStyle,
    FontTransform,
    NaiveFontData,
    into_font,
)


def test_font_error_default_message():
    assert str(FontError()) == "General Error"


def test_family_as_str_round_trip():
    assert FontFamily.SANS_SERIF.as_str() == "sans-serif"
    assert FontFamily("Arial").as_str() == "Arial"
    assert FontFamily(FontFamily.SERIF.as_str()) == FontFamily.SERIF


def test_style_round_trip_and_unknown():
    for style in FontStyle:
        assert FontStyle(style.as_str()) is style
    assert FontStyle("no-such-style") is FontStyle.NORMAL


@pytest.mark.parametrize("x,y", [(3, 5), (-2, 7), (0, 0)])
def test_transform_rotations_compose(x, y):
    assert FontTransform.NONE.transform(x, y) == (x, y)
    assert FontTransform.ROTATE180.transform(x, y) == (-x, -y)
    once = FontTransform.ROTATE90.transform(x, y)
    assert FontTransform.ROTATE90.transform(*once) == (-x, -y)
    assert FontTransform.ROTATE270.transform(*once) == (x, y)


def test_naive_layout_invariants():
    data = NaiveFontData("serif", "normal")
    (x0, top), (width, bottom) = data.estimate_layout(20.0, "hello")
    assert x0 == 0
    assert top <= 0 <= bottom
    assert data.estimate_layout(20.0, "")[1][0] == 0
    assert data.estimate_layout(20.0, "hello world")[1][0] > width


def test_naive_layout_counts_bytes():
    data = NaiveFontData("serif", "normal")
    assert data.estimate_layout(30.0, "\u00e9") == data.estimate_layout(30.0, "ab")


def test_naive_layout_zero_size():
    data = NaiveFontData("serif", "normal")
    assert data.estimate_layout(0.0, "abc") == ((0, 0), (0, 0))


def test_into_font_defaults():
    font = into_font("serif")
    assert font.family == FontFamily.SERIF
    assert font.size == 12.0
    assert font.style is FontStyle.NORMAL
    assert font.transform is FontTransform.NONE


def test_into_font_tuples():
    font = into_font(("Arial", 20))
    assert (font.name, font.size) == ("Arial", 20.0)
    styled = into_font((FontFamily.MONOSPACE, 14, "bold"))
    assert styled.style is FontStyle.BOLD
    assert into_font(styled) is styled


def test_into_font_rejects_other_values():
    with pytest.raises(TypeError):
        into_font(3.5)
    with pytest.raises(TypeError):
        into_font(("serif", 1, "bold", "extra"))


def test_derived_fonts_keep_other_fields():
    font = FontDesc(FontFamily.SERIF, 16, FontStyle.ITALIC)
    bigger = font.resize(24)
    assert (bigger.size, bigger.style, bigger.family) == (24.0, FontStyle.ITALIC, font.family)
    rotated = font.with_transform(FontTransform.ROTATE90)
    assert rotated.transform is FontTransform.ROTATE90
    assert rotated.size == font.size
    assert font.with_style(FontStyle.BOLD).style is FontStyle.BOLD


def test_box_size_swaps_under_rotation():
    font = FontDesc(FontFamily.SANS_SERIF, 30)
    w, h = font.box_size("label")
    assert font.with_transform(FontTransform.ROTATE90).box_size("label") == (h, w)
    assert font.with_transform(FontTransform.ROTATE180).box_size("label") == (w, h)
    (x0, y0), (x1, y1) = font.layout_box("label")
    assert (w, h) == (x1 - x0, y1 - y0)


def test_color_makes_text_style():
    style = FontDesc(FontFamily.SERIF).color(RED)
    assert style.color == RED.to_backend_color()
    assert style.font == FontDesc(FontFamily.SERIF)


def test_draw_is_unsupported():
    font = FontDesc(FontFamily.SERIF)
    with pytest.raises(FontError):
        font.draw("x", (0, 0), lambda x, y, a: None)