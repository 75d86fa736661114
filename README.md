# chartstyle

Style primitives for drawing charts: colors and accessible palettes, shape
styles, font descriptions with a simple layout estimator, text styles with
anchors, and sizes given relative to a parent area. It has no dependencies
beyond the standard library.

## Installation

```
pip install chartstyle
```

## Colors (`chartstyle.color`)

```python
from chartstyle.color import RGBColor, HSLColor, PALETTE99, RED, TRANSPARENT

red = RGBColor(255, 0, 0)
red.rgb()                       # (255, 0, 0)
red.alpha()                     # 1.0
half = red.mix(0.5)             # RGBAColor(255, 0, 0, 0.5)

HSLColor(0.0, 1.0, 0.5).rgb()   # (255, 0, 0)

PALETTE99.pick(21).rgb()        # wraps around: (230, 25, 75)
```

- `RGBColor` and `RGBAColor` check that each channel is an integer in 0..255
  and raise `ValueError` otherwise.
- `HSLColor` clamps each component to [0, 1] before converting.
- Every color gives a `BackendColor` (an `rgb` triple plus `alpha`) from
  `to_backend_color()`, and an `RGBAColor` from `to_rgba()`.
- Predefined colors: `WHITE`, `BLACK`, `RED`, `GREEN`, `BLUE`, `YELLOW`,
  `CYAN`, `MAGENTA` and `TRANSPARENT`.
- Palettes: `PALETTE99`, `PALETTE9999` and `PALETTE100`. `Palette.pick(idx)`
  returns a `PaletteColor`, wrapping the index around the palette's length.

## Shape styles (`chartstyle.shape`)

```python
from chartstyle.shape import ShapeStyle

style = ShapeStyle.from_color(red).as_filled().with_stroke_width(3)
style.filled          # True
style.stroke_width    # 3
```

`ShapeStyle.from_color` makes an unfilled style with a stroke width of 1.
Every color also offers the shortcuts `filled()` and `stroke_width(width)`.
A negative stroke width raises `ValueError`.

## Relative sizes (`chartstyle.size`)

```python
from chartstyle.size import percent_width, percent_height, percent, in_pixels

percent_height(10).in_pixels((100, 200))          # 20
percent_width(10).in_pixels((100, 200))           # 10
percent_width(10).min(30).in_pixels((100, 200))   # 30
percent(10).in_pixels((400, 200))                 # 20
in_pixels(12.7, (100, 100))                       # 12
```

A parent is a `(width, height)` pair or any object with a `dim()` method
returning one. `in_pixels` accepts integers, floats (truncated) and any
object with an `in_pixels(parent)` method, such as `RelativeSize` and
`RelativeSizeWithBound`.

## Fonts (`chartstyle.font`)

```python
from chartstyle.font import into_font, FontStyle, FontTransform

font = into_font(("sans-serif", 20))
font.layout_box("hello")      # estimated ((x0, y0), (x1, y1))
font.box_size("hello")        # (width, height)
font.with_transform(FontTransform.ROTATE90).box_size("hello")   # swapped
bold = into_font(("serif", 14, FontStyle.BOLD))
```

`into_font` takes a `FontDesc`, a family name, a `FontFamily`, or a
`(family, size)` or `(family, size, style)` tuple; the default size is 12.
Layout boxes are rough estimates from the font size and the text's length.

## Text styles (`chartstyle.text`, `chartstyle.anchor`)

```python
from chartstyle.anchor import Pos, HPos, VPos
from chartstyle.text import TextStyle, into_text_style, with_color, with_anchor

style = into_text_style(("sans-serif", 20), (800, 600))
colored = with_color("serif", red).into_text_style((800, 600))
centered = with_anchor(style, Pos(HPos.CENTER, VPos.CENTER)).into_text_style((800, 600))
```

`into_text_style` accepts a `TextStyle`, a `TextStyleBuilder`, a font
description, a bare size (sans-serif), a color (sans-serif, size 12), or a
tuple `(family, size[, FontStyle][, color])` where the size may be relative
to the parent. A `TextStyle` defaults to black with a top-left anchor; its
`with_color`, `with_transform` and `with_pos` methods return updated copies.

## What this package does not do

There is no rasterizer or drawing backend. Text extents are estimated, not
measured from real font files, and `FontDesc.draw` and `TextStyle.draw`
raise `FontError` because the built-in font cannot render glyphs.

## Running the tests

```
pip install -e ".[test]"
pytest
```