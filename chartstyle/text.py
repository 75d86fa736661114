"""Text styles and conversion of loose descriptions into them."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Callable

from .anchor import Pos
from .color import BLACK, BackendColor, Color
from .font import (
    FontDesc,
    FontFamily,
    FontStyle,
    FontTransform,
    LayoutBox,
    into_font,
)
from .size import in_pixels


@dataclass(frozen=True)
class TextStyle:
    """Font, color and anchor position of a piece of text."""

    font: FontDesc
    color: BackendColor = field(default_factory=BLACK.to_backend_color)
    pos: Pos = field(default_factory=Pos)

    @classmethod
    def from_font(cls, font: Any) -> TextStyle:
        """Black, top-left anchored text in the font described by ``font``."""
        return cls(into_font(font))

    def with_color(self, color: Color) -> TextStyle:
        return replace(self, color=color.to_backend_color())

    def with_transform(self, trans: FontTransform) -> TextStyle:
        return replace(self, font=self.font.with_transform(trans))

    def with_pos(self, pos: Pos) -> TextStyle:
        return replace(self, pos=pos)

    @property
    def transform(self) -> FontTransform:
        return self.font.transform

    @property
    def style(self) -> FontStyle:
        return self.font.style

    @property
    def family(self) -> FontFamily:
        return self.font.family

    def size(self) -> float:
        return self.font.size

    def layout_box(self, text: str) -> LayoutBox:
        return self.font.layout_box(text)

    def draw(
        self,
        text: str,
        pos: tuple[int, int],
        draw: Callable[[int, int, BackendColor], Any],
    ) -> None:
        """Render ``text``, calling ``draw(x, y, color)`` with the blended color."""
        color = self.color
        self.font.draw(text, pos, lambda x, y, a: draw(x, y, color.mix(float(a))))


@dataclass(frozen=True)
class TextStyleBuilder:
    """A text style description with a color or anchor override."""

    base: Any
    new_color: BackendColor | None = None
    new_pos: Pos | None = None

    def into_text_style(self, parent: Any) -> TextStyle:
        style = into_text_style(self.base, parent)
        if self.new_color is not None:
            style = replace(style, color=self.new_color)
        if self.new_pos is not None:
            style = style.with_pos(self.new_pos)
        return style


def _family_like(value: Any) -> FontFamily:
    if isinstance(value, FontFamily):
        return value
    if isinstance(value, str):
        return FontFamily(value)
    raise TypeError(f"{type(value).__name__} is not a font family")


def _from_tuple(value: tuple, parent: Any) -> TextStyle:
    if not 2 <= len(value) <= 4:
        raise TypeError(f"cannot make a text style from a tuple of {len(value)} items")
    family = _family_like(value[0])
    size = in_pixels(value[1], parent)
    rest = value[2:]
    style = FontStyle.NORMAL
    color: Color | None = None
    if rest and isinstance(rest[0], FontStyle):
        style, rest = rest[0], rest[1:]
    if rest:
        if len(rest) != 1 or not isinstance(rest[0], Color):
            raise TypeError(f"unsupported text style description {value!r}")
        color = rest[0]
    text_style = TextStyle(FontDesc(family, float(size), style))
    return text_style if color is None else text_style.with_color(color)


def into_text_style(value: Any, parent: Any) -> TextStyle:
    """Resolve a text style description against a parent with a dimension."""
    if isinstance(value, TextStyleBuilder):
        return value.into_text_style(parent)
    if isinstance(value, TextStyle):
        return value
    if isinstance(value, (FontDesc, FontFamily, str)):
        return TextStyle.from_font(value)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return TextStyle.from_font((FontFamily.SANS_SERIF, value))
    if isinstance(value, Color):
        return TextStyle.from_font(FontFamily.SANS_SERIF).with_color(value)
    if isinstance(value, tuple):
        return _from_tuple(value, parent)
    raise TypeError(f"cannot make a text style from {type(value).__name__}")


def with_color(value: Any, color: Color) -> TextStyleBuilder:
    """Override the color of a text style description."""
    return TextStyleBuilder(value, new_color=color.to_backend_color())


def with_anchor(value: Any, pos: Pos) -> TextStyleBuilder:
    """Override the anchor position of a text style description."""
    return TextStyleBuilder(value, new_pos=pos)