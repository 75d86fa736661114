"""Font descriptions and the built-in estimating font implementation."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from .color import Color
    from .text import TextStyle

LayoutBox = tuple[tuple[int, int], tuple[int, int]]

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


def _round_to_i32(value: float) -> int:
    if math.isnan(value):
        return 0
    if math.isinf(value):
        return _I32_MAX if value > 0 else _I32_MIN
    rounded = math.copysign(math.floor(abs(value) + 0.5), value)
    return max(_I32_MIN, min(_I32_MAX, int(rounded)))


class FontError(Exception):
    """Raised when a font operation fails."""

    def __init__(self, message: str = "General Error") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class FontFamily:
    """A font family given by name, such as ``serif`` or a typeface name."""

    name: str

    def as_str(self) -> str:
        return self.name


FontFamily.SERIF = FontFamily("serif")  # type: ignore[attr-defined]
FontFamily.SANS_SERIF = FontFamily("sans-serif")  # type: ignore[attr-defined]
FontFamily.MONOSPACE = FontFamily("monospace")  # type: ignore[attr-defined]


class FontStyle(Enum):
    """A font variation; unknown names resolve to normal."""

    NORMAL = "normal"
    OBLIQUE = "oblique"
    ITALIC = "italic"
    BOLD = "bold"

    @classmethod
    def _missing_(cls, value: object) -> FontStyle | None:
        if isinstance(value, str):
            return cls.NORMAL
        return None

    def as_str(self) -> str:
        return self.value


class FontTransform(Enum):
    """A rotation applied to rendered text."""

    NONE = 0
    ROTATE90 = 90
    ROTATE180 = 180
    ROTATE270 = 270

    def transform(self, x: int, y: int) -> tuple[int, int]:
        """Apply the rotation to a vector."""
        if self is FontTransform.ROTATE90:
            return -y, x
        if self is FontTransform.ROTATE180:
            return -x, -y
        if self is FontTransform.ROTATE270:
            return y, -x
        return x, y


@dataclass(frozen=True)
class NaiveFontData:
    """A font that only estimates text extents and cannot rasterize."""

    family: str
    style: str

    def estimate_layout(self, size: float, text: str) -> LayoutBox:
        """Roughly estimate the layout box of ``text`` at ``size``."""
        em = size / 1.24 / 1.24
        length = len(text.encode("utf-8"))
        return (
            (0, -_round_to_i32(em)),
            (_round_to_i32(em * 0.7 * length), _round_to_i32(em * 0.24)),
        )

    def draw(
        self,
        pos: tuple[int, int],
        size: float,
        text: str,
        draw: Callable[[int, int, float], Any],
    ) -> None:
        raise FontError("The font implementation is unable to draw text")


def _family_of(value: Any) -> FontFamily:
    if isinstance(value, FontFamily):
        return value
    if isinstance(value, str):
        return FontFamily(value)
    raise TypeError(f"{type(value).__name__} is not a font family")


def _style_of(value: Any) -> FontStyle:
    if isinstance(value, FontStyle):
        return value
    if isinstance(value, str):
        return FontStyle(value)
    raise TypeError(f"{type(value).__name__} is not a font style")


@dataclass(frozen=True)
class FontDesc:
    """A font: family, size, style and transformation."""

    family: FontFamily
    size: float = 12.0
    style: FontStyle = FontStyle.NORMAL
    transform: FontTransform = FontTransform.NONE
    data: NaiveFontData = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "family", _family_of(self.family))
        object.__setattr__(self, "style", _style_of(self.style))
        object.__setattr__(self, "size", float(self.size))
        object.__setattr__(
            self, "data", NaiveFontData(self.family.as_str(), self.style.as_str())
        )

    @property
    def name(self) -> str:
        return self.family.as_str()

    def resize(self, size: float) -> FontDesc:
        return replace(self, size=size)

    def with_style(self, style: FontStyle) -> FontDesc:
        return replace(self, style=style)

    def with_transform(self, trans: FontTransform) -> FontDesc:
        return replace(self, transform=trans)

    def color(self, color: Color) -> TextStyle:
        """Make a text style with this font and the given color."""
        from .text import TextStyle

        return TextStyle(self, color.to_backend_color())

    def layout_box(self, text: str) -> LayoutBox:
        """The untransformed layout box of ``text``; its top is usually negative."""
        return self.data.estimate_layout(self.size, text)

    def box_size(self, text: str) -> tuple[int, int]:
        """The size of ``text`` with the font transformation applied."""
        (min_x, min_y), (max_x, max_y) = self.layout_box(text)
        w, h = self.transform.transform(max_x - min_x, max_y - min_y)
        return abs(w), abs(h)

    def draw(
        self,
        text: str,
        pos: tuple[int, int],
        draw: Callable[[int, int, float], Any],
    ) -> None:
        """Render ``text`` at ``pos``, calling ``draw(x, y, alpha)`` per pixel."""
        self.data.draw(pos, self.size, text, draw)


def into_font(value: Any) -> FontDesc:
    """Build a font description from a name, family, or (family, size[, style]) tuple."""
    if isinstance(value, FontDesc):
        return value
    if isinstance(value, (str, FontFamily)):
        return FontDesc(_family_of(value))
    if isinstance(value, tuple):
        if len(value) == 2:
            family, size = value
            return FontDesc(_family_of(family), float(size))
        if len(value) == 3:
            family, size, style = value
            return FontDesc(_family_of(family), float(size), _style_of(style))
        raise TypeError(f"cannot make a font from a tuple of {len(value)} items")
    raise TypeError(f"cannot make a font from {type(value).__name__}")