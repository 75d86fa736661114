"""Color representations, predefined colors and accessible palettes."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .shape import ShapeStyle

RGB = tuple[int, int, int]


def _check_channel(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
        raise ValueError(f"{name} channel must be an integer in 0..255, got {value!r}")


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def _to_u8(value: float) -> int:
    if math.isnan(value):
        return 0
    return max(0, min(255, int(_round_half_away(value))))


def _clamp_unit(value: float) -> float:
    if math.isnan(value):
        return 1.0
    return max(0.0, min(1.0, value))


@dataclass(frozen=True)
class BackendColor:
    """A normalized color: an RGB triple plus an alpha channel."""

    rgb: RGB
    alpha: float

    def mix(self, value: float) -> BackendColor:
        """Return the same color with its opacity scaled by ``value``."""
        return BackendColor(self.rgb, self.alpha * value)


class Color(ABC):
    """Any color representation."""

    @abstractmethod
    def to_backend_color(self) -> BackendColor:
        """Normalize this color to a backend color."""

    def rgb(self) -> RGB:
        return self.to_backend_color().rgb

    def alpha(self) -> float:
        return self.to_backend_color().alpha

    def mix(self, value: float) -> RGBAColor:
        """Return this color with its opacity scaled by ``value``."""
        r, g, b = self.rgb()
        return RGBAColor(r, g, b, self.alpha() * value)

    def to_rgba(self) -> RGBAColor:
        r, g, b = self.rgb()
        return RGBAColor(r, g, b, self.alpha())

    def filled(self) -> ShapeStyle:
        """Make a filled shape style from this color."""
        from .shape import ShapeStyle

        return ShapeStyle.from_color(self).as_filled()

    def stroke_width(self, width: int) -> ShapeStyle:
        """Make a shape style with the given stroke width from this color."""
        from .shape import ShapeStyle

        return ShapeStyle.from_color(self).with_stroke_width(width)


@dataclass(frozen=True)
class RGBAColor(Color):
    """A color with red, green, blue and alpha channels."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: float = 0.0

    def __post_init__(self) -> None:
        for name, value in (("red", self.r), ("green", self.g), ("blue", self.b)):
            _check_channel(name, value)

    def to_backend_color(self) -> BackendColor:
        return BackendColor((self.r, self.g, self.b), float(self.a))


@dataclass(frozen=True)
class RGBColor(Color):
    """An opaque color given by its RGB value."""

    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self) -> None:
        for name, value in (("red", self.r), ("green", self.g), ("blue", self.b)):
            _check_channel(name, value)

    def to_backend_color(self) -> BackendColor:
        return BackendColor((self.r, self.g, self.b), 1.0)


@dataclass(frozen=True)
class HSLColor(Color):
    """A color in HSL space; each component is clamped to [0, 1]."""

    h: float
    s: float
    l: float  # noqa: E741

    def to_backend_color(self) -> BackendColor:
        h, s, l = (_clamp_unit(v) for v in (self.h, self.s, self.l))  # noqa: E741

        if s == 0.0:
            value = _to_u8(l * 255.0)
            return BackendColor((value, value, value), 1.0)

        q = l * (1.0 + s) if l < 0.5 else l + s - l * s
        p = 2.0 * l - q

        def convert(t: float) -> int:
            if t < 0.0:
                t += 1.0
            if t > 1.0:
                t -= 1.0
            if t < 1.0 / 6.0:
                value = p + (q - p) * 6.0 * t
            elif t < 1.0 / 2.0:
                value = q
            elif t < 2.0 / 3.0:
                value = p + (q - p) * (2.0 / 3.0 - t) * 6.0
            else:
                value = p
            return _to_u8(value * 255.0)

        return BackendColor(
            (convert(h + 1.0 / 3.0), convert(h), convert(h - 1.0 / 3.0)), 1.0
        )


@dataclass(frozen=True)
class Palette:
    """A named, fixed list of RGB colors."""

    name: str
    colors: tuple[RGB, ...]

    def __post_init__(self) -> None:
        if not self.colors:
            raise ValueError("a palette needs at least one color")

    def __len__(self) -> int:
        return len(self.colors)

    def pick(self, idx: int) -> PaletteColor:
        """Pick a color by index, wrapping around the palette."""
        return PaletteColor(self, idx % len(self.colors))


@dataclass(frozen=True)
class PaletteColor(Color):
    """A color taken from a palette."""

    palette: Palette
    index: int

    def to_backend_color(self) -> BackendColor:
        return BackendColor(self.palette.colors[self.index], 1.0)


WHITE = RGBColor(255, 255, 255)
BLACK = RGBColor(0, 0, 0)
RED = RGBColor(255, 0, 0)
GREEN = RGBColor(0, 255, 0)
BLUE = RGBColor(0, 0, 255)
YELLOW = RGBColor(255, 255, 0)
CYAN = RGBColor(0, 255, 255)
MAGENTA = RGBColor(255, 0, 255)
TRANSPARENT = RGBAColor(0, 0, 0, 0.0)

PALETTE99 = Palette(
    "Palette99",
    (
        (230, 25, 75),
        (60, 180, 75),
        (255, 225, 25),
        (0, 130, 200),
        (245, 130, 48),
        (145, 30, 180),
        (70, 240, 240),
        (240, 50, 230),
        (210, 245, 60),
        (250, 190, 190),
        (0, 128, 128),
        (230, 190, 255),
        (170, 110, 40),
        (255, 250, 200),
        (128, 0, 0),
        (170, 255, 195),
        (128, 128, 0),
        (255, 215, 180),
        (0, 0, 128),
        (128, 128, 128),
        (0, 0, 0),
    ),
)

PALETTE9999 = Palette(
    "Palette9999",
    (
        (255, 225, 25),
        (0, 130, 200),
        (245, 130, 48),
        (250, 190, 190),
        (230, 190, 255),
        (128, 0, 0),
        (0, 0, 128),
        (128, 128, 128),
        (0, 0, 0),
    ),
)

PALETTE100 = Palette(
    "Palette100",
    ((255, 225, 25), (0, 130, 200), (128, 128, 128), (0, 0, 0)),
)