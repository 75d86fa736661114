"""The style used to draw shapes."""

from __future__ import annotations

from dataclasses import dataclass, replace

from .color import BackendColor, Color, RGBAColor


@dataclass(frozen=True)
class ShapeStyle:
    """Color, fill flag and stroke width for a shape."""

    color: RGBAColor
    filled: bool = False
    stroke_width: int = 1

    @classmethod
    def from_color(cls, color: Color) -> ShapeStyle:
        """Make an unfilled style with a stroke width of 1 from a color."""
        return cls(color.to_rgba(), False, 1)

    def as_filled(self) -> ShapeStyle:
        return replace(self, color=self.color.to_rgba(), filled=True)

    def with_stroke_width(self, width: int) -> ShapeStyle:
        if width < 0:
            raise ValueError(f"stroke width must not be negative, got {width}")
        return replace(self, color=self.color.to_rgba(), stroke_width=width)

    def backend_color(self) -> BackendColor:
        return self.color.to_backend_color()