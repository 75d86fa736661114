"""Colors, palettes, shape and text styles, fonts and relative sizes for charts."""

__version__ = "0.1.0"

__all__ = ["anchor", "color", "font", "shape", "size", "text"]