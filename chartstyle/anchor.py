"""Anchor positions for placing text relative to a point."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class HPos(Enum):
    """Horizontal anchor position."""

    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


class VPos(Enum):
    """Vertical anchor position."""

    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"


@dataclass(frozen=True)
class Pos:
    """A text anchor: horizontal and vertical placement, top-left by default."""

    h_pos: HPos = HPos.LEFT
    v_pos: VPos = VPos.TOP