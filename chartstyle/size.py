"""Absolute and relative size descriptions resolved against a parent."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any

Dimension = tuple[int, int]


def dimension_of(parent: Any) -> Dimension:
    """Return the (width, height) of a parent: a pair or an object with ``dim()``."""
    if isinstance(parent, tuple):
        if len(parent) != 2:
            raise TypeError(f"a dimension needs two values, got {parent!r}")
        width, height = parent
        return int(width), int(height)
    dim = getattr(parent, "dim", None)
    if callable(dim):
        return dimension_of(tuple(dim()))
    raise TypeError(f"{type(parent).__name__} has no dimension")


def _truncate(value: float) -> int:
    if math.isnan(value):
        return 0
    if math.isinf(value):
        return 2**31 - 1 if value > 0 else -(2**31)
    return max(-(2**31), min(2**31 - 1, int(value)))


def _round_half_away(value: float) -> int:
    if math.isnan(value):
        return 0
    return _truncate(math.copysign(math.floor(abs(value) + 0.5), value))


def in_pixels(size: Any, parent: Any) -> int:
    """Resolve a size description to a number of pixels."""
    if isinstance(size, bool):
        raise TypeError("a boolean is not a size")
    if isinstance(size, int):
        return size
    if isinstance(size, float):
        return _truncate(size)
    resolve = getattr(size, "in_pixels", None)
    if callable(resolve):
        return resolve(parent)
    raise TypeError(f"{type(size).__name__} is not a size description")


class SizeBasis(Enum):
    """Which parent dimension a relative size refers to."""

    HEIGHT = "height"
    WIDTH = "width"
    SMALLER = "smaller"


@dataclass(frozen=True)
class RelativeSize:
    """A fraction of the parent's width, height or smaller side."""

    basis: SizeBasis
    ratio: float

    def in_pixels(self, parent: Any) -> int:
        width, height = dimension_of(parent)
        reference = {
            SizeBasis.WIDTH: width,
            SizeBasis.HEIGHT: height,
            SizeBasis.SMALLER: min(width, height),
        }[self.basis]
        return _round_half_away(self.ratio * float(reference))

    def min(self, min_sz: int) -> RelativeSizeWithBound:
        """Bound the size from below, in pixels."""
        return RelativeSizeWithBound(self, min_size=min_sz)

    def max(self, max_sz: int) -> RelativeSizeWithBound:
        """Bound the size from above, in pixels."""
        return RelativeSizeWithBound(self, max_size=max_sz)


@dataclass(frozen=True)
class RelativeSizeWithBound:
    """A relative size with optional lower and upper pixel bounds."""

    size: RelativeSize
    min_size: int | None = None
    max_size: int | None = None

    def in_pixels(self, parent: Any) -> int:
        size = self.size.in_pixels(parent)
        lower_capped = size if self.min_size is None else max(self.min_size, size)
        # The upper bound is applied to the unbounded size.
        return lower_capped if self.max_size is None else min(self.max_size, size)

    def min(self, min_sz: int) -> RelativeSizeWithBound:
        return replace(self, min_size=min_sz)

    def max(self, max_sz: int) -> RelativeSizeWithBound:
        return replace(self, max_size=max_sz)


def percent_width(value: float) -> RelativeSize:
    """A percentage of the parent's width."""
    return RelativeSize(SizeBasis.WIDTH, float(value) / 100.0)


def percent_height(value: float) -> RelativeSize:
    """A percentage of the parent's height."""
    return RelativeSize(SizeBasis.HEIGHT, float(value) / 100.0)


def percent(value: float) -> RelativeSize:
    """A percentage of the smaller of the parent's width and height."""
    return RelativeSize(SizeBasis.SMALLER, float(value) / 100.0)