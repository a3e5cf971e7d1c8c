# geometry.py
"""Point and Rectangle value types shared by the tree and its callers."""

from __future__ import annotations

import math
from numbers import Integral
from typing import Any, NamedTuple


def _half(v: Any) -> Any:
    """Halve ``v``, truncating toward zero for integral values."""
    if isinstance(v, Integral):
        q = abs(v) // 2
        return q if v >= 0 else -q
    return v / 2


def _midpoint(a: Any, b: Any) -> Any:
    """Halfway between a and b, without overflowing large finite floats."""
    m = _half(a + b)
    if isinstance(m, float) and math.isinf(m) and math.isfinite(a) and math.isfinite(b):
        return a / 2 + b / 2
    return m


class Point(NamedTuple):
    """
    Immutable 2D point.

    Being a NamedTuple, a Point unpacks and compares like a plain ``(x, y)``
    tuple, so callers can pass either form wherever a point is expected.
    """

    x: Any
    y: Any

    def as_tuple(self) -> tuple[Any, Any]:
        return (self.x, self.y)

    def __repr__(self) -> str:
        return f"({self.x}, {self.y})"


class Rectangle(NamedTuple):
    """
    Axis-aligned box as (x0, y0, x1, y1).

    Assumes x0 <= x1 and y0 <= y1. Point containment is half-open so that a
    point on an edge shared by two sibling quadrants belongs to exactly one.
    """

    x0: Any
    y0: Any
    x1: Any
    y1: Any

    def as_tuple(self) -> tuple[Any, Any, Any, Any]:
        return (self.x0, self.y0, self.x1, self.y1)

    def center(self) -> Point:
        return Point(_midpoint(self.x0, self.x1), _midpoint(self.y0, self.y1))

    def contains(self, point: tuple[Any, Any]) -> bool:
        """Return True if ``point`` lies in [x0, x1) x [y0, y1)."""
        px, py = point
        return self.x0 <= px < self.x1 and self.y0 <= py < self.y1

    def is_inside_of(self, other: Rectangle) -> bool:
        """Closed subset test: True if this box lies entirely within ``other``."""
        return (
            self.x0 >= other.x0
            and self.y0 >= other.y0
            and self.x1 <= other.x1
            and self.y1 <= other.y1
        )

    def overlaps(self, other: Rectangle) -> bool:
        """True unless one box lies entirely to one side of the other."""
        return not (
            self.x1 < other.x0
            or other.x1 < self.x0
            or self.y1 < other.y0
            or other.y1 < self.y0
        )

    def quadrants(self) -> tuple[Rectangle, Rectangle, Rectangle, Rectangle]:
        """
        Split at the center into bottom-left, bottom-right, top-left, top-right.

        The four boxes tile this one with no gaps and no overlap.
        """
        x0, y0, x1, y1 = self
        xh, yh = self.center()
        return (
            Rectangle(x0, y0, xh, yh),
            Rectangle(xh, y0, x1, yh),
            Rectangle(x0, yh, xh, y1),
            Rectangle(xh, yh, x1, y1),
        )

    def __repr__(self) -> str:
        return f"(({self.x0}, {self.y0}) - ({self.x1}, {self.y1}))"
