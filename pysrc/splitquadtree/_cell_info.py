"""CellInfo: read-only snapshot of one leaf."""

from __future__ import annotations

from dataclasses import dataclass

from .geometry import Rectangle


@dataclass(frozen=True)
class CellInfo:
    """
    Boundary and point count of a single leaf cell.

    Attributes:
        boundary: The leaf's rectangle.
        count: Number of points held by the leaf.
    """

    boundary: Rectangle
    count: int
