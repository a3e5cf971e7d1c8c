"""splitquadtree - Point quadtree that splits crowded leaves on demand."""

from ._cell_info import CellInfo
from ._insert_result import InsertResult
from .config import QuadTreeConfig
from .errors import (
    DuplicateIdError,
    InvalidConfigError,
    OutOfBoundsError,
    QuadTreeError,
)
from .geometry import Point, Rectangle
from .point_quadtree import QuadTree

__all__ = [
    "CellInfo",
    "DuplicateIdError",
    "InsertResult",
    "InvalidConfigError",
    "OutOfBoundsError",
    "Point",
    "QuadTree",
    "QuadTreeConfig",
    "QuadTreeError",
    "Rectangle",
]
