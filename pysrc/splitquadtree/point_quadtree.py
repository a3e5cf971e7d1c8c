# point_quadtree.py
"""QuadTree - point spatial index with an identifier registry."""

from __future__ import annotations

import logging
from numbers import Integral
from typing import Any, Hashable, Iterator

from ._cell_info import CellInfo
from ._common import (
    QUADTREE_DTYPE_TO_NP_DTYPE,
    Bounds,
    _is_np_array,
    as_rectangle,
    coerce_point,
    validate_bounds,
    validate_dtype,
    validate_np_dtype,
)
from ._insert_result import InsertResult
from ._node import Quad
from .config import QuadTreeConfig
from .errors import DuplicateIdError, OutOfBoundsError
from .geometry import Point, Rectangle

logger = logging.getLogger(__name__)

_IdCoord = tuple[Hashable, Any, Any]


class QuadTree:
    """
    Spatial index for 2D points keyed by identifier.

    The tree starts as a single Quad over four empty leaves. A leaf that
    receives more than ``config.max_per_cell`` points is replaced by a Quad
    that redistributes them, unless all of its points share the same
    coordinates, in which case it is left over capacity.

    Identifiers are unique per tree. They are auto-assigned by default; you
    can also supply any hashable identifier yourself.

    Performance characteristics:
        Inserts: average O(log n)
        Rect queries: proportional to the number of cells intersecting the
        query rectangle, for roughly uniform data

    Thread-safety:
        Instances are not thread-safe. Use external synchronization if you
        share a tree between threads.

    Args:
        bounds: World bounds as a Rectangle or (min_x, min_y, max_x, max_y).
        config: Splitting thresholds. Defaults to QuadTreeConfig.default().
        dtype: Coordinate type: 'f32' or 'f64' for floats, 'i32' or 'i64'
            for integers. Integral trees split at truncated centers; 'f32'
            trees round every coordinate to single precision.

    Raises:
        ValueError: If bounds are malformed.
        TypeError: If dtype is unsupported or bounds do not fit it.

    Example:
        ```python
        qt = QuadTree((0.0, 0.0, 100.0, 100.0), QuadTreeConfig(2, 8))
        id_ = qt.insert((10.0, 20.0))
        hits = qt.find_in_area((5.0, 5.0, 25.0, 25.0))
        assert id_ in hits
        ```
    """

    __slots__ = (
        "_boundary",
        "_config",
        "_dtype",
        "_next_id",
        "_points",
        "_root",
    )

    def __init__(
        self,
        bounds: Rectangle | Bounds,
        config: QuadTreeConfig | None = None,
        *,
        dtype: str = "f64",
    ):
        self._dtype = validate_dtype(dtype)
        self._boundary = validate_bounds(bounds, dtype)
        self._config = QuadTreeConfig.default() if config is None else config

        self._root = Quad(self._config, self._boundary)
        self._points: dict[Hashable, Point] = {}
        self._next_id = 0

    # ---- Properties ----

    @property
    def boundary(self) -> Rectangle:
        return self._boundary

    @property
    def config(self) -> QuadTreeConfig:
        return self._config

    @property
    def dtype(self) -> str:
        return self._dtype

    # ---- Insertion ----

    def _check_point(self, geom: Any) -> Point:
        point = coerce_point(geom, self._dtype)
        if not self._boundary.contains(point):
            bx0, by0, bx1, by1 = self._boundary
            raise OutOfBoundsError(
                f"Point {point!r} is outside bounds ({bx0}, {by0}, {bx1}, {by1})"
            )
        return point

    def _free_range(self, n: int) -> int:
        # Custom ids such as 7.0 hash like 7 without advancing _next_id.
        start = self._next_id
        while any(i in self._points for i in range(start, start + n)):
            start += 1
        return start

    def insert(self, geom: Point | tuple[Any, Any], id_: Hashable | None = None) -> Hashable:
        """
        Insert a single point.

        IDs are auto-assigned by default: one more than the largest integer ID
        seen so far. You can optionally provide a custom ID to correlate with
        external data structures.

        Args:
            geom: Point as a Point or (x, y).
            id_: Optional custom ID. If None, auto-assigns the next ID.

        Returns:
            The ID used for this point.

        Raises:
            DuplicateIdError: If id_ is already in the tree.
            OutOfBoundsError: If the point is outside the tree bounds.
        """
        if id_ is not None and id_ in self._points:
            logger.debug("Rejected duplicate id %r", id_)
            raise DuplicateIdError(id_)

        point = self._check_point(geom)
        if id_ is None:
            id_ = self._free_range(1)

        self._root.insert(id_, point)
        self._points[id_] = point
        if isinstance(id_, Integral) and id_ >= self._next_id:
            self._next_id = int(id_) + 1
        return id_

    def insert_many(self, geoms: list[Point | tuple[Any, Any]]) -> InsertResult:
        """
        Bulk insert points with auto-assigned contiguous IDs.

        Every point is validated before any is inserted, so a failure leaves
        the tree unchanged.

        Args:
            geoms: List of points.

        Returns:
            InsertResult with count, start_id, and end_id.

        Raises:
            OutOfBoundsError: If any point is outside bounds.
        """
        points = [self._check_point(g) for g in geoms]
        if not points:
            return InsertResult(
                count=0, start_id=self._next_id, end_id=self._next_id - 1
            )
        start_id = self._free_range(len(points))

        root_insert = self._root.insert
        registry = self._points
        for off, point in enumerate(points):
            root_insert(start_id + off, point)
            registry[start_id + off] = point

        last_id = start_id + len(points) - 1
        self._next_id = last_id + 1
        return InsertResult(count=len(points), start_id=start_id, end_id=last_id)

    def insert_many_np(self, geoms: Any) -> InsertResult:
        """
        Bulk insert points from a NumPy array with auto-assigned contiguous IDs.

        Args:
            geoms: NumPy array of shape (N, 2) with dtype matching the tree's dtype.

        Returns:
            InsertResult with count, start_id, and end_id.

        Raises:
            TypeError: If geoms is not a NumPy array or dtype doesn't match.
            OutOfBoundsError: If any point is outside bounds.
            ImportError: If NumPy is not installed.
        """
        if not _is_np_array(geoms):
            raise TypeError("insert_many_np requires a NumPy array")

        import numpy as np

        if not isinstance(geoms, np.ndarray):
            raise TypeError("insert_many_np requires a NumPy array")

        if geoms.size == 0:
            return InsertResult(
                count=0, start_id=self._next_id, end_id=self._next_id - 1
            )

        validate_np_dtype(geoms, self._dtype)
        return self.insert_many(geoms.tolist())

    # ---- Lookup and queries ----

    def lookup(self, id_: Hashable) -> Point | None:
        """Return the point registered under ``id_``, or None if unknown."""
        return self._points.get(id_)

    def find_in_area(self, rect: Rectangle | Bounds) -> set[Hashable]:
        """
        Return the IDs of all points inside a rectangle.

        Containment is half-open: a point (x, y) matches when
        min_x <= x < max_x and min_y <= y < max_y.

        Args:
            rect: Query rectangle as a Rectangle or (min_x, min_y, max_x, max_y).

        Returns:
            Set of IDs.
        """
        out: set[Hashable] = set()
        self._root.find_in_area(as_rectangle(rect), out)
        return out

    def query(self, rect: Rectangle | Bounds) -> list[_IdCoord]:
        """
        Return all points inside a rectangle as (id, x, y) tuples.

        Example:
            ```python
            for id_, x, y in qt.query((10.0, 10.0, 20.0, 20.0)):
                print(f"Found point id={id_} at ({x}, {y})")
            ```
        """
        points = self._points
        return [(id_, *points[id_]) for id_ in self.find_in_area(rect)]

    def query_np(self, rect: Rectangle | Bounds) -> tuple[Any, Any]:
        """
        Return all points inside a rectangle as NumPy arrays.

        Returns:
            Tuple of (ids, coords) where ids has shape (N,) and coords has
            shape (N, 2) with the NumPy dtype matching the tree. ids is int64
            when every id is an int, otherwise an object array holding the
            ids unchanged.

        Raises:
            ImportError: If NumPy is not installed.
        """
        import numpy as np

        hits = self.query(rect)
        id_list = [h[0] for h in hits]
        if all(type(i) is int for i in id_list):
            ids = np.array(id_list, dtype=np.int64)
        else:
            ids = np.empty(len(id_list), dtype=object)
            for k, id_ in enumerate(id_list):
                ids[k] = id_
        coords = np.array(
            [h[1:] for h in hits], dtype=QUADTREE_DTYPE_TO_NP_DTYPE[self._dtype]
        ).reshape(len(hits), 2)
        return ids, coords

    # ---- Diagnostics ----

    def enumerate_cells(self) -> list[CellInfo]:
        """
        Return a snapshot of every leaf, depth-first in quadrant order.

        Trees holding coincident-point clusters may keep over-capacity leaves,
        so do not rely on the cell count of semantically equivalent trees
        being equal.
        """
        out: list[CellInfo] = []
        self._root.cells_info(out)
        return out

    def get_all_node_boundaries(self) -> list[Rectangle]:
        """
        Return all node boundaries in the tree, internal nodes included.
        Useful for visualization.
        """
        out: list[Rectangle] = []
        self._root.node_boundaries(out)
        return out

    def get_inner_max_depth(self) -> int:
        """Return the number of internal levels above the deepest leaf."""
        return self._root.depth()

    # ---- Utilities ----

    def __len__(self) -> int:
        """Return the number of points in the tree."""
        return len(self._points)

    def __contains__(self, point: Any) -> bool:
        """
        Check if any point exists at the given coordinates.

        Example:
            ```python
            qt.insert((10.0, 20.0))
            assert (10.0, 20.0) in qt
            assert (5.0, 5.0) not in qt
            ```
        """
        try:
            p = coerce_point(point, self._dtype)
        except (TypeError, ValueError):
            return False
        if not self._boundary.contains(p):
            return False
        return p in self._root.leaf_for(p).points.values()

    def __iter__(self) -> Iterator[_IdCoord]:
        """Iterate over all (id, x, y) tuples in insertion order."""
        return ((id_, p.x, p.y) for id_, p in self._points.items())

    def __repr__(self) -> str:
        return (
            f"QuadTree(boundary={self._boundary!r}, config={self._config!r}, "
            f"dtype={self._dtype!r}, points={len(self._points)})"
        )
