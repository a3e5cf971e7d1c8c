# _node.py
"""
Tree nodes: leaf Cells and internal Quads.

The two node kinds share one method surface so a Quad can dispatch to its
children without knowing which kind each one is. Ownership is strictly top
down: a Cell never references its parent. When a Cell overflows it reports
that from ``insert`` and the owning Quad swaps in ``cell.promote()``.

Closely spaced float points can make the tree hundreds of levels deep, so
descent, promotion and traversal all loop over an explicit stack instead of
recursing.
"""

from __future__ import annotations

import logging
from typing import Any, Hashable, Iterator, Union

from ._cell_info import CellInfo
from .config import QuadTreeConfig
from .geometry import Point, Rectangle

logger = logging.getLogger(__name__)


class Cell:
    """Leaf node owning a mapping from id to point."""

    __slots__ = ("boundary", "config", "points")

    def __init__(self, config: QuadTreeConfig, boundary: Rectangle):
        self.config = config
        self.boundary = boundary
        self.points: dict[Hashable, Point] = {}

    def insert(self, id_: Hashable, point: Point) -> bool:
        """
        Store the point.

        Returns:
            True if this cell is over capacity and must be replaced by
            ``promote()``. A cell whose points all share one location is
            never promoted: no subdivision could separate them.
        """
        self.points[id_] = point
        if len(self.points) <= self.config.max_per_cell:
            return False

        if self.needs_split():
            return True
        if len(self.points) == self.config.max_per_cell + 1:
            logger.debug("Coincident points overflow leaf %r at %r", self, point)
        return False

    def needs_split(self) -> bool:
        """True if over capacity, not all coincident, and divisible."""
        if len(self.points) <= self.config.max_per_cell:
            return False
        it = iter(self.points.values())
        first = next(it)
        if all(p == first for p in it):
            return False
        # A quadrant equal to the whole box would route every point back here.
        return self.boundary not in self.boundary.quadrants()

    def promote(self) -> Quad:
        """
        Build a Quad over this cell's boundary holding all of its points.

        Children that are still over capacity are split in turn until every
        leaf of the new subtree fits or holds coincident points only. The
        subtree is complete before it is returned.
        """
        logger.debug("Split in leaf %r", self)
        top = Quad._from_points(self.config, self.boundary, self.points)
        pending = [top]
        while pending:
            quad = pending.pop()
            for i, child in enumerate(quad.children):
                if isinstance(child, Cell) and child.needs_split():
                    logger.debug("Split in leaf %r", child)
                    sub = Quad._from_points(child.config, child.boundary, child.points)
                    quad.children[i] = sub
                    pending.append(sub)
        return top

    def find_in_area(self, rect: Rectangle, out: set) -> None:
        if self.boundary.is_inside_of(rect):
            out.update(self.points)
            return
        contains = rect.contains
        out.update(id_ for id_, p in self.points.items() if contains(p))

    def cells_info(self, out: list[CellInfo]) -> None:
        out.append(CellInfo(self.boundary, len(self.points)))

    def node_boundaries(self, out: list[Rectangle]) -> None:
        out.append(self.boundary)

    def depth(self) -> int:
        return 0

    def leaf_for(self, point: Any) -> Cell:
        return self

    def __repr__(self) -> str:
        return f"Cell(boundary: {self.boundary!r}, points: {len(self.points)})"


class Quad:
    """Internal node owning exactly four children, one per quadrant."""

    __slots__ = ("boundary", "children", "config")

    def __init__(self, config: QuadTreeConfig, boundary: Rectangle):
        self.config = config
        self.boundary = boundary
        self.children: list[Node] = [
            Cell(config, quadrant) for quadrant in boundary.quadrants()
        ]

    @classmethod
    def _from_points(
        cls, config: QuadTreeConfig, boundary: Rectangle, points: dict[Hashable, Point]
    ) -> Quad:
        """New Quad whose four leaves hold ``points``, without splitting them."""
        quad = cls(config, boundary)
        for id_, point in points.items():
            quad.children[quad.child_index(point)].points[id_] = point
        return quad

    def child_index(self, point: Any) -> int:
        """
        Quadrant index of ``point``: 0 bottom-left, 1 bottom-right,
        2 top-left, 3 top-right. Points on a center line go to the
        higher-index side.
        """
        xh, yh = self.boundary.center()
        x, y = point
        return (x >= xh) + 2 * (y >= yh)

    def insert(self, id_: Hashable, point: Point) -> bool:
        node = self
        while True:
            i = node.child_index(point)
            child = node.children[i]
            if isinstance(child, Quad):
                node = child
                continue
            if child.insert(id_, point):
                # Slot is only reassigned once the replacement subtree is complete.
                node.children[i] = child.promote()
            return False

    def _walk(self) -> Iterator[Node]:
        """Yield every node pre-order, children in quadrant order."""
        stack: list[Node] = [self]
        while stack:
            node = stack.pop()
            yield node
            if isinstance(node, Quad):
                stack.extend(reversed(node.children))

    def find_in_area(self, rect: Rectangle, out: set) -> None:
        stack: list[Node] = [self]
        while stack:
            node = stack.pop()
            if isinstance(node, Cell):
                node.find_in_area(rect, out)
            elif node.boundary.overlaps(rect):
                stack.extend(node.children)

    def cells_info(self, out: list[CellInfo]) -> None:
        out.extend(
            CellInfo(n.boundary, len(n.points)) for n in self._walk() if isinstance(n, Cell)
        )

    def node_boundaries(self, out: list[Rectangle]) -> None:
        out.extend(n.boundary for n in self._walk())

    def depth(self) -> int:
        deepest = 0
        stack: list[tuple[Quad, int]] = [(self, 1)]
        while stack:
            quad, level = stack.pop()
            deepest = max(deepest, level)
            stack.extend((c, level + 1) for c in quad.children if isinstance(c, Quad))
        return deepest

    def leaf_for(self, point: Any) -> Cell:
        node: Node = self
        while isinstance(node, Quad):
            node = node.children[node.child_index(point)]
        return node

    def __repr__(self) -> str:
        kinds = ", ".join(type(c).__name__ for c in self.children)
        return f"Quad(boundary: {self.boundary!r}, children: [{kinds}])"


Node = Union[Cell, Quad]
