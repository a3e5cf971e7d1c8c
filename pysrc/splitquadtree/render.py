# render.py
"""SVG rendering of a QuadTree's leaf cells and points."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .point_quadtree import QuadTree

logger = logging.getLogger(__name__)


def _fmt(v: float) -> str:
    return f"{v:.3f}".rstrip("0").rstrip(".")


def to_svg(
    tree: QuadTree,
    width: float = 400.0,
    height: float = 400.0,
    *,
    draw_points: bool = True,
) -> str:
    """
    Render the tree as an SVG document.

    The tree boundary is scaled to fill a ``width`` x ``height`` canvas.
    Each leaf is drawn as an unfilled rectangle and each point as a small
    circle.

    Args:
        tree: Tree to render.
        width: Canvas width in SVG user units.
        height: Canvas height in SVG user units.
        draw_points: Also draw the inserted points.

    Returns:
        The SVG document as a string.
    """
    bx0, by0, bx1, by1 = tree.boundary
    sx = width / (bx1 - bx0) if bx1 != bx0 else 1.0
    sy = height / (by1 - by0) if by1 != by0 else 1.0

    def tx(x: Any) -> str:
        return _fmt((x - bx0) * sx)

    def ty(y: Any) -> str:
        return _fmt((y - by0) * sy)

    lines = [
        f'<svg width="{_fmt(width)}" height="{_fmt(height)}" '
        'xmlns="http://www.w3.org/2000/svg">'
    ]
    cells = tree.enumerate_cells()
    for info in cells:
        x0, y0, x1, y1 = info.boundary
        lines.append(
            f'    <rect x="{tx(x0)}" y="{ty(y0)}" '
            f'width="{_fmt((x1 - x0) * sx)}" height="{_fmt((y1 - y0) * sy)}" '
            'style="fill:none;stroke:black;stroke-width:1" />'
        )
    if draw_points:
        for _, x, y in tree:
            lines.append(f'    <circle cx="{tx(x)}" cy="{ty(y)}" r="1" />')
    lines.append("</svg>")

    logger.debug("Rendered %d cells and %d points", len(cells), len(tree))
    return "\n".join(lines) + "\n"


def write_svg(tree: QuadTree, path: str | Path, **kwargs: Any) -> Path:
    """
    Write ``to_svg(tree, **kwargs)`` to ``path``.

    Returns:
        The path written.
    """
    path = Path(path)
    path.write_text(to_svg(tree, **kwargs), encoding="utf-8")
    logger.info("Wrote %s", path)
    return path
