import logging
import math
import time
from typing import List, Tuple

import pygame

from splitquadtree import QuadTree, QuadTreeConfig
from splitquadtree._logging import setup_logging
from splitquadtree.render import write_svg

logger = logging.getLogger("cellview")

SIDE = 1000.0
N_RADIAL = 100
N_ALONG = 100

CELL_COLOR = (40, 40, 40)
POINT_COLOR = (200, 30, 30)
BG_COLOR = (255, 255, 255)

# ---------------------------- Point pattern ---------------------------- #


def circular_points(
    side: float = SIDE, n_radial: int = N_RADIAL, n_along: int = N_ALONG
) -> List[Tuple[float, float]]:
    """Spokes radiating from the center of a side x side square."""
    pts = []
    for i in range(n_radial):
        angle = 2.0 * math.pi / n_radial * i
        for j in range(n_along):
            dist = side / n_along * j / 2.0
            pts.append((math.sin(angle) * dist + side / 2.0,
                        math.cos(angle) * dist + side / 2.0))
    return pts


# ------------------------------ CellView ------------------------------ #


class CellView:
    def __init__(self, screen, width, height):
        self.screen = screen
        self.width = width
        self.height = height
        self.qt = QuadTree((0.0, 0.0, SIDE, SIDE), QuadTreeConfig(10, 20))

        start = time.perf_counter()
        res = self.qt.insert_many(circular_points())
        logger.info(
            "Added %d points.  Total cells: %d.  Took %.1fms",
            res.count,
            len(self.qt.enumerate_cells()),
            (time.perf_counter() - start) * 1000.0,
        )

    def to_world(self, x, y):
        return (x * SIDE / self.width, y * SIDE / self.height)

    def to_screen(self, x, y):
        return (x * self.width / SIDE, y * self.height / SIDE)

    def add_point(self, sx, sy):
        x, y = self.to_world(sx, sy)
        if (x, y) not in self.qt:
            id_ = self.qt.insert((x, y))
            logger.debug("Inserted %s at (%.1f, %.1f)", id_, x, y)

    def draw(self):
        for info in self.qt.enumerate_cells():
            x0, y0, x1, y1 = info.boundary
            left, top = self.to_screen(x0, y0)
            right, bottom = self.to_screen(x1, y1)
            pygame.draw.rect(
                self.screen,
                CELL_COLOR,
                pygame.Rect(int(left), int(top), max(1, int(right - left)), max(1, int(bottom - top))),
                1,
            )
        for _, x, y in self.qt:
            sx, sy = self.to_screen(x, y)
            self.screen.set_at((int(sx), int(sy)), POINT_COLOR)


# ------------------------------- main ------------------------------- #


def main():
    setup_logging()
    pygame.init()
    width, height = 800, 800
    screen = pygame.display.set_mode((width, height))
    pygame.display.set_caption("splitquadtree cells")
    clock = pygame.time.Clock()
    view = CellView(screen, width, height)

    running = True
    while running:
        clock.tick(30)
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.MOUSEBUTTONDOWN:
                view.add_point(*event.pos)
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_s:
                write_svg(view.qt, "cells.svg")

        screen.fill(BG_COLOR)
        view.draw()
        pygame.display.flip()

    pygame.quit()


if __name__ == "__main__":
    main()
