import logging

from splitquadtree import QuadTreeConfig, Rectangle
from splitquadtree._node import Cell, Quad


def test_quad_new_has_four_empty_cells():
    quad = Quad(QuadTreeConfig.default(), Rectangle(0, 10, 10, 40))
    infos = []
    quad.cells_info(infos)
    assert [repr(i.boundary) for i in infos] == [
        "((0, 10) - (5, 25))",
        "((5, 10) - (10, 25))",
        "((0, 25) - (5, 40))",
        "((5, 25) - (10, 40))",
    ]
    assert all(i.count == 0 for i in infos)
    assert all(isinstance(c, Cell) for c in quad.children)


def test_child_index_routes_center_lines_to_higher_quadrant():
    quad = Quad(QuadTreeConfig.default(), Rectangle(0, 0, 10, 10))
    assert quad.child_index((4, 4)) == 0
    assert quad.child_index((5, 4)) == 1
    assert quad.child_index((4, 5)) == 2
    assert quad.child_index((5, 5)) == 3
    assert quad.child_index((9, 0)) == 1


def test_cell_reports_promotion_instead_of_splitting_itself():
    cell = Cell(QuadTreeConfig(1, 2), Rectangle(0, 0, 10, 10))
    assert cell.insert(0, (1, 1)) is False
    assert cell.insert(1, (2, 2)) is False
    assert cell.insert(2, (8, 8)) is True
    # Still a plain cell holding everything until the parent promotes it
    assert len(cell.points) == 3

    quad = cell.promote()
    assert isinstance(quad, Quad)
    assert quad.boundary == cell.boundary
    assert [len(c.points) for c in quad.children] == [2, 0, 0, 1]


def test_coincident_cell_is_never_promoted():
    cell = Cell(QuadTreeConfig(1, 2), Rectangle(0, 0, 10, 10))
    for i in range(10):
        assert cell.insert(i, (3, 3)) is False
    assert len(cell.points) == 10


def test_quad_swaps_promoted_child_into_slot():
    quad = Quad(QuadTreeConfig(1, 2), Rectangle(0, 0, 16, 16))
    old = quad.children[0]
    for i, p in enumerate([(1, 1), (2, 2), (5, 5)]):
        assert quad.insert(i, p) is False
    assert quad.children[0] is not old
    assert isinstance(quad.children[0], Quad)
    assert quad.depth() == 2


def test_find_in_area_prunes_and_short_circuits():
    quad = Quad(QuadTreeConfig(1, 2), Rectangle(0, 0, 16, 16))
    quad.insert("a", (1, 1))
    quad.insert("b", (12, 12))
    out = set()
    quad.find_in_area(Rectangle(0, 0, 8, 8), out)
    assert out == {"a"}

    out = set()
    quad.find_in_area(Rectangle(20, 20, 30, 30), out)
    assert out == set()

    out = set()
    quad.find_in_area(Rectangle(1, 1, 2, 2), out)
    assert out == {"a"}
    out = set()
    quad.find_in_area(Rectangle(0, 0, 1, 1), out)
    assert out == set()


def test_leaf_for():
    quad = Quad(QuadTreeConfig(1, 2), Rectangle(0, 0, 16, 16))
    assert quad.leaf_for((12, 3)) is quad.children[1]


def test_split_is_logged(caplog):
    quad = Quad(QuadTreeConfig(1, 2), Rectangle(0, 0, 16, 16))
    with caplog.at_level(logging.DEBUG, logger="splitquadtree._node"):
        for i, p in enumerate([(1, 1), (2, 2), (5, 5)]):
            quad.insert(i, p)
    assert any("Split in leaf" in r.getMessage() for r in caplog.records)


def test_coincident_overflow_is_logged_once(caplog):
    cell = Cell(QuadTreeConfig(1, 2), Rectangle(0, 0, 10, 10))
    with caplog.at_level(logging.DEBUG, logger="splitquadtree._node"):
        for i in range(6):
            cell.insert(i, (3, 3))
    msgs = [r.getMessage() for r in caplog.records if "Coincident" in r.getMessage()]
    assert len(msgs) == 1


def test_promote_splits_every_crowded_descendant():
    cell = Cell(QuadTreeConfig(0, 1), Rectangle(0, 0, 64, 64))
    for i, p in enumerate([(0, 0), (1, 0), (2, 0)]):
        cell.points[i] = p
    quad = cell.promote()
    leaves = [n for n in quad._walk() if isinstance(n, Cell)]
    assert all(len(c.points) <= 1 for c in leaves)
    assert sum(len(c.points) for c in leaves) == 3
    assert quad.depth() == 6


def test_indivisible_cell_is_never_promoted():
    # Every quadrant of a zero-area box is the box itself
    cell = Cell(QuadTreeConfig(0, 1), Rectangle(5, 5, 5, 5))
    assert cell.insert(0, (1, 1)) is False
    assert cell.insert(1, (2, 2)) is False
    assert cell.needs_split() is False


def test_quad_insert_descends_existing_subtrees():
    quad = Quad(QuadTreeConfig(0, 1), Rectangle(0, 0, 16, 16))
    quad.insert("a", (1, 1))
    quad.insert("b", (3, 3))
    inner = quad.children[0]
    assert isinstance(inner, Quad)
    quad.insert("c", (12, 1))
    assert quad.children[0] is inner
    assert quad.leaf_for((12, 1)).points == {"c": (12, 1)}
