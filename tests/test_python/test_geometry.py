from fractions import Fraction

import pytest

from splitquadtree import Point, Rectangle


def test_point_repr_and_tuple():
    assert repr(Point(5, 6)) == "(5, 6)"
    assert repr(Point(0.75, 1.4)) == "(0.75, 1.4)"
    x, y = Point(3, 26)
    assert (x, y) == (3, 26)
    assert Point(3, 26).as_tuple() == (3, 26)
    assert Point(3, 26) == (3, 26)


def test_rectangle_repr():
    assert repr(Rectangle(0, 10, 10, 15)) == "((0, 10) - (10, 15))"


@pytest.mark.parametrize(
    "rect, expected",
    [
        (Rectangle(0, 10, 10, 15), (5, 12)),
        (Rectangle(0.0, 10.0, 10.0, 15.0), (5.0, 12.5)),
        (Rectangle(-3, -3, 0, 0), (-1, -1)),
        (Rectangle(-5, 0, 0, 5), (-2, 2)),
        (Rectangle(Fraction(0), Fraction(0), Fraction(1), Fraction(3)), (Fraction(1, 2), Fraction(3, 2))),
    ],
)
def test_center(rect, expected):
    c = rect.center()
    assert c == expected
    assert type(c.x) is type(expected[0])


def test_contains_is_half_open():
    r = Rectangle(0, 0, 10, 10)
    assert r.contains((0, 0))
    assert r.contains((9, 9))
    assert not r.contains((10, 5))
    assert not r.contains((5, 10))
    assert not r.contains((-1, 5))


def test_is_inside_of_is_closed():
    outer = Rectangle(0, 0, 10, 10)
    assert outer.is_inside_of(outer)
    assert Rectangle(2, 2, 10, 10).is_inside_of(outer)
    assert not Rectangle(2, 2, 11, 10).is_inside_of(outer)
    assert not Rectangle(-1, 2, 5, 5).is_inside_of(outer)


@pytest.mark.parametrize(
    "other, expected",
    [
        (Rectangle(5, 5, 15, 15), True),
        (Rectangle(10, 0, 20, 10), True),  # touching edge
        (Rectangle(11, 0, 20, 10), False),
        (Rectangle(0, -10, 10, -1), False),
        (Rectangle(2, 2, 3, 3), True),
        (Rectangle(-5, -5, 20, 20), True),
    ],
)
def test_overlaps(other, expected):
    r = Rectangle(0, 0, 10, 10)
    assert r.overlaps(other) is expected
    assert other.overlaps(r) is expected


def test_quadrants_tile_the_rectangle():
    q = Rectangle(0, 10, 10, 40).quadrants()
    assert [repr(r) for r in q] == [
        "((0, 10) - (5, 25))",
        "((5, 10) - (10, 25))",
        "((0, 25) - (5, 40))",
        "((5, 25) - (10, 40))",
    ]


def test_center_of_huge_float_box_stays_finite():
    r = Rectangle(1e308, -1.0, 1.7e308, 1.0)
    assert r.center() == (1e308 / 2 + 1.7e308 / 2, 0.0)
    assert r.contains(r.center())
