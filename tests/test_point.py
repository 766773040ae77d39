import math
from fractions import Fraction

import pytest
from numpy.testing import assert_allclose

from Nodes.Axis import Axis
from Nodes.Point import Point, distance


def test_distance():
    p1 = Point(1., 1.)
    p2 = Point(2., 2.)
    p3 = Point(1., 2.)
    p4 = Point(2., 1.)

    assert distance(p1, p2) == math.sqrt(2)
    assert distance(p1, p3) == 1.0
    assert distance(p1, p4) == 1.0
    assert distance(Point(0, 0), Point(3, 4)) == 5.0


def test_distance_generic_coordinates():
    assert_allclose(distance(Point(Fraction(1, 2), 0), Point(0, Fraction(1, 2))), math.sqrt(0.5))
    assert isinstance(distance(Point(1, 1), Point(1, 1)), float)


def test_cmp_points():
    p1 = Point(1, 1)
    p2 = Point(2, 2)
    p3 = Point(1, 2)
    p4 = Point(2, 1)

    assert p1.cmp(p2, Axis.X) == -1
    assert p1.cmp(p2, Axis.Y) == -1
    assert p1.cmp(p3, Axis.X) == 0
    assert p1.cmp(p3, Axis.Y) == -1
    assert p1.cmp(p4, Axis.X) == -1
    assert p1.cmp(p4, Axis.Y) == 0
    assert p2.cmp(p1, Axis.X) == 1


def test_gt_and_get():
    p = Point(3, -1)
    assert p.get(Axis.X) == 3
    assert p.get(Axis.Y) == -1
    assert p.gt(Point(2, 5), Axis.X)
    assert not p.gt(Point(2, 5), Axis.Y)
    assert not p.gt(Point(3, 0), Axis.X)


def test_point_is_immutable_and_data_ignored_in_equality():
    p = Point(1, 2, data={'id': 7})
    with pytest.raises(AttributeError):
        p.x = 5
    assert p == Point(1, 2)
    assert hash(p) == hash(Point(1, 2))
    assert p.as_tuple() == (1, 2)


def test_from_coords():
    assert Point.from_coords([4, 9]) == Point(4, 9)
    with pytest.raises(ValueError, match="Higher dimensions not implemented"):
        Point.from_coords((1, 2, 3))
    with pytest.raises(ValueError):
        Point.from_coords((1,))
