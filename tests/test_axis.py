import pytest

from Nodes.Axis import Axis, DIMENSIONS, axis, check_dimensions


def test_axis_cycles_with_depth():
    assert axis(0) is Axis.X
    assert axis(1) is Axis.Y
    assert axis(2) is Axis.X
    assert [axis(d) for d in range(6)] == [Axis.X, Axis.Y] * 3
    assert Axis.from_depth(1001) is Axis.Y


def test_axis_other():
    assert Axis.X.other() is Axis.Y
    assert Axis.Y.other() is Axis.X


def test_axis_negative_depth():
    with pytest.raises(ValueError, match="no negativa"):
        axis(-1)


def test_only_two_dimensions():
    assert DIMENSIONS == 2
    check_dimensions(2)
    for n in (1, 3, 4):
        with pytest.raises(ValueError, match="Higher dimensions not implemented"):
            check_dimensions(n)
