"""Tests for compass directions."""

from glyphtrace.engine.direction import PRIORITY, Direction
from glyphtrace.engine.grid import Point


def test_priority_order_is_clockwise_from_north():
    assert [d.name for d in PRIORITY] == ["N", "NE", "E", "SE", "S", "SW", "W", "NW"]


def test_offsets_rows_grow_downwards():
    assert Direction.N.offset == (0, -1)
    assert Direction.S.offset == (0, 1)
    assert Direction.E.offset == (1, 0)
    assert Direction.SW.offset == (-1, 1)


def test_opposite_is_involution():
    for d in Direction:
        assert d.opposite.opposite is d
        dc, dr = d.offset
        assert d.opposite.offset == (-dc, -dr)


def test_rotation():
    assert Direction.N.clockwise() is Direction.NE
    assert Direction.N.counterclockwise() is Direction.NW
    assert Direction.W.rotate(2) is Direction.N
    assert Direction.E.rotate(-10) is Direction.N
    assert Direction.SE.rotate(8) is Direction.SE


def test_diagonals():
    assert {d for d in Direction if d.is_diagonal} == {Direction.NE, Direction.SE, Direction.SW, Direction.NW}


def test_step():
    assert Direction.NE.step(Point(3, 3)) == Point(4, 2)
    assert Direction.W.step(Point(1, 1)) == Point(0, 1)
