"""Immutable ordered runs of grid points, closed or open."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from functools import cached_property

from glyphtrace.engine.grid import Point


class Path:
    """Ordered points tagged ``closed`` (polygon) or open (polyline).

    A closed path does not repeat its first point at the end; the edge back to
    the start is implied. Two paths compare equal when they share the closed
    tag and cover the same set of points, regardless of traversal order.
    """

    def __init__(self, points: Sequence[Point], closed: bool = False) -> None:
        points = tuple(Point(*p) for p in points)
        if len(points) < 2:
            raise ValueError(f"A path needs at least 2 points, got {len(points)}")
        if closed and len(points) < 3:
            raise ValueError(f"A closed path needs at least 3 points, got {len(points)}")
        self._points = points
        self._closed = closed

    @property
    def points(self) -> tuple[Point, ...]:
        return self._points

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def start(self) -> Point:
        return self._points[0]

    @property
    def end(self) -> Point:
        return self._points[-1]

    @cached_property
    def point_set(self) -> frozenset[Point]:
        return frozenset(self._points)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._closed == other._closed and self.point_set == other.point_set

    def __hash__(self) -> int:
        return hash((self._closed, self.point_set))

    def __repr__(self) -> str:
        kind = "closed" if self._closed else "open"
        pts = " ".join(f"({p.column},{p.row})" for p in self._points)
        return f"Path({kind}: {pts})"
