"""Compass directions used while tracing: offsets, opposites, rotation.

Members are declared clockwise starting at north. That declaration order is
also the tracing priority order: whenever a tracer has several continuations
it tries them N, NE, E, SE, S, SW, W, NW.
"""

from __future__ import annotations

import enum

from glyphtrace.engine.grid import Point


class Direction(enum.Enum):
    """One of eight headings. Value = (dcolumn, drow); rows grow downwards."""

    N = (0, -1)
    NE = (1, -1)
    E = (1, 0)
    SE = (1, 1)
    S = (0, 1)
    SW = (-1, 1)
    W = (-1, 0)
    NW = (-1, -1)

    @property
    def offset(self) -> tuple[int, int]:
        return self.value

    @property
    def opposite(self) -> Direction:
        return self.rotate(4)

    @property
    def is_diagonal(self) -> bool:
        dc, dr = self.value
        return dc != 0 and dr != 0

    def rotate(self, steps: int) -> Direction:
        """Rotate by ``steps`` × 45°. Positive = clockwise."""
        return _CLOCKWISE[(_INDEX[self] + steps) % len(_CLOCKWISE)]

    def clockwise(self) -> Direction:
        return self.rotate(1)

    def counterclockwise(self) -> Direction:
        return self.rotate(-1)

    def step(self, point: Point) -> Point:
        """The neighbouring point one cell away in this direction."""
        dc, dr = self.value
        return Point(point.column + dc, point.row + dr)


# Fixed lookup tables, built once after the enum exists.
_CLOCKWISE: tuple[Direction, ...] = tuple(Direction)
_INDEX: dict[Direction, int] = {d: i for i, d in enumerate(_CLOCKWISE)}

PRIORITY: tuple[Direction, ...] = _CLOCKWISE
