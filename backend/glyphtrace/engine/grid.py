"""Grid — the mutable character matrix the tracers walk over.

Coordinates are 1-based and inclusive: column 1..width, row 1..height, the
same numbers a text editor shows for the diagram. Nothing in the engine
converts to 0-based indexing.
"""

from __future__ import annotations

import logging
import re
import unicodedata
from collections.abc import Iterator
from typing import TYPE_CHECKING, NamedTuple

from glyphtrace.engine.errors import ParseError

if TYPE_CHECKING:
    from glyphtrace.engine.path import Path

logger = logging.getLogger(__name__)

BLANK = " "

# Only these end a line; other separators str.splitlines honours are control characters.
_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


class Point(NamedTuple):
    """A 1-based (column, row) cell position."""

    column: int
    row: int


class Grid:
    """Point → character store with bounds-checked lookup and path removal.

    Blank cells are stored as ``" "``. Cells cleared by :meth:`remove_path`
    are dropped from the store, so :meth:`get` answers ``None`` for them just
    like it does for points outside the grid.
    """

    def __init__(self, cells: dict[Point, str], width: int, height: int) -> None:
        self._cells = cells
        self.width = width
        self.height = height

    @classmethod
    def from_lines(cls, lines: list[str]) -> Grid:
        width = max((len(line) for line in lines), default=0)
        cells: dict[Point, str] = {}
        for row, line in enumerate(lines, start=1):
            padded = line.ljust(width, BLANK)
            for column, char in enumerate(padded, start=1):
                cells[Point(column, row)] = char
        return cls(cells, width, len(lines))

    def get(self, point: Point) -> str | None:
        return self._cells.get(point)

    def in_bounds(self, point: Point) -> bool:
        return 1 <= point.column <= self.width and 1 <= point.row <= self.height

    def remove_path(self, path: Path) -> None:
        """Clear every cell on the path so later passes cannot retrace it."""
        if len(path) == 0:
            raise ValueError("Cannot remove an empty path")
        for point in path.point_set:
            self._cells.pop(point, None)

    def points(self) -> Iterator[Point]:
        """All in-bounds points, column-major: columns outer, rows inner."""
        for column in range(1, self.width + 1):
            for row in range(1, self.height + 1):
                yield Point(column, row)

    def non_blank_count(self) -> int:
        return sum(1 for char in self._cells.values() if char != BLANK)

    def row_text(self, row: int) -> str:
        """Text of one row; cleared cells read as blanks."""
        return "".join(self._cells.get(Point(column, row), BLANK) for column in range(1, self.width + 1))

    def copy(self) -> Grid:
        return Grid(dict(self._cells), self.width, self.height)

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height}, non_blank={self.non_blank_count()})"


def split_lines(text: str) -> list[str]:
    """Split on CRLF, CR or LF. A single trailing line break adds no empty line."""
    if not text:
        return []
    lines = _LINE_BREAK_RE.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


def parse_grid(text: str, tab_size: int = 8) -> Grid:
    """Parse diagram text into a rectangular Grid.

    Tabs are expanded to ``tab_size`` columns and short lines are padded with
    blanks to the longest line. Any other control character is rejected.

    Raises:
        ParseError: the text contains a control character.
    """
    lines = split_lines(text)
    expanded: list[str] = []
    for row, line in enumerate(lines, start=1):
        line = line.expandtabs(tab_size)
        for column, char in enumerate(line, start=1):
            if unicodedata.category(char) == "Cc":
                raise ParseError(f"Control character {char!r} in diagram", column=column, row=row)
        expanded.append(line)

    grid = Grid.from_lines(expanded)
    logger.debug("Parsed grid %dx%d (%d non-blank cells)", grid.width, grid.height, grid.non_blank_count())
    return grid
