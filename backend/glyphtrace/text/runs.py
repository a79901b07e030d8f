"""Residual text runs: whatever the tracers left on the grid."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, NamedTuple

from glyphtrace.engine.grid import Point

if TYPE_CHECKING:
    from glyphtrace.engine.grid import Grid

# Words separated by single spaces belong to one run; 2+ spaces split runs.
RUN_RE = re.compile(r"\S+(?: \S+)*")


class TextRun(NamedTuple):
    start: Point
    text: str

    @property
    def end(self) -> Point:
        """Last cell covered by the run (inclusive)."""
        return Point(self.start.column + len(self.text) - 1, self.start.row)


def extract_text_runs(grid: Grid) -> list[TextRun]:
    """Collect text runs in reading order (rows top-down, then left-right)."""
    runs: list[TextRun] = []
    for row in range(1, grid.height + 1):
        line = grid.row_text(row)
        for match in RUN_RE.finditer(line):
            runs.append(TextRun(Point(match.start() + 1, row), match.group(0)))
    return runs
