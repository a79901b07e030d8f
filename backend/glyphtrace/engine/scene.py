"""Scene assembly — the two-phase extraction driver.

Phase one scans the grid column-major and pulls out every closed path;
phase two rescans what is left for open paths. At each point the finder is
called again until it comes back empty, because several shapes can share an
anchor corner. Each success clears its cells, so the number of successful
extractions is bounded by the initial non-blank cell count.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from glyphtrace.engine.grid import Grid, Point
from glyphtrace.engine.path import Path
from glyphtrace.engine.path_finder import PathFinder
from glyphtrace.text.runs import TextRun, extract_text_runs

logger = logging.getLogger(__name__)

Finder = Callable[[Grid, Point], Path | None]


@dataclass(frozen=True)
class Scene:
    """Everything extracted from one diagram.

    ``width``/``height`` are the grid's element counts before extraction
    started, never affected by how much was removed.
    """

    paths: tuple[Path, ...]
    width: int
    height: int
    texts: tuple[TextRun, ...] = field(default_factory=tuple)

    @property
    def closed_paths(self) -> list[Path]:
        return [p for p in self.paths if p.closed]

    @property
    def open_paths(self) -> list[Path]:
        return [p for p in self.paths if not p.closed]


def extract_phase(grid: Grid, find: Finder) -> list[Path]:
    """Scan every point column-major, retrying each point until ``find`` fails."""
    found: list[Path] = []
    for point in grid.points():
        while True:
            path = find(grid, point)
            if path is None:
                break
            grid.remove_path(path)
            found.append(path)
    return found


def extract_closed_paths(grid: Grid, finder: PathFinder | None = None) -> list[Path]:
    finder = finder or PathFinder()
    paths = extract_phase(grid, finder.find_closed_path)
    logger.debug("Closed phase: %d paths", len(paths))
    return paths


def extract_unclosed_paths(grid: Grid, finder: PathFinder | None = None) -> list[Path]:
    finder = finder or PathFinder()
    paths = extract_phase(grid, finder.find_unclosed_path)
    logger.debug("Open phase: %d paths", len(paths))
    return paths


def extract_scene(grid: Grid, finder: PathFinder | None = None) -> Scene:
    """Run both phases over ``grid`` (mutated in place) and build the Scene."""
    finder = finder or PathFinder()
    closed = extract_closed_paths(grid, finder)
    unclosed = extract_unclosed_paths(grid, finder)
    return assemble_scene(grid, closed, unclosed)


def assemble_scene(grid: Grid, closed: list[Path], unclosed: list[Path]) -> Scene:
    """Closed paths first, then open ones, plus the text left on ``grid``.

    Removal never shrinks a grid, so its dimensions are the original ones.
    """
    return Scene(
        paths=tuple(closed + unclosed),
        width=grid.width,
        height=grid.height,
        texts=tuple(extract_text_runs(grid)),
    )
