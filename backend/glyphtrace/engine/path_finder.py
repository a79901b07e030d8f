"""PathFinder — traces closed polygons and open polylines from a start cell.

Both tracers read the grid through the glyph table and never mutate it;
removing what they find is the caller's job (see ``scene.extract_scene``).
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterator

from glyphtrace.engine.config import TraceConfig
from glyphtrace.engine.direction import Direction
from glyphtrace.engine.glyphs import DEFAULT_GLYPHS, Glyph, GlyphTable
from glyphtrace.engine.grid import Grid, Point
from glyphtrace.engine.path import Path

logger = logging.getLogger(__name__)

# A polygon needs three corners; anything shorter would be a back-and-forth.
_MIN_CLOSED_POINTS = 3
_MIN_OPEN_POINTS = 2


class PathFinder:
    """Stateless tracer over a Grid. Same grid + same start → same answer."""

    def __init__(self, glyphs: GlyphTable | None = None, config: TraceConfig | None = None) -> None:
        self.glyphs = glyphs or DEFAULT_GLYPHS
        self.config = config or TraceConfig()

    # ── Closed paths ──

    def find_closed_path(self, grid: Grid, start: Point) -> Path | None:
        """Trace a simple cycle through ``start``, or return None.

        Depth-first over continuations in direction priority order, with an
        explicit stack. A cycle closes as soon as the start cell is a legal
        continuation (at least three points traced, and the start glyph allows
        the turn from the arrival port into the first departure). Cells already
        on the trace are never re-entered.

        Before a cell is pushed, a breadth-first sweep over the untraced cells
        checks that ``start`` can still be reached from it; branches without
        one are dropped without spending search steps. A start with no
        neighbour able to close the loop costs O(1).
        """
        origin = self._glyph_at(grid, start)
        if origin is None:
            return None

        budget = self.config.max_trace_steps
        for first in origin.exits(None):
            second = first.step(start)
            if not self._can_enter(grid, second, first):
                continue
            closings = self._closing_cells(grid, start, origin, first)
            closings.discard(second)
            if not closings:
                continue

            trace = [start, second]
            visited = {start, second}
            if not self._can_return(grid, second, first, closings, visited):
                continue
            frames: list[Iterator[Direction]] = [iter(self._continuations(grid, second, first))]

            while frames:
                budget -= 1
                if budget < 0:
                    logger.debug("Closed trace from %s gave up after %d steps", start, self.config.max_trace_steps)
                    return None

                heading = next(frames[-1], None)
                if heading is None:
                    frames.pop()
                    visited.discard(trace.pop())
                    continue

                target = heading.step(trace[-1])
                if target in visited or not self._can_enter(grid, target, heading):
                    continue

                trace.append(target)
                visited.add(target)
                if self._closes(grid, start, origin, first, trace, heading):
                    return Path(trace, closed=True)
                if not self._can_return(grid, target, heading, closings, visited):
                    visited.discard(trace.pop())
                    continue
                frames.append(iter(self._continuations(grid, target, heading)))

        return None

    def _closing_cells(
        self,
        grid: Grid,
        start: Point,
        origin: Glyph,
        first: Direction,
    ) -> set[Point]:
        """Neighbours of ``start`` from which stepping into it closes the loop."""
        cells: set[Point] = set()
        for port in origin.ports:
            if not origin.allows(port, first):
                continue
            neighbour = port.step(start)
            glyph = self._glyph_at(grid, neighbour)
            if glyph is not None and port.opposite in glyph.ports:
                cells.add(neighbour)
        return cells

    def _can_return(
        self,
        grid: Grid,
        point: Point,
        heading: Direction,
        closings: set[Point],
        visited: set[Point],
    ) -> bool:
        """Can ``point`` still reach a closing cell without crossing ``visited``?

        Two breadth-first sweeps over connected line cells run in lockstep:
        one from ``point`` (through its real continuations), one from the
        closing cells. Whichever side runs dry first settles the answer, so a
        dead end beside a large junction block costs only the size of the dead
        end. Connectivity ignores which port pairs a glyph joins, so the
        answer can be a false yes but never a false no.
        """
        targets = closings - visited
        if not targets:
            return False

        forward: deque[Point] = deque()
        forward_seen: set[Point] = set()
        for direction in self._continuations(grid, point, heading):
            nxt = direction.step(point)
            if nxt in targets:
                return True
            if nxt in visited or nxt in forward_seen or not self._can_enter(grid, nxt, direction):
                continue
            forward_seen.add(nxt)
            forward.append(nxt)

        backward = deque(targets)
        backward_seen = set(targets)
        while forward and backward:
            if self._sweep(grid, forward, forward_seen, backward_seen, visited):
                return True
            if self._sweep(grid, backward, backward_seen, forward_seen, visited):
                return True
        return False

    def _sweep(
        self,
        grid: Grid,
        queue: deque[Point],
        seen: set[Point],
        other: set[Point],
        visited: set[Point],
    ) -> bool:
        """Expand one cell of a sweep; True once it touches the other sweep."""
        cell = queue.popleft()
        for direction in self._glyph_at(grid, cell).ports:
            nxt = direction.step(cell)
            if nxt in other:
                return True
            if nxt in visited or nxt in seen or not self._can_enter(grid, nxt, direction):
                continue
            seen.add(nxt)
            queue.append(nxt)
        return False

    def _closes(
        self,
        grid: Grid,
        start: Point,
        origin: Glyph,
        first: Direction,
        trace: list[Point],
        heading: Direction,
    ) -> bool:
        """Can the trace step from its last cell straight back into ``start``?"""
        if len(trace) < _MIN_CLOSED_POINTS:
            return False
        current = trace[-1]
        for direction in self._continuations(grid, current, heading):
            if direction.step(current) == start:
                return origin.allows(direction.opposite, first)
        return False

    # ── Open paths ──

    def find_unclosed_path(self, grid: Grid, start: Point) -> Path | None:
        """Walk a polyline from ``start`` until it runs out of continuations.

        Greedy: at every cell the first continuation (priority order) into an
        unvisited cell that accepts the entry wins. No backtracking.
        """
        if self._glyph_at(grid, start) is None:
            return None

        trace = [start]
        visited = {start}
        heading: Direction | None = None
        while True:
            current = trace[-1]
            step = None
            for direction in self._continuations(grid, current, heading):
                target = direction.step(current)
                if target not in visited and self._can_enter(grid, target, direction):
                    step = (direction, target)
                    break
            if step is None:
                break
            heading, target = step
            trace.append(target)
            visited.add(target)

        if len(trace) < _MIN_OPEN_POINTS:
            return None
        return Path(trace, closed=False)

    # ── Shared helpers ──

    def _glyph_at(self, grid: Grid, point: Point) -> Glyph | None:
        return self.glyphs.get(grid.get(point))

    def _can_enter(self, grid: Grid, point: Point, heading: Direction) -> bool:
        glyph = self._glyph_at(grid, point)
        return glyph is not None and glyph.accepts(heading.opposite)

    def _continuations(self, grid: Grid, point: Point, heading: Direction | None) -> list[Direction]:
        glyph = self._glyph_at(grid, point)
        if glyph is None:
            return []
        return glyph.exits(heading.opposite if heading is not None else None)


_default_finder = PathFinder()


def find_closed_path(grid: Grid, start: Point) -> Path | None:
    return _default_finder.find_closed_path(grid, start)


def find_unclosed_path(grid: Grid, start: Point) -> Path | None:
    return _default_finder.find_unclosed_path(grid, start)
