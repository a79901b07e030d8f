"""Glyph table — which characters draw lines and how a trace may pass them.

Every line-drawing character is described by its *transits*: unordered pairs
of directions a trace may enter and leave through. The ports of a glyph are
all directions that appear in any transit, plus any terminal-only ports
(arrowheads are entered but never left).

A move from cell A to neighbour B heading ``d`` is legal only when both cells
agree: A has a transit that leaves through ``d`` and B has the port
``d.opposite``. So ``-->`` is one three-cell line while in ``--<`` the ``<``
does not connect.

    glyph   transits                 shape
    -----   ----------------------   ------------------------------
    - =     E-W                      horizontal
    | :     N-S                      vertical
    +       any pair of 8 ports      corner / junction
    /       NE-SW, S-E, N-W          diagonal, rounded top-left / bottom-right
    \\       NW-SE, S-W, N-E          diagonal, rounded top-right / bottom-left
    .       E-S, W-S                 rounded top corner
    '       E-N, W-N                 rounded bottom corner
    > < ^ v terminal W / E / S / N   arrowheads

Classification is ASCII-only. Everything else is text; space is blank.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import combinations

from glyphtrace.engine.direction import PRIORITY, Direction
from glyphtrace.engine.grid import BLANK

N, NE, E, SE, S, SW, W, NW = (
    Direction.N,
    Direction.NE,
    Direction.E,
    Direction.SE,
    Direction.S,
    Direction.SW,
    Direction.W,
    Direction.NW,
)


@dataclass(frozen=True)
class Glyph:
    char: str
    transits: frozenset[frozenset[Direction]] = field(default_factory=frozenset)
    terminals: frozenset[Direction] = field(default_factory=frozenset)
    ports: frozenset[Direction] = field(init=False, repr=False, compare=False)
    # entry port (None = trace starts here) -> exits in priority order
    _exits: dict[Direction | None, tuple[Direction, ...]] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        ports = set(self.terminals)
        for pair in self.transits:
            ports.update(pair)
        exits: dict[Direction | None, tuple[Direction, ...]] = {None: tuple(d for d in PRIORITY if d in ports)}
        for entry in PRIORITY:
            exits[entry] = tuple(d for d in PRIORITY if d != entry and frozenset((entry, d)) in self.transits)
        object.__setattr__(self, "ports", frozenset(ports))
        object.__setattr__(self, "_exits", exits)

    def accepts(self, entry_port: Direction) -> bool:
        """Can a trace enter this cell through ``entry_port``?"""
        return entry_port in self.ports

    def exits(self, entry_port: Direction | None) -> list[Direction]:
        """Directions a trace may leave through, in priority order.

        With ``entry_port=None`` (the trace starts here) every port is a
        candidate, terminal ones included.
        """
        return list(self._exits[entry_port])

    def allows(self, a: Direction, b: Direction) -> bool:
        return a != b and frozenset((a, b)) in self.transits


class GlyphTable:
    """Registry of line-drawing characters."""

    def __init__(self) -> None:
        self._glyphs: dict[str, Glyph] = {}

    def add(
        self,
        chars: str,
        transits: list[tuple[Direction, Direction]] | None = None,
        terminals: tuple[Direction, ...] = (),
    ) -> GlyphTable:
        pairs = frozenset(frozenset(pair) for pair in transits or [])
        for char in chars:
            self._glyphs[char] = Glyph(char, pairs, frozenset(terminals))
        return self

    def get(self, char: str | None) -> Glyph | None:
        if char is None:
            return None
        return self._glyphs.get(char)

    def is_line(self, char: str | None) -> bool:
        return char is not None and char in self._glyphs

    @staticmethod
    def is_blank(char: str | None) -> bool:
        return char is None or char == BLANK

    def __contains__(self, char: object) -> bool:
        return char in self._glyphs

    def chars(self) -> list[str]:
        return sorted(self._glyphs)


def _all_pairs(directions: tuple[Direction, ...]) -> list[tuple[Direction, Direction]]:
    return list(combinations(directions, 2))


DEFAULT_GLYPHS = (
    GlyphTable()
    .add("-=", [(E, W)])
    .add("|:", [(N, S)])
    .add("+", _all_pairs(PRIORITY))
    .add("/", [(NE, SW), (S, E), (N, W)])
    .add("\\", [(NW, SE), (S, W), (N, E)])
    .add(".", [(E, S), (W, S)])
    .add("'", [(E, N), (W, N)])
    .add(">", terminals=(W,))
    .add("<", terminals=(E,))
    .add("^", terminals=(S,))
    .add("v", terminals=(N,))
)
