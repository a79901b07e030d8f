"""GlyphTrace conversion engine: ASCII diagram grid to vector paths.

Only the leaf tracer modules are re-exported here; ``scene``, ``context`` and
``pipeline`` pull in ``glyphtrace.text`` and must be imported directly.
"""

from glyphtrace.engine.direction import Direction
from glyphtrace.engine.errors import GlyphTraceError, LabelError, ParseError
from glyphtrace.engine.grid import Grid, Point, parse_grid
from glyphtrace.engine.path import Path
from glyphtrace.engine.path_finder import PathFinder, find_closed_path, find_unclosed_path
from glyphtrace.engine.registry import stage, Layer, get_registry

__all__ = [
    "Direction",
    "GlyphTraceError",
    "LabelError",
    "ParseError",
    "Grid",
    "Point",
    "parse_grid",
    "Path",
    "PathFinder",
    "find_closed_path",
    "find_unclosed_path",
    "stage",
    "Layer",
    "get_registry",
]
