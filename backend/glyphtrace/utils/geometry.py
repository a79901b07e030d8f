"""Leaf-node geometry helpers. No engine imports beyond the point types."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np
from numpy.typing import NDArray
from shapely.geometry import Polygon

from glyphtrace.engine.grid import Point


def as_array(points: Iterable[Point]) -> NDArray[np.float64]:
    """(column, row) points → Nx2 float array."""
    arr = np.array([(p.column, p.row) for p in points], dtype=np.float64)
    return arr.reshape(-1, 2)


def to_canvas(points: Iterable[Point], cell_w: float, cell_h: float) -> NDArray[np.float64]:
    """Map 1-based cell coordinates to the centre of each cell in canvas units."""
    arr = as_array(points)
    return (arr - 0.5) * np.array([cell_w, cell_h])


def grid_polygon(points: Iterable[Point]) -> Polygon:
    """Shapely polygon through the cell centres, in grid coordinates."""
    poly = Polygon(as_array(points))
    if not poly.is_valid:
        poly = poly.buffer(0)
    return poly
