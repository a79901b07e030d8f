"""Render a Scene into SVG element dicts and markup."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import numpy as np
from numpy.typing import NDArray
from shapely.geometry import Point as ShapelyPoint

from glyphtrace.engine.config import RenderConfig
from glyphtrace.engine.path import Path
from glyphtrace.engine.scene import Scene
from glyphtrace.models.styles import LabelStyle
from glyphtrace.svg.serializer import fmt_number, serialize_svg
from glyphtrace.text.runs import TextRun
from glyphtrace.utils.geometry import grid_polygon, to_canvas


def path_data(points: NDArray[np.float64], closed: bool) -> str:
    """SVG ``d`` attribute for a polyline / polygon through canvas points."""
    coords = [f"{fmt_number(x)} {fmt_number(y)}" for x, y in points]
    d = "M " + " L ".join(coords)
    if closed:
        d += " Z"
    return d


def gridline_dicts(scene: Scene, config: RenderConfig) -> list[dict[str, Any]]:
    canvas_w = scene.width * config.cell_width
    canvas_h = scene.height * config.cell_height
    common = {"stroke": config.gridline_color, "stroke-width": fmt_number(config.gridline_width), "group": "grid"}
    lines: list[dict[str, Any]] = []
    for x in np.arange(scene.width + 1) * config.cell_width:
        lines.append({
            "tag": "line", "x1": fmt_number(x), "y1": "0", "x2": fmt_number(x), "y2": fmt_number(canvas_h), **common,
        })
    for y in np.arange(scene.height + 1) * config.cell_height:
        lines.append({
            "tag": "line", "x1": "0", "y1": fmt_number(y), "x2": fmt_number(canvas_w), "y2": fmt_number(y), **common,
        })
    return lines


def path_dict(path: Path, config: RenderConfig, style: LabelStyle | None = None) -> dict[str, Any]:
    points = to_canvas(path.points, config.cell_width, config.cell_height)
    elem: dict[str, Any] = {
        "tag": "path",
        "d": path_data(points, path.closed),
        "fill": config.fill if path.closed else "none",
        "stroke": config.stroke,
        "stroke-width": fmt_number(config.stroke_width),
        "stroke-linejoin": "round",
        "stroke-linecap": "round",
        "group": "paths",
    }
    if style is not None:
        overrides = style.svg_attributes()
        if not path.closed:
            overrides.pop("fill", None)
        elem.update(overrides)
    return elem


def text_dicts(
    texts: Sequence[TextRun],
    config: RenderConfig,
    text_colors: list[tuple[Any, str]] | None = None,
) -> list[dict[str, Any]]:
    """``<text>`` elements anchored at the left edge of each run's first cell.

    ``text_colors`` is a list of (polygon, color) pairs in grid coordinates;
    runs starting inside a polygon take its color (first match wins).
    """
    elems: list[dict[str, Any]] = []
    for run in texts:
        color = config.text_color
        for poly, poly_color in text_colors or []:
            if poly.contains(ShapelyPoint(run.start.column, run.start.row)):
                color = poly_color
                break
        x = (run.start.column - 1) * config.cell_width
        y = (run.start.row - 0.5) * config.cell_height
        elems.append({
            "tag": "text",
            "x": fmt_number(x),
            "y": fmt_number(y),
            "fill": color,
            "font-family": config.font_family,
            "font-size": fmt_number(config.font_size),
            "dominant-baseline": "central",
            "xml:space": "preserve",
            "content": run.text,
            "group": "text",
        })
    return elems


def scene_to_svg_dicts(
    scene: Scene,
    config: RenderConfig | None = None,
    path_styles: dict[int, LabelStyle] | None = None,
    texts: Sequence[TextRun] | None = None,
) -> list[dict[str, Any]]:
    """Convert a scene into SVG element dicts: gridlines, paths, then text.

    ``texts`` overrides ``scene.texts`` (label resolution removes the
    references it consumed).
    """
    config = config or RenderConfig()
    path_styles = path_styles or {}
    elements: list[dict[str, Any]] = []

    if config.show_gridlines:
        elements.extend(gridline_dicts(scene, config))

    for index, path in enumerate(scene.paths):
        elements.append(path_dict(path, config, path_styles.get(index)))

    if config.render_text:
        text_colors = [
            (grid_polygon(scene.paths[i].points), style.text_color)
            for i, style in path_styles.items()
            if style.text_color is not None and scene.paths[i].closed
        ]
        # Innermost shapes first so nested labels win
        text_colors.sort(key=lambda pair: pair[0].area)
        elements.extend(text_dicts(scene.texts if texts is None else texts, config, text_colors))

    return elements


def render_scene(
    scene: Scene,
    config: RenderConfig | None = None,
    path_styles: dict[int, LabelStyle] | None = None,
    texts: Sequence[TextRun] | None = None,
    title: str = "",
) -> str:
    """Scene → complete SVG document."""
    config = config or RenderConfig()
    elements = scene_to_svg_dicts(scene, config, path_styles, texts)
    return serialize_svg(
        elements,
        canvas_w=scene.width * config.cell_width,
        canvas_h=scene.height * config.cell_height,
        title=title,
    )
