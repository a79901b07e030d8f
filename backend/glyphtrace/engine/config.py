"""Engine configuration: tracing limits and rendering options."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class TraceConfig:
    """Controls grid parsing and the path tracers."""

    # Tab stops when expanding tabs in the diagram text
    tab_size: int = 8

    # Upper bound on DFS steps for one find_closed_path call.
    # Dense junction tables can branch a lot; past this the start point is
    # treated as "no closed path here".
    max_trace_steps: int = 50_000


@dataclass
class RenderConfig:
    """Presentation parameters. Read by the SVG renderer only."""

    # One grid cell in SVG user units. The 9:16 ratio approximates a
    # monospace glyph; it is the only font metric we model.
    cell_width: float = 9.0
    cell_height: float = 16.0

    # Stroke
    base_stroke_width: float = 2.0
    stroke_scale: float = 1.0
    stroke: str = "#000000"
    fill: str = "none"

    # Background gridlines, one per cell boundary
    show_gridlines: bool = False
    gridline_color: str = "#e0e0e0"
    gridline_width: float = 0.5

    # Residual text
    render_text: bool = True
    font_family: str = "monospace"
    font_size_ratio: float = 0.85  # of cell_height
    text_color: str = "#000000"

    @property
    def stroke_width(self) -> float:
        return self.base_stroke_width * self.stroke_scale

    @property
    def font_size(self) -> float:
        return self.cell_height * self.font_size_ratio
