"""ConversionContext — the single mutable state object flowing through all stages.

Stages read what earlier stages produced and fill in their own fields. The
grid is owned by the context for the duration of one run; nothing else holds
a reference to it.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from glyphtrace.engine.config import RenderConfig, TraceConfig
from glyphtrace.engine.grid import Grid
from glyphtrace.engine.path import Path
from glyphtrace.engine.scene import Scene
from glyphtrace.models.styles import LabelStyle
from glyphtrace.text.runs import TextRun


@dataclass
class ConversionContext:
    """Shared state for one text → SVG conversion."""

    # Raw input, definitions included
    source_text: str = ""
    trace_config: TraceConfig = field(default_factory=TraceConfig)
    render_config: RenderConfig = field(default_factory=RenderConfig)
    title: str = ""

    # --- Parsing ---
    diagram_text: str = ""
    label_styles: dict[str, LabelStyle] = field(default_factory=dict)
    grid: Grid | None = None

    # --- Extraction ---
    closed_paths: list[Path] = field(default_factory=list)
    open_paths: list[Path] = field(default_factory=list)
    scene: Scene | None = None

    # --- Annotation ---
    # Index into scene.paths → style from a resolved label
    path_styles: dict[int, LabelStyle] = field(default_factory=dict)
    # Residual text to render (resolved label references removed)
    texts: tuple[TextRun, ...] = ()
    unresolved_labels: tuple[str, ...] = ()

    # --- Rendering ---
    svg: str = ""

    # --- Pipeline metadata ---
    completed_stages: list[str] = field(default_factory=list)
    timings_ms: dict[str, float] = field(default_factory=dict)

    @property
    def num_paths(self) -> int:
        return len(self.scene.paths) if self.scene is not None else 0

    def require_grid(self) -> Grid:
        if self.grid is None:
            raise RuntimeError("Grid has not been parsed yet")
        return self.grid

    def require_scene(self) -> Scene:
        if self.scene is None:
            raise RuntimeError("Scene has not been assembled yet")
        return self.scene
