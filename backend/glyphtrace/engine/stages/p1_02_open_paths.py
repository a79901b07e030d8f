"""P1.02 — Open paths. Phase two: whatever lines the boxes left behind."""

from __future__ import annotations

from glyphtrace.engine.context import ConversionContext
from glyphtrace.engine.path_finder import PathFinder
from glyphtrace.engine.registry import Layer, stage
from glyphtrace.engine.scene import extract_unclosed_paths


@stage(
    id="P1.02",
    layer=Layer.EXTRACTION,
    dependencies=["P1.01"],
    description="Extract open paths from the remaining cells",
)
def open_paths(ctx: ConversionContext) -> None:
    finder = PathFinder(config=ctx.trace_config)
    ctx.open_paths = extract_unclosed_paths(ctx.require_grid(), finder)
