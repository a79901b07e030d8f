"""P1.01 — Closed paths. Phase one: boxes and other simple cycles."""

from __future__ import annotations

from glyphtrace.engine.context import ConversionContext
from glyphtrace.engine.path_finder import PathFinder
from glyphtrace.engine.registry import Layer, stage
from glyphtrace.engine.scene import extract_closed_paths


@stage(
    id="P1.01",
    layer=Layer.EXTRACTION,
    dependencies=["P0.02"],
    description="Extract closed paths, column-major",
)
def closed_paths(ctx: ConversionContext) -> None:
    finder = PathFinder(config=ctx.trace_config)
    ctx.closed_paths = extract_closed_paths(ctx.require_grid(), finder)
