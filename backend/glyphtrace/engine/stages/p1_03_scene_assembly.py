"""P1.03 — Scene assembly.

Closed paths first, then open ones, plus the residual text. The grid is
released afterwards; the scene is the only thing that outlives extraction.
"""

from __future__ import annotations

from glyphtrace.engine.context import ConversionContext
from glyphtrace.engine.registry import Layer, stage
from glyphtrace.engine.scene import assemble_scene


@stage(
    id="P1.03",
    layer=Layer.EXTRACTION,
    dependencies=["P1.02"],
    description="Assemble the scene from both extraction phases",
)
def scene_assembly(ctx: ConversionContext) -> None:
    ctx.scene = assemble_scene(ctx.require_grid(), ctx.closed_paths, ctx.open_paths)
    ctx.texts = ctx.scene.texts
    ctx.grid = None
