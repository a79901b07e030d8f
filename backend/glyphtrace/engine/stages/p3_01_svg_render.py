"""P3.01 — SVG render."""

from __future__ import annotations

from glyphtrace.engine.context import ConversionContext
from glyphtrace.engine.registry import Layer, stage
from glyphtrace.svg.scene_renderer import render_scene


@stage(
    id="P3.01",
    layer=Layer.RENDERING,
    dependencies=["P2.01"],
    description="Serialize the scene as an SVG document",
)
def svg_render(ctx: ConversionContext) -> None:
    ctx.svg = render_scene(
        ctx.require_scene(),
        config=ctx.render_config,
        path_styles=ctx.path_styles,
        texts=ctx.texts,
        title=ctx.title,
    )
