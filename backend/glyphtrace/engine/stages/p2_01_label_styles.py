"""P2.01 — Label styles. Bind ``[identifier]`` references to enclosing boxes."""

from __future__ import annotations

from glyphtrace.engine.context import ConversionContext
from glyphtrace.engine.registry import Layer, stage
from glyphtrace.text.labels import resolve_labels


@stage(
    id="P2.01",
    layer=Layer.ANNOTATION,
    dependencies=["P1.03"],
    description="Resolve label references against closed paths",
)
def label_styles(ctx: ConversionContext) -> None:
    scene = ctx.require_scene()
    if not ctx.label_styles:
        return
    resolution = resolve_labels(scene, ctx.label_styles)
    ctx.path_styles = resolution.path_styles
    ctx.texts = resolution.texts
    ctx.unresolved_labels = resolution.unresolved
