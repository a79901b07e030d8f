"""P0.01 — Label split.

Trailing ``[identifier]: {...}`` definitions are cut off the source text so
they never reach the grid.
"""

from __future__ import annotations

from glyphtrace.engine.context import ConversionContext
from glyphtrace.engine.registry import Layer, stage
from glyphtrace.text.labels import split_label_definitions


@stage(
    id="P0.01",
    layer=Layer.PARSING,
    description="Split trailing label definitions off the diagram",
)
def label_split(ctx: ConversionContext) -> None:
    ctx.diagram_text, ctx.label_styles = split_label_definitions(ctx.source_text)
