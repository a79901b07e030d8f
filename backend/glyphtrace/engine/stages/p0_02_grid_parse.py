"""P0.02 — Grid parse. Fails the whole conversion with ParseError on bad text."""

from __future__ import annotations

from glyphtrace.engine.context import ConversionContext
from glyphtrace.engine.grid import parse_grid
from glyphtrace.engine.registry import Layer, stage


@stage(
    id="P0.02",
    layer=Layer.PARSING,
    dependencies=["P0.01"],
    description="Parse diagram text into a character grid",
)
def grid_parse(ctx: ConversionContext) -> None:
    ctx.grid = parse_grid(ctx.diagram_text, tab_size=ctx.trace_config.tab_size)
