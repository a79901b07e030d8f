"""POST /api/scene and /api/convert: diagram text to paths / SVG."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, HTTPException

from glyphtrace.config import Settings
from glyphtrace.dependencies import get_settings
from glyphtrace.engine.context import ConversionContext
from glyphtrace.engine.errors import GlyphTraceError
from glyphtrace.engine.pipeline import create_pipeline
from glyphtrace.engine.registry import Layer
from glyphtrace.models.requests import ConvertRequest, SceneRequest
from glyphtrace.models.responses import ConvertResponse, SceneResponse
from glyphtrace.models.scene import SceneModel

router = APIRouter()
logger = logging.getLogger(__name__)


def _check_size(text: str, settings: Settings) -> None:
    if len(text) > settings.max_input_chars:
        raise HTTPException(
            status_code=422,
            detail=f"Diagram too large: {len(text)} characters (limit {settings.max_input_chars})",
        )


@router.post("/scene", response_model=SceneResponse)
def scene(req: SceneRequest, settings: Settings = Depends(get_settings)) -> SceneResponse:
    """Extract paths only; no label resolution, no rendering."""
    _check_size(req.text, settings)
    start = time.perf_counter()

    pipeline = create_pipeline()
    ctx = ConversionContext(source_text=req.text)
    try:
        pipeline.run_layer(ctx, Layer.PARSING)
        pipeline.run_layer(ctx, Layer.EXTRACTION)
    except GlyphTraceError as e:
        logger.info("Rejected diagram: %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e

    elapsed = (time.perf_counter() - start) * 1000
    return SceneResponse(
        scene=SceneModel.from_scene(ctx.require_scene()),
        closed_paths=len(ctx.closed_paths),
        open_paths=len(ctx.open_paths),
        processing_time_ms=round(elapsed, 1),
    )


@router.post("/convert", response_model=ConvertResponse)
def convert(req: ConvertRequest, settings: Settings = Depends(get_settings)) -> ConvertResponse:
    """Full conversion: extraction, label styles, SVG."""
    _check_size(req.text, settings)
    start = time.perf_counter()

    ctx = ConversionContext(
        source_text=req.text,
        render_config=req.options.to_config(),
        title=req.title,
    )
    try:
        ctx = create_pipeline().run(ctx)
    except GlyphTraceError as e:
        logger.info("Rejected diagram: %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e

    elapsed = (time.perf_counter() - start) * 1000
    return ConvertResponse(
        svg=ctx.svg,
        scene=SceneModel.from_scene(ctx.require_scene()),
        processing_time_ms=round(elapsed, 1),
        stage_timings_ms=ctx.timings_ms,
        unresolved_labels=list(ctx.unresolved_labels),
    )
