"""Pipeline orchestrator — runs the conversion stages in dependency order."""

from __future__ import annotations

import importlib
import logging
import pkgutil
import time

from glyphtrace.engine.config import RenderConfig, TraceConfig
from glyphtrace.engine.context import ConversionContext
from glyphtrace.engine.registry import Layer, StageRegistry, get_registry

logger = logging.getLogger(__name__)

_STAGES_PACKAGE = "glyphtrace.engine.stages"


def load_stages() -> None:
    """Import every stage module so the @stage decorators fire."""
    package = importlib.import_module(_STAGES_PACKAGE)
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"{_STAGES_PACKAGE}.{module_name}")


class Pipeline:
    """Orchestrates the conversion stages.

    Unlike a best-effort analysis, a conversion has no useful partial result:
    the first failing stage is logged and its exception propagates.
    """

    def __init__(self, registry: StageRegistry | None = None) -> None:
        if registry is None:
            load_stages()
            registry = get_registry()
        self.registry = registry

    def run(self, ctx: ConversionContext) -> ConversionContext:
        """Run every registered stage on the given context."""
        start = time.perf_counter()
        ordered = self.registry.resolve_order()
        logger.debug("Pipeline: %d stages queued", len(ordered))

        for spec in ordered:
            t0 = time.perf_counter()
            try:
                spec.fn(ctx)
            except Exception as e:
                logger.warning("  %s FAILED: %s", spec.id, e)
                raise
            elapsed = (time.perf_counter() - t0) * 1000
            ctx.completed_stages.append(spec.id)
            ctx.timings_ms[spec.id] = round(elapsed, 2)
            logger.debug("  %s completed in %.1fms", spec.id, elapsed)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Pipeline complete: %d stages, %d paths in %.0fms",
            len(ctx.completed_stages),
            ctx.num_paths,
            total,
        )
        return ctx

    def run_layer(self, ctx: ConversionContext, layer: Layer) -> ConversionContext:
        """Run only the stages of one layer (their inputs must already be on ``ctx``)."""
        for spec in self.registry.get_layer(layer):
            spec.fn(ctx)
            ctx.completed_stages.append(spec.id)
        return ctx


def create_pipeline() -> Pipeline:
    """Factory function for creating a pipeline instance."""
    return Pipeline()


def convert(
    text: str,
    render_config: RenderConfig | None = None,
    trace_config: TraceConfig | None = None,
    title: str = "",
) -> ConversionContext:
    """Run the full text → SVG conversion and return the populated context."""
    ctx = ConversionContext(
        source_text=text,
        render_config=render_config or RenderConfig(),
        trace_config=trace_config or TraceConfig(),
        title=title,
    )
    return create_pipeline().run(ctx)
