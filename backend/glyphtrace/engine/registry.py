"""Stage registry — every pipeline stage is a plain function registered via decorator.

Usage:
    @stage(id="P1.02", layer=Layer.EXTRACTION, dependencies=["P1.01"])
    def open_paths(ctx: ConversionContext) -> None:
        ctx.open_paths = extract_unclosed_paths(ctx.require_grid())

Adding a stage = creating one module under ``engine/stages`` with the decorator.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from glyphtrace.engine.context import ConversionContext

logger = logging.getLogger(__name__)


class Layer(enum.IntEnum):
    PARSING = 0
    EXTRACTION = 1
    ANNOTATION = 2
    RENDERING = 3


@dataclass
class StageSpec:
    id: str
    layer: Layer
    fn: Callable[["ConversionContext"], None]
    dependencies: list[str] = field(default_factory=list)
    description: str = ""

    @property
    def sort_key(self) -> tuple[int, str]:
        return (int(self.layer), self.id)


class StageRegistry:
    """Registry of pipeline stages, keyed by ID."""

    def __init__(self) -> None:
        self._stages: dict[str, StageSpec] = {}

    def register(self, spec: StageSpec) -> None:
        if spec.id in self._stages:
            raise ValueError(f"Duplicate stage ID: {spec.id}")
        self._stages[spec.id] = spec
        logger.debug("Registered stage %s (%s)", spec.id, spec.layer.name)

    def get(self, stage_id: str) -> StageSpec:
        return self._stages[stage_id]

    def get_layer(self, layer: Layer) -> list[StageSpec]:
        return sorted((s for s in self._stages.values() if s.layer == layer), key=lambda s: s.id)

    def all(self) -> list[StageSpec]:
        return sorted(self._stages.values(), key=lambda s: s.sort_key)

    def resolve_order(self) -> list[StageSpec]:
        """Dependency order; ties broken by (layer, id) so runs are reproducible.

        Raises:
            ValueError: a dependency is not registered, or dependencies form a cycle.
        """
        for spec in self._stages.values():
            missing = [d for d in spec.dependencies if d not in self._stages]
            if missing:
                raise ValueError(f"Stage {spec.id} depends on unknown stage(s): {', '.join(missing)}")

        remaining = {sid: set(spec.dependencies) for sid, spec in self._stages.items()}
        ordered: list[StageSpec] = []
        while remaining:
            ready = [self._stages[sid] for sid, deps in remaining.items() if not deps]
            if not ready:
                raise ValueError(f"Circular dependency detected among: {sorted(remaining)}")
            nxt = min(ready, key=lambda s: s.sort_key)
            ordered.append(nxt)
            del remaining[nxt.id]
            for deps in remaining.values():
                deps.discard(nxt.id)
        return ordered

    @property
    def count(self) -> int:
        return len(self._stages)


# Module-level singleton
_registry = StageRegistry()


def get_registry() -> StageRegistry:
    return _registry


def stage(
    *,
    id: str,
    layer: Layer,
    dependencies: list[str] | None = None,
    description: str = "",
):
    """Decorator to register a stage function."""

    def decorator(fn: Callable[["ConversionContext"], None]):
        _registry.register(
            StageSpec(
                id=id,
                layer=layer,
                fn=fn,
                dependencies=dependencies or [],
                description=description,
            )
        )
        return fn

    return decorator
