"""Tests for the stage registry."""

import pytest

from glyphtrace.engine.registry import Layer, StageRegistry, StageSpec, get_registry


def _noop(ctx) -> None:
    pass


def _spec(stage_id: str, layer: Layer = Layer.PARSING, deps: list[str] | None = None) -> StageSpec:
    return StageSpec(id=stage_id, layer=layer, fn=_noop, dependencies=deps or [])


def test_builtin_stages_registered():
    registry = get_registry()
    assert registry.count == 7
    assert [s.id for s in registry.resolve_order()] == [
        "P0.01", "P0.02", "P1.01", "P1.02", "P1.03", "P2.01", "P3.01",
    ]


def test_get_layer():
    ids = [s.id for s in get_registry().get_layer(Layer.EXTRACTION)]
    assert ids == ["P1.01", "P1.02", "P1.03"]


def test_duplicate_id():
    registry = StageRegistry()
    registry.register(_spec("A"))
    with pytest.raises(ValueError, match="Duplicate"):
        registry.register(_spec("A"))


def test_unknown_dependency():
    registry = StageRegistry()
    registry.register(_spec("A", deps=["missing"]))
    with pytest.raises(ValueError, match="unknown"):
        registry.resolve_order()


def test_cycle():
    registry = StageRegistry()
    registry.register(_spec("A", deps=["B"]))
    registry.register(_spec("B", deps=["A"]))
    with pytest.raises(ValueError, match="Circular"):
        registry.resolve_order()


def test_dependencies_beat_layer_order():
    registry = StageRegistry()
    registry.register(_spec("late", layer=Layer.PARSING, deps=["early"]))
    registry.register(_spec("early", layer=Layer.RENDERING))
    assert [s.id for s in registry.resolve_order()] == ["early", "late"]
