"""Tests for the pipeline orchestrator and ``convert``."""

import pytest

from glyphtrace.engine.context import ConversionContext
from glyphtrace.engine.errors import LabelError, ParseError
from glyphtrace.engine.grid import parse_grid
from glyphtrace.engine.pipeline import Pipeline, convert
from glyphtrace.engine.registry import Layer, StageRegistry, StageSpec
from glyphtrace.engine.scene import extract_scene
from tests.conftest import BOX, FLOWCHART, LABELED_BOX

ALL_STAGES = ["P0.01", "P0.02", "P1.01", "P1.02", "P1.03", "P2.01", "P3.01"]


def test_convert_box():
    ctx = convert(BOX)
    assert ctx.completed_stages == ALL_STAGES
    assert set(ctx.timings_ms) == set(ALL_STAGES)
    assert ctx.num_paths == 1
    assert ctx.grid is None
    assert ctx.svg.startswith('<?xml version="1.0" encoding="UTF-8"?>')
    assert 'd="M 4.5 8 L 13.5 8 L 22.5 8 L 22.5 24 L 22.5 40 L 13.5 40 L 4.5 40 L 4.5 24 Z"' in ctx.svg


def test_convert_flowchart():
    ctx = convert(FLOWCHART, title="Flow")
    scene = ctx.require_scene()
    assert len(scene.closed_paths) == 2
    assert len(scene.open_paths) == 2
    assert "<title>Flow</title>" in ctx.svg
    assert ">input</text>" in ctx.svg


def test_labels_resolved():
    ctx = convert(LABELED_BOX)
    assert ctx.diagram_text == "+-----+\n| [a] |\n+-----+"
    assert set(ctx.label_styles) == {"a"}
    assert 0 in ctx.path_styles
    assert ctx.texts == ()
    assert ctx.unresolved_labels == ()
    assert 'fill="#ff0000"' in ctx.svg


def test_parse_error_propagates():
    with pytest.raises(ParseError):
        convert("+-+\n|\x1b|\n+-+")


def test_label_error_propagates():
    with pytest.raises(LabelError):
        convert("+-+\n\n[a]: not json")


def test_run_layer():
    pipeline = Pipeline()
    ctx = ConversionContext(source_text=BOX)
    pipeline.run_layer(ctx, Layer.PARSING)
    assert ctx.grid is not None
    assert ctx.scene is None
    pipeline.run_layer(ctx, Layer.EXTRACTION)
    assert ctx.completed_stages == ["P0.01", "P0.02", "P1.01", "P1.02", "P1.03"]
    assert len(ctx.require_scene().paths) == 1
    assert ctx.svg == ""


def test_custom_registry():
    calls: list[str] = []
    registry = StageRegistry()
    registry.register(StageSpec(id="B", layer=Layer.PARSING, fn=lambda ctx: calls.append("B"), dependencies=["A"]))
    registry.register(StageSpec(id="A", layer=Layer.PARSING, fn=lambda ctx: calls.append("A")))
    ctx = Pipeline(registry).run(ConversionContext())
    assert calls == ["A", "B"]
    assert ctx.completed_stages == ["A", "B"]


def test_failing_stage_stops_the_run():
    def boom(ctx: ConversionContext) -> None:
        raise RuntimeError("boom")

    registry = StageRegistry()
    registry.register(StageSpec(id="A", layer=Layer.PARSING, fn=boom))
    registry.register(StageSpec(id="B", layer=Layer.PARSING, fn=lambda ctx: None, dependencies=["A"]))
    ctx = ConversionContext()
    with pytest.raises(RuntimeError, match="boom"):
        Pipeline(registry).run(ctx)
    assert ctx.completed_stages == []


def test_require_helpers():
    ctx = ConversionContext()
    with pytest.raises(RuntimeError):
        ctx.require_grid()
    with pytest.raises(RuntimeError):
        ctx.require_scene()
    assert ctx.num_paths == 0


def test_form_feed_with_labels_rejected():
    with pytest.raises(ParseError) as exc:
        convert('+-+\x0c+-+\n\n[a]: {"fill": "#f00"}\n')
    assert (exc.value.column, exc.value.row) == (4, 1)


def test_pipeline_scene_matches_extract_scene():
    scene = convert(FLOWCHART).require_scene()
    expected = extract_scene(parse_grid(FLOWCHART))
    assert [p.points for p in scene.paths] == [p.points for p in expected.paths]
    assert scene.texts == expected.texts
    assert (scene.width, scene.height) == (expected.width, expected.height)
