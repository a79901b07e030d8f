"""Tests for the two-phase scene extraction."""

from glyphtrace.engine.grid import Point, parse_grid
from glyphtrace.engine.scene import extract_closed_paths, extract_scene
from tests.conftest import BOX, FLOWCHART, LINE, STACKED_BOXES, TABLE, TWO_BOXES


def test_single_box():
    scene = extract_scene(parse_grid(BOX))
    assert len(scene.paths) == 1
    assert scene.paths[0].closed
    assert (scene.width, scene.height) == (3, 3)
    assert scene.texts == ()


def test_single_line():
    scene = extract_scene(parse_grid(LINE))
    assert len(scene.paths) == 1
    assert not scene.paths[0].closed
    assert scene.paths[0].points == (Point(1, 1), Point(2, 1), Point(3, 1))


def test_two_boxes_left_first():
    scene = extract_scene(parse_grid(TWO_BOXES))
    assert len(scene.closed_paths) == 2
    left, right = scene.paths
    assert left.start == Point(1, 1)
    assert right.start == Point(7, 1)
    assert left.point_set.isdisjoint(right.point_set)


def test_column_major_order():
    scene = extract_scene(parse_grid(STACKED_BOXES))
    # The lower box starts in column 1, so it is found first
    assert [p.start for p in scene.paths] == [Point(1, 4), Point(4, 1)]


def test_dimensions_survive_removal():
    grid = parse_grid(TWO_BOXES)
    scene = extract_scene(grid)
    assert grid.non_blank_count() == 0
    assert (scene.width, scene.height) == (9, 3)


def test_closed_paths_before_open_paths():
    scene = extract_scene(parse_grid(FLOWCHART))
    assert [p.closed for p in scene.paths] == [True, True, False, False]
    box_in, box_out, down, across = scene.paths
    assert len(box_in) == 20
    assert len(box_out) == 22
    assert down.points == (Point(5, 4), Point(5, 5))
    assert across.start == Point(10, 2)
    assert across.end == Point(15, 2)


def test_paths_are_disjoint():
    scene = extract_scene(parse_grid(FLOWCHART))
    seen: set[Point] = set()
    for path in scene.paths:
        assert seen.isdisjoint(path.point_set)
        seen |= path.point_set


def test_residual_text():
    scene = extract_scene(parse_grid(FLOWCHART))
    assert [(t.start, t.text) for t in scene.texts] == [
        (Point(3, 2), "input"),
        (Point(18, 2), "output"),
    ]


def test_table_divider_left_as_text():
    scene = extract_scene(parse_grid(TABLE))
    assert len(scene.paths) == 1
    assert [(t.start, t.text) for t in scene.texts] == [(Point(4, 2), "|")]


def test_repeatable():
    first = extract_scene(parse_grid(FLOWCHART))
    second = extract_scene(parse_grid(FLOWCHART))
    assert [p.points for p in first.paths] == [p.points for p in second.paths]


def test_closed_phase_alone_leaves_lines():
    grid = parse_grid(FLOWCHART)
    closed = extract_closed_paths(grid)
    assert len(closed) == 2
    assert grid.get(Point(12, 2)) == "-"


def test_empty_grid():
    scene = extract_scene(parse_grid(""))
    assert scene.paths == ()
    assert (scene.width, scene.height) == (0, 0)
