"""Tests for dragging tables and fixtures with alignment and grid snapping."""

from dataclasses import replace

import pytest

from venueplanner.core.model import Fixture, Position
from venueplanner.engine.dragging import ObjectDragController
from venueplanner.engine.scene import InMemoryScene


def _stage(x=300.0, y=45.0):
    return Fixture(
        id="F1", type="stage", label="Stage", position=Position(x, y), rotation=0.0, width=180.0, height=60.0
    )


@pytest.fixture
def drag_scene(venue, table_factory):
    """T1 at (100, 100) and T2 at (400, 300), both 60 x 60."""
    tables = (table_factory("T1", "Table 1"), table_factory("T2", "Table 2", x=400, y=300))
    return InMemoryScene(replace(venue, tables=tables))


@pytest.fixture
def controller(drag_scene):
    return ObjectDragController(drag_scene)


def test_snaps_to_other_table(controller):
    position = controller.drag_move("table", "T2", 103, 400)

    assert position == Position(100, 400)
    assert {g.orientation for g in controller.guides} == {"vertical"}
    assert sorted(g.position for g in controller.guides) == [70, 100, 130]


def test_dragged_table_is_not_its_own_target(controller):
    position = controller.drag_move("table", "T2", 403, 303)

    assert position == Position(403, 303)
    assert controller.guides == ()


def test_guide_snapping_disabled(drag_scene):
    drag_scene.update_venue(snap_to_guides=False)
    controller = ObjectDragController(drag_scene)

    assert controller.drag_move("table", "T2", 103, 400) == Position(103, 400)
    assert controller.guides == ()


def test_lock_holds_until_pulled_away(controller):
    controller.drag_move("table", "T2", 103, 400)

    assert controller.drag_move("table", "T2", 110, 400) == Position(100, 400)
    assert controller.drag_move("table", "T2", 120, 400) == Position(120, 400)
    assert controller.guides == ()


def test_zoom_scales_threshold(drag_scene):
    controller = ObjectDragController(drag_scene, zoom=2.0)

    assert controller.drag_move("table", "T2", 105, 400) == Position(105, 400)
    assert controller.drag_move("table", "T2", 103, 400) == Position(100, 400)


def test_drag_end_grid_snaps_and_stores(controller, drag_scene):
    controller.drag_move("table", "T2", 103, 400)

    position = controller.drag_end("table", "T2", 103, 400)

    assert position == Position(105, 405)
    assert drag_scene.venue.tables[1].position == Position(105, 405)
    assert drag_scene.venue.tables[0].position == Position(100, 100)
    assert controller.lock.x is None
    assert controller.guides == ()


def test_drag_end_without_grid_snapping(drag_scene):
    drag_scene.update_venue(snap_to_grid=False)
    controller = ObjectDragController(drag_scene)

    assert controller.drag_end("table", "T2", 103, 400) == Position(103, 400)
    assert drag_scene.venue.tables[1].position == Position(103, 400)


def test_drag_fixture_snaps_to_table(drag_scene):
    drag_scene.update_venue(fixtures=(_stage(),), snap_to_grid=False)
    controller = ObjectDragController(drag_scene)

    position = controller.drag_move("fixture", "F1", 102, 300)
    assert position == Position(100, 300)

    controller.drag_end("fixture", "F1", position.x, position.y)
    assert drag_scene.venue.fixtures[0].position == Position(100, 300)


def test_unknown_object_is_left_alone(controller, drag_scene):
    assert controller.drag_move("table", "T9", 103, 400) == Position(103, 400)
    assert controller.drag_end("table", "T9", 103, 400) == Position(103, 400)
    assert [t.position for t in drag_scene.venue.tables] == [Position(100, 100), Position(400, 300)]


def test_walls_cannot_be_dragged(controller):
    with pytest.raises(ValueError):
        controller.drag_move("wall", "W1", 0, 0)
