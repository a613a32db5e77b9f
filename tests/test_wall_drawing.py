"""Tests for the wall drawing state machine."""

from dataclasses import replace

import pytest

from venueplanner.core.model import Position, ToolMode
from venueplanner.engine.scene import InMemoryScene
from venueplanner.engine.wall_drawing import DrawingState, WallDrawingMachine


@pytest.fixture
def machine(scene):
    scene.set_tool_mode(ToolMode.DRAW_WALL)
    return WallDrawingMachine(scene)


@pytest.fixture
def free_machine(venue):
    """Machine on a scene with grid snapping disabled."""
    scene = InMemoryScene(replace(venue, snap_to_grid=False), tool_mode=ToolMode.DRAW_WALL)
    return WallDrawingMachine(scene)


def test_events_are_ignored_outside_draw_wall_tool(scene):
    machine = WallDrawingMachine(scene)

    machine.pointer_down(10, 10)
    machine.pointer_move(200, 10)

    assert machine.state == DrawingState.IDLE
    assert machine.pointer_up() is None
    assert scene.venue.walls == ()


def test_draw_and_commit(machine):
    machine.pointer_down(14, 16)
    assert machine.state == DrawingState.DRAWING
    assert machine.drawing_wall.start == Position(15, 15)
    assert machine.drawing_wall.current_end == Position(15, 15)

    machine.pointer_move(152, 16)
    assert machine.drawing_wall.current_end == Position(150, 15)

    wall_id = machine.pointer_up()

    assert machine.state == DrawingState.IDLE
    wall = machine.scene.venue.walls[-1]
    assert wall.id == wall_id
    assert wall.kind == "wall"
    assert (wall.start, wall.end) == (Position(15, 15), Position(150, 15))
    assert (wall.label, wall.thickness, wall.style, wall.rotation) == ("Wall", 8, "solid", 0)


def test_every_move_updates_the_end(machine):
    machine.pointer_down(0, 0)
    for x in (20, 50, 80):
        machine.pointer_move(x, 0)
    machine.pointer_move(31, 44)

    assert machine.drawing_wall.current_end == Position(30, 45)


def test_minimum_length_boundary(free_machine):
    free_machine.pointer_down(0, 0)
    free_machine.pointer_move(6, 8)
    assert free_machine.pointer_up() is not None

    free_machine.pointer_down(0, 0)
    free_machine.pointer_move(9.99, 0)
    assert free_machine.pointer_up() is None

    assert len(free_machine.scene.venue.walls) == 1
    assert free_machine.state == DrawingState.IDLE


def test_click_without_drag_is_discarded(machine):
    machine.pointer_down(1, 1)
    machine.pointer_move(5, 5)

    assert machine.pointer_up() is None
    assert machine.scene.venue.walls == ()


def test_pointer_up_while_idle_is_noop(machine):
    assert machine.pointer_up() is None
    machine.pointer_move(100, 100)
    assert machine.state == DrawingState.IDLE


def test_cancel_discards_wall(machine):
    machine.pointer_down(0, 0)
    machine.pointer_move(300, 0)

    machine.cancel()

    assert machine.state == DrawingState.IDLE
    assert machine.pointer_up() is None
    assert machine.scene.venue.walls == ()


def test_cancel_while_idle(machine):
    machine.cancel()
    assert machine.state == DrawingState.IDLE


def test_leaving_draw_wall_tool_cancels(machine):
    machine.pointer_down(0, 0)
    machine.pointer_move(300, 0)

    machine.set_tool_mode(ToolMode.SELECT)

    assert machine.drawing_wall is None
    assert machine.scene.tool_mode == ToolMode.SELECT
    assert machine.scene.venue.walls == ()


def test_snap_settings_are_read_per_event(machine):
    machine.pointer_down(0, 0)
    machine.scene.update_venue(grid_size=2)

    machine.pointer_move(50, 0)

    assert machine.drawing_wall.current_end == Position(60, 0)


def test_tool_switch_on_scene_cancels_wall(machine):
    machine.pointer_down(0, 0)
    machine.pointer_move(300, 0)

    machine.scene.set_tool_mode(ToolMode.SELECT)

    assert machine.state == DrawingState.IDLE
    assert machine.drawing_wall is None
    assert machine.pointer_up() is None

    machine.scene.set_tool_mode(ToolMode.DRAW_WALL)

    assert machine.pointer_up() is None
    assert machine.scene.venue.walls == ()


def test_quick_tool_round_trip_leaves_no_wall(machine):
    machine.pointer_down(0, 0)
    machine.pointer_move(300, 0)

    machine.scene.set_tool_mode(ToolMode.SELECT)
    machine.scene.set_tool_mode(ToolMode.DRAW_WALL)

    assert machine.state == DrawingState.IDLE
    assert machine.pointer_up() is None
    assert machine.scene.venue.walls == ()
