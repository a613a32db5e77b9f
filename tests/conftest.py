"""Shared fixtures for venue planner tests."""

import json

import pytest

from venueplanner.core.model import (
    Constraint,
    ConstraintType,
    Guest,
    LengthUnit,
    Position,
    Room,
    Table,
    VenueConfig,
)
from venueplanner.engine.scene import InMemoryScene


def make_table(table_id, label, x=100.0, y=100.0, width=60.0, height=60.0, guests=(), room_id=None):
    return Table(
        id=table_id,
        label=label,
        shape="round",
        position=Position(x, y),
        rotation=0.0,
        capacity=8,
        width=width,
        height=height,
        assigned_guest_ids=tuple(guests),
        room_id=room_id,
    )


@pytest.fixture
def venue():
    """A 40ft x 30ft hall with a terrace attached to its right edge."""
    return VenueConfig(
        room_width=40,
        room_length=30,
        unit=LengthUnit.FEET,
        grid_size=1,
        snap_to_grid=True,
        rooms=(
            Room(
                id="terrace",
                label="Terrace",
                position=Position(600, 75),
                width=20,
                height=20,
                color="#FDE68A",
                parent_room_id="__primary__",
                attach_edge="right",
            ),
        ),
    )


@pytest.fixture
def scene(venue):
    return InMemoryScene(venue)


@pytest.fixture
def seating():
    """Guests Ada and Ben at tables T1 and T2."""
    tables = [
        make_table("T1", "Table 1", guests=("ada",)),
        make_table("T2", "Table 2", x=300, guests=("ben",)),
    ]
    guests = [
        Guest(id="ada", name="Ada", table_id="T1"),
        Guest(id="ben", name="Ben", table_id="T2"),
    ]
    return guests, tables


@pytest.fixture
def scene_file(tmp_path):
    data = {
        "venue": {
            "roomWidth": 40,
            "roomLength": 30,
            "unit": "ft",
            "gridSize": 1,
            "showGrid": True,
            "snapToGrid": True,
            "tables": [
                {
                    "id": "T1",
                    "label": "Table 1",
                    "shape": "round",
                    "position": {"x": 150, "y": 150},
                    "rotation": 0,
                    "capacity": 8,
                    "width": 60,
                    "height": 60,
                    "assignedGuestIds": ["ada", "ben"],
                }
            ],
            "fixtures": [
                {
                    "id": "F1",
                    "type": "stage",
                    "label": "Stage",
                    "position": {"x": 300, "y": 45},
                    "rotation": 0,
                    "width": 180,
                    "height": 60,
                }
            ],
            "walls": [],
            "rooms": [
                {
                    "id": "terrace",
                    "label": "Terrace",
                    "position": {"x": 600, "y": 75},
                    "width": 20,
                    "height": 20,
                    "parentRoomId": "__primary__",
                    "attachEdge": "right",
                }
            ],
        },
        "guests": [
            {"id": "ada", "name": "Ada", "tableId": "T1"},
            {"id": "ben", "name": "Ben", "tableId": "T1"},
        ],
        "constraints": [
            {
                "id": "c1",
                "type": ConstraintType.MUST_NOT_SIT_TOGETHER.value,
                "guestIds": ["ada", "ben"],
                "reason": "Former partners",
            }
        ],
    }
    path = tmp_path / "scene.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture
def constraint():
    def _make(constraint_type, a="ada", b="ben", constraint_id="c1"):
        return Constraint(id=constraint_id, type=constraint_type, guest_ids=(a, b), reason="")

    return _make


@pytest.fixture
def table_factory():
    return make_table
