"""Parser for venue scene JSON files.

This module reads the JSON document saved by the seating application
(camelCase keys) and converts it into model objects held by an
``InMemoryScene``.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from ..core.model import (
    Constraint,
    ConstraintType,
    Fixture,
    Guest,
    LengthUnit,
    Position,
    Room,
    Table,
    VenueConfig,
    Wall,
)
from ..engine.scene import InMemoryScene

LOGGER = logging.getLogger(__name__)


def _parse_position(data: Optional[Dict[str, Any]]) -> Position:
    """Parse a ``{"x": ..., "y": ...}`` mapping.

    Raises:
        ValueError: If the mapping is missing or a coordinate is not numeric.
    """
    if not isinstance(data, dict):
        raise ValueError(f"Invalid position: {data!r}")
    return Position(float(data["x"]), float(data["y"]))


def _parse_table(data: Dict[str, Any]) -> Table:
    return Table(
        id=data["id"],
        label=data.get("label", ""),
        shape=data.get("shape", "round"),
        position=_parse_position(data.get("position")),
        rotation=float(data.get("rotation", 0)),
        capacity=int(data.get("capacity", 0)),
        width=float(data["width"]),
        height=float(data["height"]),
        assigned_guest_ids=tuple(data.get("assignedGuestIds", [])),
        room_id=data.get("roomId"),
    )


def _parse_fixture(data: Dict[str, Any]) -> Fixture:
    return Fixture(
        id=data["id"],
        type=data.get("type", ""),
        label=data.get("label", ""),
        position=_parse_position(data.get("position")),
        rotation=float(data.get("rotation", 0)),
        width=float(data["width"]),
        height=float(data["height"]),
        room_id=data.get("roomId"),
    )


def _parse_wall(data: Dict[str, Any]) -> Wall:
    style = data.get("style", "solid")
    if style not in ("solid", "partition"):
        raise ValueError(f"Unknown wall style: {style}")
    return Wall(
        id=data["id"],
        label=data.get("label", "Wall"),
        start=_parse_position(data.get("start")),
        end=_parse_position(data.get("end")),
        thickness=float(data.get("thickness", 8)),
        style=style,
        rotation=float(data.get("rotation", 0)),
        room_id=data.get("roomId"),
    )


def _parse_room(data: Dict[str, Any]) -> Room:
    edge = data.get("attachEdge")
    if edge is not None and edge not in ("top", "right", "bottom", "left"):
        raise ValueError(f"Unknown attach edge: {edge}")
    return Room(
        id=data["id"],
        label=data.get("label", ""),
        position=_parse_position(data.get("position")),
        width=float(data["width"]),
        height=float(data["height"]),
        color=data.get("color"),
        parent_room_id=data.get("parentRoomId"),
        attach_edge=edge,
    )


def _parse_items(items, parser, kind: str) -> tuple:
    parsed = []
    for item in items or []:
        try:
            parsed.append(parser(item))
        except (KeyError, TypeError, ValueError) as e:
            item_id = item.get("id", "?") if isinstance(item, dict) else "?"
            raise ValueError(f"Invalid {kind} data for {item_id}: {e}") from e
    return tuple(parsed)


def parse_venue(data: Dict[str, Any]) -> VenueConfig:
    """Build a ``VenueConfig`` from its JSON mapping.

    Older documents store the primary room length as ``roomHeight``; it is
    accepted when ``roomLength`` is absent.

    Raises:
        ValueError: If a required field is missing or malformed.
    """
    try:
        room_length = data.get("roomLength", data.get("roomHeight"))
        if room_length is None:
            raise KeyError("roomLength")
        unit = LengthUnit(data.get("unit", "ft"))
        room_width = float(data["roomWidth"])
        room_length = float(room_length)
        grid_size = float(data.get("gridSize", 1))
    except (KeyError, TypeError, ValueError) as e:
        raise ValueError(f"Invalid venue data: {e}") from e

    return VenueConfig(
        room_width=room_width,
        room_length=room_length,
        unit=unit,
        grid_size=grid_size,
        show_grid=bool(data.get("showGrid", True)),
        snap_to_grid=bool(data.get("snapToGrid", True)),
        snap_to_guides=bool(data.get("snapToGuides", True)),
        blueprint_mode=bool(data.get("blueprintMode", False)),
        tables=_parse_items(data.get("tables"), _parse_table, "table"),
        fixtures=_parse_items(data.get("fixtures"), _parse_fixture, "fixture"),
        walls=_parse_items(data.get("walls"), _parse_wall, "wall"),
        rooms=_parse_items(data.get("rooms"), _parse_room, "room"),
    )


def _parse_guest(data: Dict[str, Any]) -> Guest:
    return Guest(
        id=data["id"],
        name=data.get("name", ""),
        table_id=data.get("tableId"),
        seat_index=data.get("seatIndex"),
    )


def _parse_constraint(data: Dict[str, Any]) -> Constraint:
    guest_ids = data["guestIds"]
    if len(guest_ids) != 2:
        raise ValueError(f"expected exactly two guest IDs, got {len(guest_ids)}")
    return Constraint(
        id=data["id"],
        type=ConstraintType(data["type"]),
        guest_ids=(guest_ids[0], guest_ids[1]),
        reason=data.get("reason", ""),
    )


def load_scene(path: str) -> InMemoryScene:
    """Load a venue scene from a JSON file.

    The document holds a ``venue`` mapping plus optional ``guests`` and
    ``constraints`` lists.

    Args:
        path: Path to the JSON file.

    Returns:
        An ``InMemoryScene`` holding the venue, guests and constraints.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the JSON data is invalid or malformed.
    """
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    with open(file_path, encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict) or "venue" not in data:
        raise ValueError("Scene file must contain a 'venue' object")

    venue = parse_venue(data["venue"])
    guests = _parse_items(data.get("guests"), _parse_guest, "guest")
    constraints = _parse_items(data.get("constraints"), _parse_constraint, "constraint")

    LOGGER.debug(
        "Loaded %s: %d rooms, %d tables, %d guests, %d constraints",
        file_path.name,
        len(venue.rooms) + 1,
        len(venue.tables),
        len(guests),
        len(constraints),
    )
    return InMemoryScene(venue, guests=guests, constraints=constraints)
