"""Core data models for venue layouts.

This module defines the value types shared by the geometry, snapping,
wall drawing and constraint validation layers. All records are frozen:
the scene store owns every instance and replaces records instead of
mutating them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Literal, Optional, Tuple


class LengthUnit(str, Enum):
    """Real-world length unit of a venue."""

    FEET = "ft"
    METERS = "m"


class ToolMode(str, Enum):
    """Active canvas tool."""

    SELECT = "select"
    DRAW_WALL = "draw-wall"


class ConstraintType(str, Enum):
    """Seating rule kinds."""

    MUST_SIT_TOGETHER = "must-sit-together"
    MUST_NOT_SIT_TOGETHER = "must-not-sit-together"


Edge = Literal["top", "right", "bottom", "left"]
WallStyle = Literal["solid", "partition"]


@dataclass(frozen=True)
class Position:
    """A point in scene pixels, top-left origin, y increasing downward.

    Attributes:
        x: Horizontal coordinate in pixels.
        y: Vertical coordinate in pixels.
    """

    x: float
    y: float


@dataclass(frozen=True)
class Room:
    """An explicit room attached to the venue.

    Attributes:
        id: Unique identifier for the room.
        label: Human-readable name of the room.
        position: Top-left corner in pixels.
        width: Width in the venue's length unit.
        height: Height in the venue's length unit.
        color: Optional fill color (e.g., "#FDE68A").
        parent_room_id: ID of the room this one is attached to, if any.
        attach_edge: Edge of the parent the room was attached to, if any.
    """

    id: str
    label: str
    position: Position
    width: float
    height: float
    color: Optional[str] = None
    parent_room_id: Optional[str] = None
    attach_edge: Optional[Edge] = None


@dataclass(frozen=True)
class RoomRect:
    """Pixel-space rectangle of a room."""

    id: str
    label: str
    x: float
    y: float
    width: float
    height: float
    color: Optional[str] = None


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned rectangle in pixels."""

    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class Table:
    """A guest table placed on the canvas.

    Attributes:
        id: Unique identifier for the table.
        label: Display label (e.g., "Table 3").
        shape: Table shape name ("round", "rectangular", ...).
        position: Anchor position in pixels.
        rotation: Rotation in degrees.
        capacity: Number of seats.
        width: Width in pixels.
        height: Height in pixels.
        assigned_guest_ids: IDs of the guests seated at this table.
        room_id: ID of the room the table belongs to, if tagged.
        kind: Discriminant of the placed-object union.
    """

    id: str
    label: str
    shape: str
    position: Position
    rotation: float
    capacity: int
    width: float
    height: float
    assigned_guest_ids: Tuple[str, ...] = ()
    room_id: Optional[str] = None
    kind: Literal["table"] = field(default="table", init=False)


@dataclass(frozen=True)
class Fixture:
    """A non-seating fixture such as a stage, bar or dance floor."""

    id: str
    type: str
    label: str
    position: Position
    rotation: float
    width: float
    height: float
    room_id: Optional[str] = None
    kind: Literal["fixture"] = field(default="fixture", init=False)


@dataclass(frozen=True)
class WallDraft:
    """A wall that has not been given an ID by the scene store yet.

    Attributes:
        label: Display label.
        start: First endpoint in pixels.
        end: Second endpoint in pixels.
        thickness: Stroke thickness in pixels.
        style: Either "solid" or "partition".
        rotation: Rotation in degrees.
        room_id: ID of the room the wall belongs to, if tagged.
    """

    label: str
    start: Position
    end: Position
    thickness: float
    style: WallStyle
    rotation: float
    room_id: Optional[str] = None


@dataclass(frozen=True)
class Wall:
    """A wall segment. Walls carry endpoints instead of width/height."""

    id: str
    label: str
    start: Position
    end: Position
    thickness: float
    style: WallStyle
    rotation: float
    room_id: Optional[str] = None
    kind: Literal["wall"] = field(default="wall", init=False)

    @classmethod
    def from_draft(cls, wall_id: str, draft: WallDraft) -> "Wall":
        return cls(
            id=wall_id,
            label=draft.label,
            start=draft.start,
            end=draft.end,
            thickness=draft.thickness,
            style=draft.style,
            rotation=draft.rotation,
            room_id=draft.room_id,
        )


@dataclass(frozen=True)
class VenueConfig:
    """Venue-level settings plus every object placed on the canvas.

    Attributes:
        room_width: Primary room width in ``unit``.
        room_length: Primary room length in ``unit``.
        unit: Length unit used for every unit-denominated value.
        grid_size: Grid pitch in ``unit``.
        show_grid: Whether the grid is drawn.
        snap_to_grid: Whether pointer positions snap to the grid.
        snap_to_guides: Whether dragged objects snap to alignment guides.
        blueprint_mode: Whether the canvas renders as a blueprint.
        tables: Tables in insertion order.
        fixtures: Fixtures in insertion order.
        walls: Walls in insertion order.
        rooms: Explicit (non-primary) rooms in insertion order.
    """

    room_width: float
    room_length: float
    unit: LengthUnit = LengthUnit.FEET
    grid_size: float = 1.0
    show_grid: bool = True
    snap_to_grid: bool = True
    snap_to_guides: bool = True
    blueprint_mode: bool = False
    tables: Tuple[Table, ...] = ()
    fixtures: Tuple[Fixture, ...] = ()
    walls: Tuple[Wall, ...] = ()
    rooms: Tuple[Room, ...] = ()


@dataclass(frozen=True)
class Guest:
    """A guest, optionally seated at a table."""

    id: str
    name: str
    table_id: Optional[str] = None
    seat_index: Optional[int] = None


@dataclass(frozen=True)
class Constraint:
    """A symmetric seating rule between exactly two guests."""

    id: str
    type: ConstraintType
    guest_ids: Tuple[str, str]
    reason: str = ""


@dataclass(frozen=True)
class ConstraintViolation:
    """A derived report that a constraint is currently broken."""

    constraint_id: str
    table_id: str
    message: str
