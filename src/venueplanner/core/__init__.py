"""Core data models for venue layouts."""

from .model import (
    BoundingBox,
    Constraint,
    ConstraintType,
    ConstraintViolation,
    Fixture,
    Guest,
    LengthUnit,
    Position,
    Room,
    RoomRect,
    Table,
    ToolMode,
    VenueConfig,
    Wall,
    WallDraft,
)
from .topology import attached_rooms, build_room_graph
from .units import pixels_per_unit, to_pixels, to_unit

__all__ = [
    "BoundingBox",
    "Constraint",
    "ConstraintType",
    "ConstraintViolation",
    "Fixture",
    "Guest",
    "LengthUnit",
    "Position",
    "Room",
    "RoomRect",
    "Table",
    "ToolMode",
    "VenueConfig",
    "Wall",
    "WallDraft",
    "attached_rooms",
    "build_room_graph",
    "pixels_per_unit",
    "to_pixels",
    "to_unit",
]
