"""Venue Planner - layout geometry and seating constraint engine for event floor plans."""

__version__ = "0.1.0"

from .core.model import ConstraintViolation, Position, Room, RoomRect, VenueConfig, Wall

__all__ = ["ConstraintViolation", "Position", "Room", "RoomRect", "VenueConfig", "Wall"]
