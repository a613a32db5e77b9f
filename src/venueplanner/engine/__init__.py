"""Engine module for venue interaction and validation.

This module provides the wall drawing state machine, keyboard shortcuts,
table and fixture dragging, the scene store interface and seating
constraint validation.
"""

from .dragging import ObjectDragController
from .scene import InMemoryScene, SceneStore
from .shortcuts import Selection, handle_key
from .validators import InvalidVenueConfig, validate_constraints, validate_venue_config
from .wall_drawing import DrawingState, WallDrawingMachine

__all__ = [
    "DrawingState",
    "InMemoryScene",
    "InvalidVenueConfig",
    "ObjectDragController",
    "SceneStore",
    "Selection",
    "WallDrawingMachine",
    "handle_key",
    "validate_constraints",
    "validate_venue_config",
]
