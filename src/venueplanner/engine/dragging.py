"""Dragging tables and fixtures with alignment guides.

While an object is dragged, ``drag_move`` snaps it to the edges and centers
of the other objects and to room centers, with a hysteresis lock so a snap
does not flicker as the pointer wobbles. ``drag_end`` grid-snaps the drop
position and writes it to the scene store.
"""

from __future__ import annotations

import logging
from typing import List, Literal, Optional, Tuple, Union

from ..core.model import Fixture, Position, Table
from ..core.units import pixels_per_unit
from ..geom.alignment import (
    AlignmentGuide,
    ObjectBounds,
    SnapLock,
    compute_alignment_snap,
    get_bounds_from_position,
    get_object_bounds,
    room_bounds,
    snap_threshold,
)
from ..geom.rooms import get_all_room_rects
from ..geom.snap import GridSnap
from .scene import SceneStore

LOGGER = logging.getLogger(__name__)

DraggableKind = Literal["table", "fixture"]


class ObjectDragController:
    """Drag interaction for tables and fixtures.

    One drag gesture is a series of ``drag_move`` calls followed by
    ``drag_end``. Positions are object centers in scene pixels.

    Attributes:
        scene: Handle to the scene store.
        lock: Snap lock for the current gesture.
        guides: Guides to display after the latest drag step.
    """

    def __init__(self, scene: SceneStore, zoom: float = 1.0):
        self.scene = scene
        self.lock = SnapLock(threshold=snap_threshold(zoom))
        self.guides: Tuple[AlignmentGuide, ...] = ()

    def _find(self, kind: DraggableKind, object_id: str) -> Optional[Union[Table, Fixture]]:
        venue = self.scene.venue
        if kind == "table":
            items = venue.tables
        elif kind == "fixture":
            items = venue.fixtures
        else:
            raise ValueError(f"Cannot drag objects of kind '{kind}'")
        return next((obj for obj in items if obj.id == object_id), None)

    def _targets(self, kind: DraggableKind, object_id: str) -> List[ObjectBounds]:
        venue = self.scene.venue
        return [
            get_object_bounds(obj)
            for obj in venue.tables + venue.fixtures
            if not (obj.kind == kind and obj.id == object_id)
        ]

    def drag_move(self, kind: DraggableKind, object_id: str, raw_x: float, raw_y: float) -> Position:
        """Resolve where the dragged object is shown for one pointer step.

        Nothing is snapped when the venue has guide snapping turned off or
        the object does not exist.

        Args:
            kind: "table" or "fixture".
            object_id: ID of the dragged object.
            raw_x: Unsnapped center x.
            raw_y: Unsnapped center y.

        Returns:
            The position to show the object at.
        """
        obj = self._find(kind, object_id)
        venue = self.scene.venue
        if obj is None or not venue.snap_to_guides:
            self.guides = ()
            return Position(raw_x, raw_y)

        dragging = get_bounds_from_position(object_id, raw_x, raw_y, obj.width, obj.height)
        rooms = [room_bounds(r) for r in get_all_room_rects(venue, pixels_per_unit(venue.unit))]
        result = compute_alignment_snap(dragging, self._targets(kind, object_id), rooms, self.lock.threshold)

        position, self.guides = self.lock.apply(raw_x, raw_y, result)
        return position

    def drag_end(self, kind: DraggableKind, object_id: str, x: float, y: float) -> Position:
        """Drop the object and store its final position.

        Args:
            kind: "table" or "fixture".
            object_id: ID of the dragged object.
            x: Center x where the object was released.
            y: Center y where the object was released.

        Returns:
            The stored position, grid-snapped when grid snapping is on.
        """
        self.guides = ()
        self.lock.reset()

        if self._find(kind, object_id) is None:
            return Position(x, y)

        position = GridSnap.from_venue(self.scene.venue).snap_position(x, y)
        if kind == "table":
            self.scene.update_table(object_id, position=position)
        else:
            self.scene.update_fixture(object_id, position=position)
        LOGGER.debug("Moved %s %s to (%g, %g)", kind, object_id, position.x, position.y)
        return position
