"""Multi-room composition in pixel space.

Rooms are stored with real-world dimensions. Every function here works on
``RoomRect`` values produced by a single conversion pass in
``get_all_room_rects``, so one canonical scale factor is used per call.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple, Union

from shapely.geometry import Polygon, box

from ..config import PRIMARY_ROOM_ID, PRIMARY_ROOM_LABEL
from ..core.model import BoundingBox, Fixture, Position, RoomRect, Table, VenueConfig

# Minimum shared area (square pixels) for two rooms to count as overlapping
OVERLAP_TOLERANCE = 1e-6


def get_all_room_rects(venue: VenueConfig, px_per_unit: float) -> List[RoomRect]:
    """Materialize the primary room and every attached room as pixel rectangles.

    Args:
        venue: Venue configuration holding the primary room dimensions and
            the explicit rooms.
        px_per_unit: Pixels per unit of ``venue.unit``.

    Returns:
        The synthesized primary room first, followed by the explicit rooms in
        their stored order.
    """
    rects = [
        RoomRect(
            id=PRIMARY_ROOM_ID,
            label=PRIMARY_ROOM_LABEL,
            x=0.0,
            y=0.0,
            width=venue.room_width * px_per_unit,
            height=venue.room_length * px_per_unit,
        )
    ]

    for room in venue.rooms:
        rects.append(
            RoomRect(
                id=room.id,
                label=room.label,
                x=room.position.x,
                y=room.position.y,
                width=room.width * px_per_unit,
                height=room.height * px_per_unit,
                color=room.color,
            )
        )

    return rects


def get_venue_bounding_box(room_rects: Sequence[RoomRect]) -> BoundingBox:
    """Return the smallest box covering every room.

    An empty input yields ``BoundingBox(0, 0, 0, 0)``; callers must not treat
    that result as a real extent.
    """
    if not room_rects:
        return BoundingBox(0.0, 0.0, 0.0, 0.0)

    min_x = min_y = float("inf")
    max_x = max_y = float("-inf")

    for r in room_rects:
        min_x = min(min_x, r.x)
        min_y = min(min_y, r.y)
        max_x = max(max_x, r.x + r.width)
        max_y = max(max_y, r.y + r.height)

    return BoundingBox(x=min_x, y=min_y, width=max_x - min_x, height=max_y - min_y)


def compute_new_room_position(
    parent_rect: RoomRect, edge: str, new_width_px: float, new_height_px: float
) -> Position:
    """Compute the top-left corner of a room attached flush to a parent edge.

    The new room is centered along the chosen edge. Overlap with other rooms
    is not checked.

    Args:
        parent_rect: Rectangle of the room being attached to.
        edge: One of "top", "right", "bottom" or "left".
        new_width_px: Width of the new room in pixels.
        new_height_px: Height of the new room in pixels.

    Returns:
        Top-left position of the new room in pixels.

    Raises:
        ValueError: If ``edge`` is not one of the four edges.
    """
    p = parent_rect
    if edge == "top":
        return Position(p.x + (p.width - new_width_px) / 2, p.y - new_height_px)
    if edge == "bottom":
        return Position(p.x + (p.width - new_width_px) / 2, p.y + p.height)
    if edge == "left":
        return Position(p.x - new_width_px, p.y + (p.height - new_height_px) / 2)
    if edge == "right":
        return Position(p.x + p.width, p.y + (p.height - new_height_px) / 2)
    raise ValueError(f"Unknown edge: {edge!r}")


def get_room_at_point(room_rects: Sequence[RoomRect], x: float, y: float) -> Optional[RoomRect]:
    """Return the topmost room containing a point, or None.

    Rooms are scanned last-added first so attached rooms win over the
    primary room and over rooms added before them. Edges are inclusive.
    """
    for r in reversed(room_rects):
        if r.x <= x <= r.x + r.width and r.y <= y <= r.y + r.height:
            return r
    return None


def get_room_center(rect: RoomRect) -> Position:
    """Return the center point of a room rectangle."""
    return Position(rect.x + rect.width / 2, rect.y + rect.height / 2)


def get_room_rect(room_rects: Sequence[RoomRect], room_id: str) -> Optional[RoomRect]:
    for r in room_rects:
        if r.id == room_id:
            return r
    return None


def rect_polygon(rect: Union[RoomRect, BoundingBox]) -> Polygon:
    """Convert a rectangle to a Shapely polygon."""
    return box(rect.x, rect.y, rect.x + rect.width, rect.y + rect.height)


def object_polygon(obj: Union[Table, Fixture]) -> Polygon:
    """Axis-aligned footprint of a table or fixture anchored at its center.

    Rotation is ignored.
    """
    half_w = obj.width / 2
    half_h = obj.height / 2
    return box(
        obj.position.x - half_w,
        obj.position.y - half_h,
        obj.position.x + half_w,
        obj.position.y + half_h,
    )


def is_out_of_bounds(obj: Union[Table, Fixture], rect: RoomRect) -> bool:
    """Check whether an object's footprint leaves a room.

    Touching the room edge from inside is still in bounds.
    """
    return not rect_polygon(rect).covers(object_polygon(obj))


def find_room_overlaps(room_rects: Sequence[RoomRect]) -> List[Tuple[str, str]]:
    """Return ID pairs of rooms whose interiors overlap.

    Rooms sharing only an edge (zero-area intersection) are not considered
    overlapping. Pairs keep the enumeration order of ``room_rects``.
    """
    polygons = [rect_polygon(r) for r in room_rects]
    overlaps = []
    for i in range(len(room_rects)):
        for j in range(i + 1, len(room_rects)):
            if polygons[i].intersection(polygons[j]).area > OVERLAP_TOLERANCE:
                overlaps.append((room_rects[i].id, room_rects[j].id))
    return overlaps
