"""Alignment guides for dragged objects.

Guides are transient line segments shown while an object is dragged. Each
guide sits at a fixed coordinate on one axis and spans ``[start, end]`` on
the other. ``compute_alignment_snap`` generates guides for a drag step;
``guide_points`` and ``SnapLock`` consume them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal, Optional, Sequence, Tuple, Union

from ..config import (
    ALIGNMENT_SNAP_THRESHOLD,
    ESCAPE_MULTIPLIER,
    GUIDE_MATCH_TOLERANCE,
    GUIDE_PADDING,
)
from ..core.model import Fixture, Position, RoomRect, Table

Orientation = Literal["horizontal", "vertical"]
GuideType = Literal["edge", "center", "room-center"]


@dataclass(frozen=True)
class AlignmentGuide:
    """A guide line.

    Attributes:
        orientation: "vertical" guides sit at a fixed x, "horizontal" at a fixed y.
        position: The fixed coordinate in pixels.
        start: Start of the span on the other axis.
        end: End of the span on the other axis.
        type: What the guide aligns to.
    """

    orientation: Orientation
    position: float
    start: float
    end: float
    type: GuideType = "edge"


@dataclass(frozen=True)
class ObjectBounds:
    """Axis-aligned extent of an object anchored at its center."""

    id: str
    left: float
    right: float
    top: float
    bottom: float
    center_x: float
    center_y: float


@dataclass(frozen=True)
class AlignmentSnapResult:
    snapped_position: Position
    guides: Tuple[AlignmentGuide, ...]
    did_snap_x: bool
    did_snap_y: bool


def get_bounds_from_position(
    obj_id: str, x: float, y: float, width: float, height: float
) -> ObjectBounds:
    half_w = width / 2
    half_h = height / 2
    return ObjectBounds(
        id=obj_id,
        left=x - half_w,
        right=x + half_w,
        top=y - half_h,
        bottom=y + half_h,
        center_x=x,
        center_y=y,
    )


def get_object_bounds(obj: Union[Table, Fixture]) -> ObjectBounds:
    return get_bounds_from_position(obj.id, obj.position.x, obj.position.y, obj.width, obj.height)


def room_bounds(rect: RoomRect) -> ObjectBounds:
    return ObjectBounds(
        id=rect.id,
        left=rect.x,
        right=rect.x + rect.width,
        top=rect.y,
        bottom=rect.y + rect.height,
        center_x=rect.x + rect.width / 2,
        center_y=rect.y + rect.height / 2,
    )


def snap_threshold(zoom: float = 1.0) -> float:
    """Snap threshold in scene pixels for a given zoom level."""
    return ALIGNMENT_SNAP_THRESHOLD / zoom


def _best_offset(
    drag_values: Sequence[float], targets: Sequence[Tuple[float, GuideType, ObjectBounds]], threshold: float
) -> Optional[float]:
    best: Optional[Tuple[float, float]] = None  # (offset, distance)
    for value in drag_values:
        for target_value, _, _ in targets:
            distance = abs(value - target_value)
            if distance < threshold and (best is None or distance < best[1]):
                best = (target_value - value, distance)
    return None if best is None else best[0]


def compute_alignment_snap(
    dragging: ObjectBounds,
    others: Sequence[ObjectBounds],
    rooms: Sequence[ObjectBounds],
    threshold: float,
) -> AlignmentSnapResult:
    """Snap a dragged object to nearby edges, centers and room centers.

    Each axis is handled independently: the dragged object's near edge,
    center and far edge are compared with the edges and centers of every
    other object and with the center of every room. The closest target
    strictly within ``threshold`` wins; on equal distances the first
    candidate found is kept.

    Args:
        dragging: Bounds of the object being dragged, at its raw position.
        others: Bounds of the other objects on the canvas.
        rooms: Bounds of the rooms; only their centers are snap targets.
        threshold: Maximum snap distance in pixels (exclusive).

    Returns:
        The snapped center position, the guides to display and which axes
        snapped.
    """
    x_targets: List[Tuple[float, GuideType, ObjectBounds]] = []
    y_targets: List[Tuple[float, GuideType, ObjectBounds]] = []

    for other in others:
        x_targets += [(other.left, "edge", other), (other.center_x, "center", other), (other.right, "edge", other)]
        y_targets += [(other.top, "edge", other), (other.center_y, "center", other), (other.bottom, "edge", other)]

    for room in rooms:
        x_targets.append((room.center_x, "room-center", room))
        y_targets.append((room.center_y, "room-center", room))

    offset_x = _best_offset((dragging.left, dragging.center_x, dragging.right), x_targets, threshold)
    offset_y = _best_offset((dragging.top, dragging.center_y, dragging.bottom), y_targets, threshold)

    snapped = get_bounds_from_position(
        dragging.id,
        dragging.center_x + (offset_x or 0.0),
        dragging.center_y + (offset_y or 0.0),
        dragging.right - dragging.left,
        dragging.bottom - dragging.top,
    )

    guides: List[AlignmentGuide] = []
    if offset_x is not None:
        for value, guide_type, bounds in x_targets:
            for drag_value in (snapped.left, snapped.center_x, snapped.right):
                if abs(drag_value - value) < GUIDE_MATCH_TOLERANCE:
                    span = (snapped.top, snapped.bottom, bounds.top, bounds.bottom)
                    guides.append(
                        AlignmentGuide(
                            "vertical", value, min(span) - GUIDE_PADDING, max(span) + GUIDE_PADDING, guide_type
                        )
                    )

    if offset_y is not None:
        for value, guide_type, bounds in y_targets:
            for drag_value in (snapped.top, snapped.center_y, snapped.bottom):
                if abs(drag_value - value) < GUIDE_MATCH_TOLERANCE:
                    span = (snapped.left, snapped.right, bounds.left, bounds.right)
                    guides.append(
                        AlignmentGuide(
                            "horizontal", value, min(span) - GUIDE_PADDING, max(span) + GUIDE_PADDING, guide_type
                        )
                    )

    return AlignmentSnapResult(
        snapped_position=Position(snapped.center_x, snapped.center_y),
        guides=tuple(guides),
        did_snap_x=offset_x is not None,
        did_snap_y=offset_y is not None,
    )


def guide_points(guide: AlignmentGuide) -> Tuple[float, float, float, float]:
    """Return the guide as an ``(x1, y1, x2, y2)`` segment."""
    if guide.orientation == "vertical":
        return (guide.position, guide.start, guide.position, guide.end)
    return (guide.start, guide.position, guide.end, guide.position)


@dataclass
class SnapLock:
    """Per-drag snap hysteresis.

    Once an axis snaps, it stays locked to the snapped coordinate until the
    raw pointer coordinate moves more than ``threshold * ESCAPE_MULTIPLIER``
    away from it.
    """

    threshold: float = ALIGNMENT_SNAP_THRESHOLD
    x: Optional[float] = field(default=None)
    y: Optional[float] = field(default=None)

    @property
    def escape_distance(self) -> float:
        return self.threshold * ESCAPE_MULTIPLIER

    def _axis(self, locked: Optional[float], raw: float, did_snap: bool, snapped: float):
        use = did_snap
        if locked is not None:
            if abs(raw - locked) > self.escape_distance:
                locked = None
                use = False
            else:
                use = True
        if use and did_snap:
            locked = snapped
        return use, locked

    def apply(
        self, raw_x: float, raw_y: float, result: AlignmentSnapResult
    ) -> Tuple[Position, Tuple[AlignmentGuide, ...]]:
        """Resolve the displayed position for one drag step.

        Args:
            raw_x: Unsnapped x of the dragged object.
            raw_y: Unsnapped y of the dragged object.
            result: Output of ``compute_alignment_snap`` for this step.

        Returns:
            The position to place the object at and the guides to show,
            restricted to the axes that are snapped.
        """
        use_x, self.x = self._axis(self.x, raw_x, result.did_snap_x, result.snapped_position.x)
        use_y, self.y = self._axis(self.y, raw_y, result.did_snap_y, result.snapped_position.y)

        if not (use_x or use_y):
            return Position(raw_x, raw_y), ()

        x = (self.x if self.x is not None else result.snapped_position.x) if use_x else raw_x
        y = (self.y if self.y is not None else result.snapped_position.y) if use_y else raw_y
        guides = tuple(
            g
            for g in result.guides
            if (g.orientation == "vertical" and use_x) or (g.orientation == "horizontal" and use_y)
        )
        return Position(x, y), guides

    def reset(self) -> None:
        self.x = None
        self.y = None
