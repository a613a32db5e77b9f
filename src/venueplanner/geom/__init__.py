"""Geometry utilities for venue layouts.

This module provides room composition, grid snapping and alignment guide
handling, all in scene pixel space.
"""

from .alignment import AlignmentGuide, SnapLock, compute_alignment_snap, guide_points
from .rooms import (
    compute_new_room_position,
    find_room_overlaps,
    get_all_room_rects,
    get_room_at_point,
    get_room_center,
    get_venue_bounding_box,
    is_out_of_bounds,
)
from .snap import GridSnap

__all__ = [
    "AlignmentGuide",
    "GridSnap",
    "SnapLock",
    "compute_alignment_snap",
    "compute_new_room_position",
    "find_room_overlaps",
    "get_all_room_rects",
    "get_room_at_point",
    "get_room_center",
    "get_venue_bounding_box",
    "guide_points",
    "is_out_of_bounds",
]
