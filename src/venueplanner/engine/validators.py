"""Seating and layout validation.

This module checks guest-pairing constraints against current table
assignments and runs simple consistency checks on a venue. Every function is
pure: it reads the scene values passed in and reports problems without
modifying anything.
"""

from __future__ import annotations

import math
from typing import List, Sequence, Tuple

from ..config import PRIMARY_ROOM_ID
from ..core.model import (
    Constraint,
    ConstraintType,
    ConstraintViolation,
    Guest,
    Table,
    VenueConfig,
)
from ..core.units import pixels_per_unit
from ..geom.rooms import get_all_room_rects, get_room_rect, is_out_of_bounds

UNKNOWN_TABLE_LABEL = "unknown"


class InvalidVenueConfig(ValueError):
    """Raised when a venue configuration cannot be used for geometry."""

    pass


def validate_constraints(
    constraints: Sequence[Constraint], guests: Sequence[Guest], tables: Sequence[Table]
) -> List[ConstraintViolation]:
    """Check seating constraints against the current table assignments.

    A constraint is skipped when either guest is missing or has no table:
    an unseated guest cannot break a seating rule.

    Args:
        constraints: Constraints to check.
        guests: All guests.
        tables: All tables, used for labels in messages.

    Returns:
        Violations in the order of ``constraints``.
    """
    guest_map = {g.id: g for g in guests}
    table_labels = {t.id: t.label for t in tables}
    violations = []

    for constraint in constraints:
        guest_a_id, guest_b_id = constraint.guest_ids
        guest_a = guest_map.get(guest_a_id)
        guest_b = guest_map.get(guest_b_id)

        if guest_a is None or guest_b is None:
            continue
        if not guest_a.table_id or not guest_b.table_id:
            continue

        same_table = guest_a.table_id == guest_b.table_id
        constraint_type = ConstraintType(constraint.type)

        if constraint_type == ConstraintType.MUST_SIT_TOGETHER and not same_table:
            label_a = table_labels.get(guest_a.table_id, UNKNOWN_TABLE_LABEL)
            label_b = table_labels.get(guest_b.table_id, UNKNOWN_TABLE_LABEL)
            violations.append(
                ConstraintViolation(
                    constraint_id=constraint.id,
                    table_id=guest_a.table_id,
                    message=(
                        f"{guest_a.name} and {guest_b.name} must sit together "
                        f"but are at {label_a} and {label_b}"
                    ),
                )
            )

        elif constraint_type == ConstraintType.MUST_NOT_SIT_TOGETHER and same_table:
            label = table_labels.get(guest_a.table_id, UNKNOWN_TABLE_LABEL)
            violations.append(
                ConstraintViolation(
                    constraint_id=constraint.id,
                    table_id=guest_a.table_id,
                    message=(
                        f"{guest_a.name} and {guest_b.name} must not sit together "
                        f"but are both at {label}"
                    ),
                )
            )

    return violations


def find_assignment_mismatches(
    guests: Sequence[Guest], tables: Sequence[Table]
) -> List[Tuple[str, str]]:
    """Find guest/table links that are not mirrored on the other side.

    Returns:
        ``(guest_id, table_id)`` pairs where the guest points at a table that
        does not list it, or a table lists a guest that does not point back.
    """
    guest_map = {g.id: g for g in guests}
    table_map = {t.id: t for t in tables}
    mismatches = []

    for guest in guests:
        if not guest.table_id:
            continue
        table = table_map.get(guest.table_id)
        if table is None or guest.id not in table.assigned_guest_ids:
            mismatches.append((guest.id, guest.table_id))

    for table in tables:
        for guest_id in table.assigned_guest_ids:
            guest = guest_map.get(guest_id)
            if guest is None or guest.table_id != table.id:
                mismatches.append((guest_id, table.id))

    return mismatches


def find_out_of_bounds_tables(venue: VenueConfig) -> List[str]:
    """Return IDs of tables that do not fit inside their room.

    Untagged tables, and tables tagged with a room that no longer exists,
    are checked against the primary room.
    """
    rects = get_all_room_rects(venue, pixels_per_unit(venue.unit))
    primary = rects[0]
    out = []
    for table in venue.tables:
        rect = get_room_rect(rects, table.room_id) if table.room_id else None
        if is_out_of_bounds(table, rect or primary):
            out.append(table.id)
    return out


def validate_venue_config(venue: VenueConfig) -> bool:
    """Validate the numeric settings geometry and snapping rely on.

    Args:
        venue: The venue to validate.

    Returns:
        True if the configuration is valid.

    Raises:
        InvalidVenueConfig: If the grid pitch or a room dimension is not a
            positive finite number.
    """
    checks = [("grid_size", venue.grid_size), ("room_width", venue.room_width), ("room_length", venue.room_length)]
    for room in venue.rooms:
        checks += [(f"rooms[{room.id}].width", room.width), (f"rooms[{room.id}].height", room.height)]

    for name, value in checks:
        if not math.isfinite(value) or value <= 0:
            raise InvalidVenueConfig(f"{name} must be a positive number, got {value!r}")

    if any(r.id == PRIMARY_ROOM_ID for r in venue.rooms):
        raise InvalidVenueConfig(f"Room ID '{PRIMARY_ROOM_ID}' is reserved for the primary room")

    return True
