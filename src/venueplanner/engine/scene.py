"""Scene store interface and an in-memory implementation.

The layout engine never owns scene data. It reads the current venue through
a ``SceneStore`` handle and sends mutations to it as commands. ``InMemoryScene``
is a plain store used by the command line tool and the tests.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from typing import Callable, List, Optional, Protocol, Sequence

from ..config import DEFAULT_TOOL_MODE
from ..core.model import (
    Constraint,
    Guest,
    Room,
    ToolMode,
    VenueConfig,
    Wall,
    WallDraft,
)
from ..core.units import pixels_per_unit
from ..geom.rooms import compute_new_room_position, get_all_room_rects, get_room_rect

LOGGER = logging.getLogger(__name__)


class SceneStore(Protocol):
    """Protocol for the externally owned scene.

    All mutations go through these commands; the store serializes writes.
    """

    @property
    def venue(self) -> VenueConfig:
        """Current venue configuration."""
        ...

    @property
    def tool_mode(self) -> ToolMode:
        """Active canvas tool."""
        ...

    def set_tool_mode(self, mode: ToolMode) -> None:
        ...

    def on_tool_change(self, callback: Callable[[ToolMode], None]) -> None:
        """Register a callback run with the new mode on every tool change."""
        ...

    def add_wall(self, draft: WallDraft) -> str:
        """Add a wall and return its new ID."""
        ...

    def update_table(self, table_id: str, **changes) -> None:
        ...

    def update_fixture(self, fixture_id: str, **changes) -> None:
        ...

    def delete_table(self, table_id: str) -> None:
        ...

    def delete_fixture(self, fixture_id: str) -> None:
        ...

    def delete_wall(self, wall_id: str) -> None:
        ...


def create_id() -> str:
    return uuid.uuid4().hex[:12]


class InMemoryScene:
    """Scene store keeping the venue, guests and constraints in memory."""

    def __init__(
        self,
        venue: VenueConfig,
        guests: Sequence[Guest] = (),
        constraints: Sequence[Constraint] = (),
        tool_mode: ToolMode = ToolMode(DEFAULT_TOOL_MODE),
    ):
        self._venue = venue
        self.guests: List[Guest] = list(guests)
        self.constraints: List[Constraint] = list(constraints)
        self._tool_mode = ToolMode(tool_mode)
        self._tool_listeners: List[Callable[[ToolMode], None]] = []

    @property
    def venue(self) -> VenueConfig:
        return self._venue

    @property
    def tool_mode(self) -> ToolMode:
        return self._tool_mode

    def set_tool_mode(self, mode: ToolMode) -> None:
        self._tool_mode = ToolMode(mode)
        for callback in self._tool_listeners:
            callback(self._tool_mode)

    def on_tool_change(self, callback: Callable[[ToolMode], None]) -> None:
        self._tool_listeners.append(callback)

    def update_venue(self, **changes) -> None:
        self._venue = replace(self._venue, **changes)

    # Walls

    def add_wall(self, draft: WallDraft) -> str:
        wall_id = create_id()
        self.update_venue(walls=self._venue.walls + (Wall.from_draft(wall_id, draft),))
        LOGGER.debug("Added wall %s", wall_id)
        return wall_id

    def delete_wall(self, wall_id: str) -> None:
        self.update_venue(walls=tuple(w for w in self._venue.walls if w.id != wall_id))

    # Fixtures

    def update_fixture(self, fixture_id: str, **changes) -> None:
        self.update_venue(
            fixtures=tuple(replace(f, **changes) if f.id == fixture_id else f for f in self._venue.fixtures)
        )

    def delete_fixture(self, fixture_id: str) -> None:
        self.update_venue(fixtures=tuple(f for f in self._venue.fixtures if f.id != fixture_id))

    # Tables and seating

    def update_table(self, table_id: str, **changes) -> None:
        self.update_venue(tables=tuple(replace(t, **changes) if t.id == table_id else t for t in self._venue.tables))

    def delete_table(self, table_id: str) -> None:
        """Delete a table and unassign every guest seated at it."""
        self.guests = [
            replace(g, table_id=None, seat_index=None) if g.table_id == table_id else g
            for g in self.guests
        ]
        self.update_venue(tables=tuple(t for t in self._venue.tables if t.id != table_id))

    def assign_guest(self, guest_id: str, table_id: str, seat_index: Optional[int] = None) -> None:
        """Seat a guest, keeping both sides of the guest/table link in sync.

        Unknown guest or table IDs are ignored.
        """
        guest = next((g for g in self.guests if g.id == guest_id), None)
        if guest is None or all(t.id != table_id for t in self._venue.tables):
            return

        tables = []
        for t in self._venue.tables:
            ids = tuple(i for i in t.assigned_guest_ids if i != guest_id)
            if t.id == table_id:
                ids += (guest_id,)
            tables.append(replace(t, assigned_guest_ids=ids))
        self.update_venue(tables=tuple(tables))

        self.guests = [
            replace(g, table_id=table_id, seat_index=seat_index) if g.id == guest_id else g
            for g in self.guests
        ]

    def unassign_guest(self, guest_id: str) -> None:
        self.update_venue(
            tables=tuple(
                replace(t, assigned_guest_ids=tuple(i for i in t.assigned_guest_ids if i != guest_id))
                for t in self._venue.tables
            )
        )
        self.guests = [
            replace(g, table_id=None, seat_index=None) if g.id == guest_id else g for g in self.guests
        ]

    # Rooms

    def attach_room(
        self,
        label: str,
        width: float,
        height: float,
        parent_room_id: str,
        edge: str,
        color: Optional[str] = None,
    ) -> str:
        """Add a room centered flush against an edge of an existing room.

        Args:
            label: Name of the new room.
            width: Width in the venue's unit.
            height: Height in the venue's unit.
            parent_room_id: ID of the room to attach to (the primary room included).
            edge: Edge of the parent to attach to.
            color: Optional fill color.

        Returns:
            ID of the new room.

        Raises:
            ValueError: If the parent room does not exist or the edge is invalid.
        """
        px = pixels_per_unit(self._venue.unit)
        parent = get_room_rect(get_all_room_rects(self._venue, px), parent_room_id)
        if parent is None:
            raise ValueError(f"Room '{parent_room_id}' does not exist")

        position = compute_new_room_position(parent, edge, width * px, height * px)
        room = Room(
            id=create_id(),
            label=label,
            position=position,
            width=width,
            height=height,
            color=color,
            parent_room_id=parent_room_id,
            attach_edge=edge,
        )
        self.update_venue(rooms=self._venue.rooms + (room,))
        LOGGER.debug("Attached room %s to the %s edge of %s", room.id, edge, parent_room_id)
        return room.id
