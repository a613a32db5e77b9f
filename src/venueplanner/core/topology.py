"""Room attachment topology.

Rooms are attached to an edge of a parent room. This module exposes the
attachment relationships as a directed graph rooted at the primary room.
"""

from __future__ import annotations

from typing import List

import networkx as nx

from ..config import PRIMARY_ROOM_ID, PRIMARY_ROOM_LABEL
from .model import VenueConfig


def build_room_graph(venue: VenueConfig) -> nx.DiGraph:
    """Build a graph of room attachments.

    Creates a NetworkX directed graph whose nodes are room IDs (the primary
    room included) and whose edges point from a parent room to each room
    attached to it. Rooms without a parent, or whose parent no longer
    exists, hang off the primary room.

    Args:
        venue: Venue configuration containing the explicit rooms.

    Returns:
        NetworkX DiGraph with ``label`` node attributes and ``edge`` edge
        attributes.
    """
    G = nx.DiGraph()
    G.add_node(PRIMARY_ROOM_ID, label=PRIMARY_ROOM_LABEL)

    for room in venue.rooms:
        G.add_node(room.id, label=room.label)

    for room in venue.rooms:
        parent = room.parent_room_id
        if parent is None or parent not in G or parent == room.id:
            parent = PRIMARY_ROOM_ID
        G.add_edge(parent, room.id, edge=room.attach_edge)

    return G


def attached_rooms(venue: VenueConfig, room_id: str) -> List[str]:
    """Return the IDs of every room attached, directly or not, to ``room_id``.

    Args:
        venue: Venue configuration containing the explicit rooms.
        room_id: ID of the room to start from.

    Returns:
        Room IDs in the order the rooms appear in the venue.
    """
    G = build_room_graph(venue)
    if room_id not in G:
        return []

    descendants = nx.descendants(G, room_id)
    return [room.id for room in venue.rooms if room.id in descendants]
