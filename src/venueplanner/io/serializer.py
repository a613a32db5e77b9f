"""Text and JSON export of venue layouts."""

from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any, List

from ..core.model import VenueConfig
from ..core.units import to_unit


def _fmt(value: float) -> str:
    """Format a unit value the way the printed layout shows it ("12", "7.5")."""
    return str(int(value)) if value == int(value) else repr(value)


def serialize_layout(venue: VenueConfig) -> str:
    """Write a plain-text summary of the venue layout.

    Pixel coordinates are converted to the venue's unit and rounded to one
    decimal place.

    Args:
        venue: The venue to describe.

    Returns:
        A multi-line description with Room, Tables, Fixtures and Walls
        sections; empty sections are omitted.
    """
    u = venue.unit.value if isinstance(venue.unit, Enum) else venue.unit

    def length(px: float) -> str:
        return f"{_fmt(to_unit(px, u))}{u}"

    lines: List[str] = [f"Room: {_fmt(venue.room_width)}{u} x {_fmt(venue.room_length)}{u}"]

    if venue.tables:
        lines += ["", "Tables:"]
        for t in venue.tables:
            lines.append(
                f'- "{t.label}" ({t.shape}, {t.capacity} seats): '
                f"position ({length(t.position.x)}, {length(t.position.y)}), "
                f"size {length(t.width)} x {length(t.height)}"
            )

    if venue.fixtures:
        lines += ["", "Fixtures:"]
        for f in venue.fixtures:
            lines.append(
                f'- "{f.label}" ({f.type}): '
                f"position ({length(f.position.x)}, {length(f.position.y)}), "
                f"size {length(f.width)} x {length(f.height)}"
            )

    if venue.walls:
        lines += ["", "Walls:"]
        for w in venue.walls:
            lines.append(
                f"- {w.style} wall: ({length(w.start.x)}, {length(w.start.y)}) "
                f"to ({length(w.end.x)}, {length(w.end.y)})"
            )

    return "\n".join(lines)


def to_dict(value: Any) -> Any:
    """Convert model values (and lists of them) into JSON-ready data.

    Dataclasses become dicts, enums their values and tuples lists.
    """
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_dict(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [to_dict(v) for v in value]
    if isinstance(value, dict):
        return {k: to_dict(v) for k, v in value.items()}
    return value


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _camelize(data: Any) -> Any:
    if isinstance(data, dict):
        return {_camel(k): _camelize(v) for k, v in data.items() if k != "kind"}
    if isinstance(data, list):
        return [_camelize(v) for v in data]
    return data


def dump_scene(scene) -> dict:
    """Convert a scene into the JSON document read by ``load_scene``."""
    return {
        "venue": _camelize(to_dict(scene.venue)),
        "guests": [_camelize(to_dict(g)) for g in scene.guests],
        "constraints": [_camelize(to_dict(c)) for c in scene.constraints],
    }
