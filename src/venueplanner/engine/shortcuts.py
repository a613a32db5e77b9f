"""Keyboard shortcuts for the venue canvas."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.model import ToolMode
from .scene import SceneStore
from .wall_drawing import WallDrawingMachine


@dataclass
class Selection:
    """Currently selected canvas element.

    Attributes:
        element_id: ID of the selected element, if any.
        element_type: One of "table", "fixture", "wall" or "room".
    """

    element_id: Optional[str] = None
    element_type: Optional[str] = None

    def clear(self) -> None:
        self.element_id = None
        self.element_type = None


def handle_key(key: str, scene: SceneStore, machine: WallDrawingMachine, selection: Selection) -> bool:
    """Dispatch a key press on the venue canvas.

    Args:
        key: Key name as reported by the UI ("Escape", "Delete", "w", ...).
        scene: Scene store receiving delete commands.
        machine: Wall drawing machine to cancel on tool changes.
        selection: Current selection, cleared on Escape and after deletes.

    Returns:
        True if the key was handled.
    """
    if key == "Escape":
        if scene.tool_mode == ToolMode.DRAW_WALL:
            machine.set_tool_mode(ToolMode.SELECT)
        else:
            selection.clear()
        return True

    if key in ("Delete", "Backspace"):
        deleters = {
            "table": scene.delete_table,
            "fixture": scene.delete_fixture,
            "wall": scene.delete_wall,
        }
        delete = deleters.get(selection.element_type)
        if selection.element_id is None or delete is None:
            return False
        delete(selection.element_id)
        selection.clear()
        return True

    if key in ("w", "W"):
        toggled = ToolMode.SELECT if scene.tool_mode == ToolMode.DRAW_WALL else ToolMode.DRAW_WALL
        machine.set_tool_mode(toggled)
        return True

    if key in ("v", "V"):
        machine.set_tool_mode(ToolMode.SELECT)
        return True

    return False
