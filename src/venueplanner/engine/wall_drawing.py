"""Wall drawing interaction.

Turns a pointer-drag gesture into a committed wall. The machine has two
states, ``idle`` and ``drawing``; pointer-up either commits the wall through
the scene store or discards it, and ``cancel`` discards from any state.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from ..config import MIN_WALL_LENGTH, WALL_LABEL, WALL_STYLE, WALL_THICKNESS
from ..core.model import Position, ToolMode, WallDraft
from ..geom.snap import GridSnap
from .scene import SceneStore

LOGGER = logging.getLogger(__name__)


class DrawingState(str, Enum):
    IDLE = "idle"
    DRAWING = "drawing"


@dataclass(frozen=True)
class DrawingWall:
    """The in-progress wall.

    Attributes:
        start: Grid-snapped press point.
        current_end: Grid-snapped position of the latest pointer move.
    """

    start: Position
    current_end: Position

    @property
    def length(self) -> float:
        return math.hypot(self.current_end.x - self.start.x, self.current_end.y - self.start.y)


class WallDrawingMachine:
    """State machine for drawing walls with the pointer.

    Snap settings and the tool mode are read from the scene on every event.
    Leaving the draw-wall tool cancels the wall in progress, whether the
    switch goes through ``set_tool_mode`` or directly through the scene.
    Outside the draw-wall tool the pointer handlers only clear state.

    Attributes:
        scene: Handle to the scene store walls are committed to.
        drawing_wall: The in-progress wall, or None when idle.
    """

    def __init__(self, scene: SceneStore):
        self.scene = scene
        self.drawing_wall: Optional[DrawingWall] = None
        scene.on_tool_change(self._on_tool_change)

    @property
    def state(self) -> DrawingState:
        if self.drawing_wall is None or not self.is_active:
            return DrawingState.IDLE
        return DrawingState.DRAWING

    @property
    def is_active(self) -> bool:
        """Whether the draw-wall tool is selected."""
        return self.scene.tool_mode == ToolMode.DRAW_WALL

    def _snap(self, x: float, y: float) -> Position:
        return GridSnap.from_venue(self.scene.venue).snap_position(x, y)

    def pointer_down(self, x: float, y: float) -> None:
        """Start a wall at the snapped press point."""
        if not self.is_active:
            self.cancel()
            return
        snapped = self._snap(x, y)
        self.drawing_wall = DrawingWall(start=snapped, current_end=snapped)

    def pointer_move(self, x: float, y: float) -> None:
        """Move the free end of the in-progress wall to the snapped pointer."""
        if not self.is_active:
            self.cancel()
            return
        if self.drawing_wall is None:
            return
        self.drawing_wall = replace(self.drawing_wall, current_end=self._snap(x, y))

    def pointer_up(self) -> Optional[str]:
        """Finish the gesture.

        Returns:
            ID of the committed wall, or None if nothing was committed
            (no gesture in progress, or the wall was shorter than
            ``MIN_WALL_LENGTH`` and discarded).
        """
        if not self.is_active:
            self.cancel()
            return None
        if self.drawing_wall is None:
            return None

        drawing = self.drawing_wall
        self.drawing_wall = None

        if drawing.length < MIN_WALL_LENGTH:
            LOGGER.debug("Discarded wall of length %.2f", drawing.length)
            return None

        wall_id = self.scene.add_wall(
            WallDraft(
                label=WALL_LABEL,
                start=drawing.start,
                end=drawing.current_end,
                thickness=WALL_THICKNESS,
                style=WALL_STYLE,
                rotation=0.0,
            )
        )
        LOGGER.debug("Committed wall %s of length %.2f", wall_id, drawing.length)
        return wall_id

    def cancel(self) -> None:
        """Drop the in-progress wall without committing it."""
        if self.drawing_wall is not None:
            LOGGER.debug("Cancelled wall drawing")
        self.drawing_wall = None

    def _on_tool_change(self, mode: ToolMode) -> None:
        if mode != ToolMode.DRAW_WALL:
            self.cancel()

    def set_tool_mode(self, mode: ToolMode) -> None:
        """Switch the scene's tool, cancelling any wall in progress when
        leaving the draw-wall tool."""
        mode = ToolMode(mode)
        if mode != ToolMode.DRAW_WALL:
            self.cancel()
        self.scene.set_tool_mode(mode)
