"""Grid snapping of pixel coordinates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ..core.model import LengthUnit, Position, VenueConfig
from ..core.units import pixels_per_unit, round_half_up


@dataclass(frozen=True)
class GridSnap:
    """Quantizes pixel coordinates to the active grid pitch.

    Attributes:
        snap_to_grid: Whether snapping is enabled.
        grid_size: Grid pitch in ``unit``. Must be positive; this is enforced
            by ``validate_venue_config``, not here.
        unit: Active length unit.
    """

    snap_to_grid: bool
    grid_size: float
    unit: Union[LengthUnit, str] = LengthUnit.FEET

    @classmethod
    def from_venue(cls, venue: VenueConfig) -> "GridSnap":
        return cls(
            snap_to_grid=venue.snap_to_grid,
            grid_size=venue.grid_size,
            unit=venue.unit,
        )

    @property
    def pixels_per_unit(self) -> float:
        return pixels_per_unit(self.unit)

    @property
    def grid_pixels(self) -> float:
        return self.grid_size * self.pixels_per_unit

    def snap(self, value: float) -> float:
        """Snap one coordinate to the nearest grid line.

        Identity when snapping is disabled. Halfway values snap toward
        positive infinity.
        """
        if not self.snap_to_grid:
            return value
        grid = self.grid_pixels
        return round_half_up(value / grid) * grid

    def snap_position(self, x: float, y: float) -> Position:
        """Snap both axes independently."""
        return Position(self.snap(x), self.snap(y))
