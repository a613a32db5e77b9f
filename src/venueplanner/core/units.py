"""Conversion between scene pixels and real-world length units.

The pixels-per-unit ratio is fixed per unit (15 px/ft, 30 px/m) so stored
geometry does not depend on the zoom level it was drawn at.
"""

from __future__ import annotations

import math
from typing import Union

from ..config import PIXELS_PER_FOOT, PIXELS_PER_METER
from .model import LengthUnit

_PIXELS_PER_UNIT = {
    LengthUnit.FEET: PIXELS_PER_FOOT,
    LengthUnit.METERS: PIXELS_PER_METER,
}


def _check_finite(value: float, name: str) -> None:
    if not math.isfinite(value):
        raise ValueError(f"{name} must be a finite number, got {value!r}")


def round_half_up(value: float) -> float:
    """Round to the nearest integer, halves toward positive infinity.

    Unlike the built-in ``round``, 2.5 rounds to 3 and -2.5 rounds to -2.
    The fractional part is compared directly, so 0.49999999999999994
    rounds to 0.
    """
    whole = math.floor(value)
    return float(whole + 1 if value - whole >= 0.5 else whole)


def pixels_per_unit(unit: Union[LengthUnit, str]) -> float:
    """Return the fixed pixel scale of a length unit.

    Args:
        unit: A ``LengthUnit`` or its string value ("ft" or "m").

    Returns:
        Number of pixels per one unit.

    Raises:
        ValueError: If the unit is not recognized.
    """
    return _PIXELS_PER_UNIT[LengthUnit(unit)]


def to_pixels(value: float, unit: Union[LengthUnit, str]) -> float:
    """Convert a length in ``unit`` to pixels."""
    _check_finite(value, "value")
    return value * pixels_per_unit(unit)


def to_unit(pixels: float, unit: Union[LengthUnit, str]) -> float:
    """Convert a pixel length to ``unit``, rounded to one decimal place."""
    _check_finite(pixels, "pixels")
    return round_half_up(pixels / pixels_per_unit(unit) * 10) / 10
