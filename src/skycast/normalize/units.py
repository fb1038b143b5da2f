"""Pure unit conversion and rounding helpers (no I/O).

Rounding policy for displayed values:
  - temperature, humidity, cloud cover, visibility, pressure: nearest integer
  - day-level average wind speed: one decimal place
  - other wind speeds pass through unrounded

Rounding is half-up (2.5 -> 3, -2.5 -> -2), not Python's banker's rounding.
"""

from __future__ import annotations

import math

HPA_TO_MMHG = 0.750062

COMPASS_POINTS = ("N", "NE", "E", "SE", "S", "SW", "W", "NW")


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round to ``ndigits`` decimal places with halves going up."""
    factor = 10**ndigits
    return math.floor(value * factor + 0.5) / factor


def round_int(value: float) -> int:
    """Round to the nearest integer, halves up."""
    return int(math.floor(value + 0.5))


def convert_pressure(hpa: float) -> float:
    """Convert hectopascals to millimeters of mercury (unrounded)."""
    return hpa * HPA_TO_MMHG


def wind_direction_label(degrees: float) -> str:
    """
    Eight-way compass label for a wind direction.

    Octant is ``round(degrees / 45) mod 8`` counting clockwise from north,
    so boundaries sit at 22.5, 67.5, ... and round up into the next octant.
    Degrees outside [0, 360) wrap around.
    """
    octant = round_int(degrees / 45) % 8
    return COMPASS_POINTS[octant]
