"""Bee-activity suitability scoring (pure functions, no I/O, no clock reads).

    weight = vegetation_factor * temperature_factor * seasonality_factor

Every factor lies in [0, 1], so the weight does too. A missing temperature
scores 0.0.
"""

from __future__ import annotations

from datetime import date

from bee_heatmap.reference.seasons import NORTHERN_SEASONALITY, SOUTHERN_SEASONALITY

VEGETATED = 1.0
# Unvegetated points keep a residual, non-zero plausibility.
UNVEGETATED = 0.05

# Temperature bands (Celsius)
OPTIMAL_RANGE = (20.0, 32.0)  # inclusive
TOLERABLE_RANGE = (15.0, 38.0)  # exclusive


def vegetation_factor(has_vegetation: bool) -> float:
    return VEGETATED if has_vegetation else UNVEGETATED


def temperature_factor(temperature: float) -> float:
    """1.0 inside [20, 32] C, 0.5 inside (15, 38) C, else 0.0."""
    low, high = OPTIMAL_RANGE
    if low <= temperature <= high:
        return 1.0
    low, high = TOLERABLE_RANGE
    if low < temperature < high:
        return 0.5
    return 0.0


def seasonality_factor(month: int, latitude: float) -> float:
    """Seasonal activity multiplier.

    Args:
        month: Month index, 0 (January) to 11 (December).
        latitude: Points with ``latitude > 0`` use the northern table; the
            equator and below use the southern one.
    """
    if not 0 <= month <= 11:
        raise ValueError(f"month must be 0-11, got {month}")
    table = NORTHERN_SEASONALITY if latitude > 0 else SOUTHERN_SEASONALITY
    return table[month]


def score(
    temperature: float | None,
    has_vegetation: bool,
    latitude: float,
    month: int,
) -> float:
    """
    Combine vegetation, temperature and seasonality into a weight in [0, 1].

    Args:
        temperature: Current temperature in Celsius, or None if unknown.
        has_vegetation: Whether the point lies inside a land-cover polygon.
        latitude: Point latitude, selects the hemisphere.
        month: Month index (0 = January), passed in so scoring never reads the clock.

    Returns:
        Suitability weight; 0.0 when the temperature is unknown.
    """
    if temperature is None:
        return 0.0
    return (
        vegetation_factor(has_vegetation)
        * temperature_factor(temperature)
        * seasonality_factor(month, latitude)
    )


def current_month(today: date | None = None) -> int:
    """Month index (0 = January) of ``today`` (defaults to the local date)."""
    return (today or date.today()).month - 1
