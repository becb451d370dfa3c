"""Attach GLOBE ground observations to scored grid points by proximity."""

from __future__ import annotations

from collections.abc import Iterable

from bee_heatmap.schemas import Coordinate, Observation

# ~100 m at mid latitudes
DEFAULT_TOLERANCE_DEG = 0.001


def attach_nearest(
    point: Coordinate,
    observations: Iterable[Observation],
    tolerance: float = DEFAULT_TOLERANCE_DEG,
) -> Observation | None:
    """Return the first observation within ``tolerance`` degrees on both axes.

    Observations are checked in the order given, so when several qualify the
    earliest one wins. None means nothing is close, which is the common case.
    """
    for obs in observations:
        if (
            abs(obs.coordinate.lat - point.lat) < tolerance
            and abs(obs.coordinate.lon - point.lon) < tolerance
        ):
            return obs
    return None
