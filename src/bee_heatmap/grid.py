"""Uniform lat/lon sampling grid around a center point (pure, no I/O)."""

from __future__ import annotations

from bee_heatmap.errors import InvalidResolution
from bee_heatmap.schemas import BoundingBox, Coordinate, GridPoint

DEFAULT_BUFFER_DEG = 0.5
DEFAULT_RESOLUTION = 15


def generate_grid(
    center: Coordinate,
    buffer: float = DEFAULT_BUFFER_DEG,
    resolution: int = DEFAULT_RESOLUTION,
) -> list[GridPoint]:
    """Sample ``resolution x resolution`` points over ``center ± buffer``.

    Points are ordered row-major: latitude row ``i`` outer, longitude column
    ``j`` inner. Callers rely on this order to line temperatures up with
    grid points.

    Args:
        center: Grid center.
        buffer: Half-width of the box in degrees.
        resolution: Points per axis, at least 2.

    Returns:
        ``resolution**2`` grid points; the first is (south, west) and the
        last is (north, east).

    Raises:
        InvalidResolution: If ``resolution < 2``.
    """
    return grid_for_bbox(BoundingBox.around(center, buffer), resolution)


def grid_for_bbox(bbox: BoundingBox, resolution: int = DEFAULT_RESOLUTION) -> list[GridPoint]:
    """Sample a ``resolution x resolution`` grid over an existing box."""
    if resolution < 2:
        raise InvalidResolution(f"grid resolution must be >= 2, got {resolution}")

    last = resolution - 1
    lat_span = bbox.north - bbox.south
    lon_span = bbox.east - bbox.west

    # The final row/column is pinned to the box edge so corners match exactly.
    lats = [bbox.south + (i * lat_span) / last for i in range(last)] + [bbox.north]
    lons = [bbox.west + (j * lon_span) / last for j in range(last)] + [bbox.east]

    return [
        GridPoint(coordinate=Coordinate(lat=lat, lon=lon), i=i, j=j)
        for i, lat in enumerate(lats)
        for j, lon in enumerate(lons)
    ]
