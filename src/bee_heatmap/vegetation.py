"""
Point-in-polygon vegetation classification.

Longitude/latitude are treated as planar Cartesian coordinates. That is an
approximation, fine at the ~0.5 degree scale of a heatmap box but not across
large regions or the antimeridian.

Boundary rule (crossing number with half-open edges): a ray is cast towards
+longitude and an edge counts when the point's latitude lies in
``[min(y1, y2), max(y1, y2))`` and the crossing is strictly east of the
point. For an axis-aligned rectangle the west and south edges are inside,
the east and north edges are outside.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from bee_heatmap.schemas import Coordinate, Polygon


def point_in_polygon(lon: float, lat: float, ring: Sequence[tuple[float, float]]) -> bool:
    """Return True if ``(lon, lat)`` lies inside ``ring`` (a list of ``(lon, lat)``).

    The ring may or may not repeat its first vertex at the end.
    """
    n = len(ring)
    if n < 3:
        return False

    inside = False
    xj, yj = ring[-1]
    for xi, yi in ring:
        if (yi > lat) != (yj > lat):
            x_cross = (xj - xi) * (lat - yi) / (yj - yi) + xi
            if lon < x_cross:
                inside = not inside
        xj, yj = xi, yi
    return inside


def is_vegetated(point: Coordinate, polygons: Iterable[Polygon]) -> bool:
    """True if ``point`` lies inside any polygon; stops at the first match."""
    return any(point_in_polygon(point.lon, point.lat, polygon.ring) for polygon in polygons)
