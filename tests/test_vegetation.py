"""
Tests for point-in-polygon vegetation classification.
"""

from __future__ import annotations

from bee_heatmap.schemas import Coordinate, Polygon
from bee_heatmap.vegetation import is_vegetated, point_in_polygon

# Unit square as (lon, lat), closed ring
SQUARE = ((0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0), (0.0, 0.0))

# Concave "C" shape opening east
C_SHAPE = (
    (0.0, 0.0),
    (3.0, 0.0),
    (3.0, 1.0),
    (1.0, 1.0),
    (1.0, 2.0),
    (3.0, 2.0),
    (3.0, 3.0),
    (0.0, 3.0),
)


class TestPointInPolygon:
    """Test the ray-casting containment test."""

    def test_inside(self) -> None:
        assert point_in_polygon(0.5, 0.5, SQUARE)

    def test_outside(self) -> None:
        assert not point_in_polygon(1.5, 0.5, SQUARE)
        assert not point_in_polygon(0.5, -0.1, SQUARE)

    def test_open_ring(self) -> None:
        """Ring without the repeated closing vertex works the same."""
        assert point_in_polygon(0.5, 0.5, SQUARE[:-1])

    def test_concave(self) -> None:
        assert point_in_polygon(0.5, 1.5, C_SHAPE)
        assert not point_in_polygon(2.0, 1.5, C_SHAPE)
        assert point_in_polygon(2.0, 2.5, C_SHAPE)

    def test_degenerate_ring(self) -> None:
        assert not point_in_polygon(0.0, 0.0, ((0.0, 0.0), (1.0, 1.0)))
        assert not point_in_polygon(0.0, 0.0, ())

    def test_boundary_half_open(self) -> None:
        """West and south edges count as inside, east and north as outside."""
        assert point_in_polygon(0.0, 0.5, SQUARE)
        assert point_in_polygon(0.5, 0.0, SQUARE)
        assert not point_in_polygon(1.0, 0.5, SQUARE)
        assert not point_in_polygon(0.5, 1.0, SQUARE)


class TestIsVegetated:
    """Test classification against a polygon set."""

    def test_empty_set(self) -> None:
        assert not is_vegetated(Coordinate(lat=0.5, lon=0.5), [])

    def test_any_polygon(self) -> None:
        far = Polygon(ring=((10.0, 10.0), (11.0, 10.0), (11.0, 11.0)))
        square = Polygon(ring=SQUARE, landcover="forest")

        assert is_vegetated(Coordinate(lat=0.5, lon=0.5), [far, square])
        assert not is_vegetated(Coordinate(lat=5.0, lon=5.0), [far, square])

    def test_short_circuits(self) -> None:
        """Stops at the first containing polygon."""
        seen: list[str] = []

        def polygons():
            for name in ("first", "second"):
                seen.append(name)
                yield Polygon(ring=SQUARE, landcover=name)

        assert is_vegetated(Coordinate(lat=0.5, lon=0.5), polygons())
        assert seen == ["first"]

    def test_lon_lat_axes(self) -> None:
        """Rings are (lon, lat); a tall thin box must not be read transposed."""
        tall = Polygon(ring=((0.0, 0.0), (1.0, 0.0), (1.0, 10.0), (0.0, 10.0)))
        assert is_vegetated(Coordinate(lat=5.0, lon=0.5), [tall])
        assert not is_vegetated(Coordinate(lat=0.5, lon=5.0), [tall])
