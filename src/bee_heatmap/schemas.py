"""
Domain models for the bee heatmap.

Pydantic models for data from external APIs and internal processing.
These define the canonical schema - datasources normalize API responses to these.
Every model is request-scoped; nothing here is persisted.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

# =============================================================================
# Pipeline options
# =============================================================================


class FilterPolicy(StrEnum):
    """Which scored points survive to the response."""

    BASIC = "basic"  # every grid point, unconditionally
    EXTENDED = "extended"  # vegetated points at or above the minimum weight


class TemperatureMode(StrEnum):
    """How grid temperatures are requested from Open-Meteo."""

    BATCHED = "batched"
    SEQUENTIAL = "sequential"


# =============================================================================
# Geographic
# =============================================================================


class Coordinate(BaseModel):
    """Geographic point."""

    model_config = ConfigDict(frozen=True)

    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)


class BoundingBox(BaseModel):
    """Geographic bounding box for spatial queries."""

    model_config = ConfigDict(frozen=True)

    south: float = Field(..., ge=-90, le=90)
    west: float = Field(..., ge=-180, le=180)
    north: float = Field(..., ge=-90, le=90)
    east: float = Field(..., ge=-180, le=180)

    @model_validator(mode="after")
    def _check_order(self) -> BoundingBox:
        if not self.south < self.north:
            raise ValueError(f"south ({self.south}) must be below north ({self.north})")
        if not self.west < self.east:
            raise ValueError(f"west ({self.west}) must be below east ({self.east})")
        return self

    @classmethod
    def around(cls, center: Coordinate, buffer: float = 0.5) -> BoundingBox:
        """Box spanning ``center ± buffer`` degrees on both axes."""
        return cls(
            south=center.lat - buffer,
            west=center.lon - buffer,
            north=center.lat + buffer,
            east=center.lon + buffer,
        )

    def contains(self, lat: float, lon: float) -> bool:
        """Inclusive containment on every edge."""
        return self.south <= lat <= self.north and self.west <= lon <= self.east


class Polygon(BaseModel):
    """Closed land-cover ring as ``(lon, lat)`` pairs, in source order."""

    model_config = ConfigDict(frozen=True)

    ring: tuple[tuple[float, float], ...]
    landcover: str | None = Field(default=None, description="OSM tag value, e.g. 'forest'")


class GridPoint(BaseModel):
    """One sample of the heatmap grid; ``i`` is the row (lat), ``j`` the column (lon)."""

    model_config = ConfigDict(frozen=True)

    coordinate: Coordinate
    i: int = Field(..., ge=0)
    j: int = Field(..., ge=0)

    @property
    def lat(self) -> float:
        return self.coordinate.lat

    @property
    def lon(self) -> float:
        return self.coordinate.lon


# =============================================================================
# Observations
# =============================================================================


class Observation(BaseModel):
    """A GLOBE citizen-science measurement site."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Source feature ID")
    site_name: str | None = None
    organization_name: str | None = None
    country_name: str | None = None
    elevation: float | None = None
    coordinate: Coordinate


# =============================================================================
# Output
# =============================================================================


class ScoredPoint(BaseModel):
    """A grid point with its suitability weight. Never mutated after creation."""

    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float
    weight: float = Field(..., ge=0, le=1)
    temperature: float | None = None
    observation: Observation | None = None

    def as_json(self) -> dict[str, Any]:
        """Boundary representation: ``{latitude, longitude, weight, temperature, observation}``."""
        return self.model_dump(mode="json")
