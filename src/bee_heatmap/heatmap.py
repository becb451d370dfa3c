"""
Heatmap assembly: grid → {vegetation, temperature, observations} → score → filter.

``compute_heatmap`` is the one operation the HTTP layer and the CLI call.
It fetches the three datasets concurrently, then hands them to the pure
``build_heatmap`` step.

Failure policy by source:
  - vegetation: any upstream error fails the request
  - temperature: sequential mode falls back per point; batched mode fails
    the request
  - observations: any upstream error degrades to no observations
"""

from __future__ import annotations

import logging
import math
import threading
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from functools import partial
from typing import Any

from pydantic import ValidationError

from bee_heatmap.config import Settings, get_settings
from bee_heatmap.datasources.globe import fetch_observations
from bee_heatmap.datasources.overpass import fetch_vegetation_polygons
from bee_heatmap.datasources.weather import fetch_temperatures
from bee_heatmap.errors import InvalidCoordinates, TemperatureFetchFailed, UpstreamError
from bee_heatmap.fusion import attach_nearest
from bee_heatmap.grid import grid_for_bbox
from bee_heatmap.schemas import (
    BoundingBox,
    Coordinate,
    FilterPolicy,
    GridPoint,
    Observation,
    Polygon,
    ScoredPoint,
)
from bee_heatmap.scoring import current_month, score
from bee_heatmap.vegetation import is_vegetated

logger = logging.getLogger(__name__)

WEIGHT_DECIMALS = 3


@dataclass(frozen=True)
class HeatmapSources:
    """The three upstream collaborators, as plain callables.

    ``temperatures`` is called as ``temperatures(coordinates, cancel=event)``.
    """

    polygons: Callable[[BoundingBox], list[Polygon]]
    temperatures: Callable[..., Sequence[float | None]]
    observations: Callable[[BoundingBox], list[Observation]]

    @classmethod
    def from_settings(cls, settings: Settings) -> HeatmapSources:
        """Wire the real Overpass, Open-Meteo and GLOBE clients."""
        return cls(
            polygons=partial(fetch_vegetation_polygons, timeout=settings.vegetation_timeout_s),
            temperatures=partial(
                fetch_temperatures,
                mode=settings.temperature_mode,
                delay_s=settings.request_delay_s,
                fallback=settings.fallback_temperature_c,
                timeout=settings.temperature_timeout_s,
            ),
            observations=partial(
                fetch_observations,
                country_code=settings.globe_country_code,
                protocol=settings.globe_protocol,
                start_date=settings.globe_start_date,
                end_date=settings.globe_end_date,
                timeout=settings.observation_timeout_s,
            ),
        )


# =============================================================================
# Input
# =============================================================================


def _parse_number(name: str, value: Any) -> float:
    if isinstance(value, bool):
        raise InvalidCoordinates(f"{name} must be a number, got {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidCoordinates(f"{name} must be a number, got {value!r}") from exc
    if not math.isfinite(number):
        raise InvalidCoordinates(f"{name} must be finite, got {value!r}")
    return number


def parse_coordinates(lat: Any, lon: Any) -> Coordinate:
    """
    Validate raw request values (numbers or numeric strings).

    Raises:
        InvalidCoordinates: Not a finite number, or outside [-90, 90] / [-180, 180].
    """
    latitude = _parse_number("lat", lat)
    longitude = _parse_number("lon", lon)
    try:
        return Coordinate(lat=latitude, lon=longitude)
    except ValidationError as exc:
        raise InvalidCoordinates(f"coordinates out of range: ({latitude}, {longitude})") from exc


def bounding_box(center: Coordinate, buffer: float) -> BoundingBox:
    """``center ± buffer``; a box spilling past the poles or the antimeridian is invalid input."""
    try:
        return BoundingBox.around(center, buffer)
    except ValidationError as exc:
        raise InvalidCoordinates(
            f"a {buffer} degree box around ({center.lat}, {center.lon}) leaves the valid range"
        ) from exc


# =============================================================================
# Assembly
# =============================================================================


def build_heatmap(
    grid: Sequence[GridPoint],
    polygons: Sequence[Polygon],
    temperatures: Sequence[float | None],
    observations: Sequence[Observation] = (),
    *,
    month: int,
    policy: FilterPolicy = FilterPolicy.EXTENDED,
    min_weight: float = 0.05,
    tolerance: float = 0.001,
) -> list[ScoredPoint]:
    """
    Score already-fetched data. Pure: no I/O, no clock.

    Args:
        grid: Grid points in row-major order.
        polygons: Land-cover polygons for the grid's bounding box.
        temperatures: One temperature per grid point, same order as ``grid``.
        observations: Candidate observations to attach (may be empty).
        month: Month index (0 = January) for seasonality.
        policy: ``basic`` keeps every point; ``extended`` drops unvegetated
            points and points scoring below ``min_weight``.
        min_weight: Threshold for the extended policy.
        tolerance: Observation match distance in degrees.

    Returns:
        Scored points in grid order.

    Raises:
        TemperatureFetchFailed: ``temperatures`` does not line up with ``grid``.
    """
    if len(temperatures) != len(grid):
        raise TemperatureFetchFailed(
            "temperature", f"got {len(temperatures)} values for {len(grid)} grid points"
        )

    extended = policy == FilterPolicy.EXTENDED
    points: list[ScoredPoint] = []
    for grid_point, temperature in zip(grid, temperatures, strict=True):
        vegetated = is_vegetated(grid_point.coordinate, polygons)
        if extended and not vegetated:
            continue

        weight = score(temperature, vegetated, grid_point.lat, month)
        if extended and weight < min_weight:
            continue

        observation = (
            attach_nearest(grid_point.coordinate, observations, tolerance) if observations else None
        )
        points.append(
            ScoredPoint(
                latitude=grid_point.lat,
                longitude=grid_point.lon,
                weight=round(weight, WEIGHT_DECIMALS),
                temperature=temperature,
                observation=observation,
            )
        )
    return points


def compute_heatmap(
    lat: Any,
    lon: Any,
    *,
    settings: Settings | None = None,
    month: int | None = None,
    sources: HeatmapSources | None = None,
) -> list[ScoredPoint]:
    """
    Compute the bee-activity heatmap around ``(lat, lon)``.

    Args:
        lat: Center latitude (number or numeric string).
        lon: Center longitude (number or numeric string).
        settings: Pipeline configuration (defaults to ``get_settings()``).
        month: Month index (0 = January); defaults to the current month.
        sources: Upstream collaborators (defaults to the real APIs).

    Returns:
        Scored points in grid order, filtered per ``settings.filter_policy``.

    Raises:
        InvalidCoordinates: Bad input.
        UpstreamTimeout: Vegetation (or batched temperature) fetch timed out.
        UpstreamUnavailable: Vegetation (or batched temperature) fetch failed.
    """
    settings = settings or get_settings()
    center = parse_coordinates(lat, lon)
    bbox = bounding_box(center, settings.buffer_deg)
    grid = grid_for_bbox(bbox, settings.grid_resolution)
    sources = sources or HeatmapSources.from_settings(settings)
    month = month if month is not None else current_month()

    logger.info(
        "Computing %dx%d heatmap around (%.4f, %.4f), %s temperatures, %s filtering",
        settings.grid_resolution,
        settings.grid_resolution,
        center.lat,
        center.lon,
        settings.temperature_mode,
        settings.filter_policy,
    )

    cancel = threading.Event()
    pool = ThreadPoolExecutor(max_workers=3, thread_name_prefix="heatmap")
    try:
        polygons_future = pool.submit(sources.polygons, bbox)
        temperatures_future = pool.submit(
            sources.temperatures, [gp.coordinate for gp in grid], cancel=cancel
        )
        observations_future = (
            pool.submit(sources.observations, bbox) if settings.fuse_observations else None
        )

        polygons = polygons_future.result()
        temperatures = temperatures_future.result()
        observations: list[Observation] = []
        if observations_future is not None:
            try:
                observations = observations_future.result()
            except UpstreamError as exc:
                logger.warning("Continuing without observations: %s", exc)
    finally:
        # Stop the sequential temperature loop and do not wait for it.
        cancel.set()
        pool.shutdown(wait=False, cancel_futures=True)

    points = build_heatmap(
        grid,
        polygons,
        temperatures,
        observations,
        month=month,
        policy=settings.filter_policy,
        min_weight=settings.min_weight,
        tolerance=settings.observation_tolerance_deg,
    )
    logger.info(
        "Heatmap ready: %d of %d points kept, %d polygons, %d observations",
        len(points),
        len(grid),
        len(polygons),
        len(observations),
    )
    return points


def heatmap_to_json(points: Sequence[ScoredPoint]) -> list[dict[str, Any]]:
    """Boundary representation of a heatmap."""
    return [point.as_json() for point in points]
