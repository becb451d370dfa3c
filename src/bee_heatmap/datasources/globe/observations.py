"""GLOBE citizen-science measurement sites inside a bounding box."""

from __future__ import annotations

import logging
from typing import Any

import requests
from pydantic import ValidationError

from bee_heatmap.datasources.globe.client import (
    DEFAULT_COUNTRY,
    DEFAULT_END_DATE,
    DEFAULT_PROTOCOL,
    DEFAULT_START_DATE,
    DEFAULT_TIMEOUT,
    MEASUREMENT_SEARCH,
    session,
)
from bee_heatmap.schemas import BoundingBox, Coordinate, Observation

logger = logging.getLogger(__name__)

# =============================================================================
# Parsing
# =============================================================================


def _parse_feature(feature: Any) -> Observation | None:
    """Parse one GeoJSON feature. Returns None if it has no id or no usable point."""
    if not isinstance(feature, dict) or feature.get("id") is None:
        return None
    geometry = feature.get("geometry")
    if not isinstance(geometry, dict):
        return None
    coords = geometry.get("coordinates")
    if not isinstance(coords, list | tuple) or len(coords) < 2:
        return None

    props = feature.get("properties")
    if not isinstance(props, dict):
        props = {}
    try:
        return Observation(
            id=str(feature["id"]),
            site_name=props.get("siteName"),
            organization_name=props.get("organizationName"),
            country_name=props.get("countryName"),
            elevation=props.get("elevation"),
            coordinate=Coordinate(lon=coords[0], lat=coords[1]),
        )
    except ValidationError:
        return None


def parse_features(data: dict[str, Any], bbox: BoundingBox) -> list[Observation]:
    """Parse a GeoJSON FeatureCollection, keeping features inside ``bbox``."""
    features = data.get("features")
    if not isinstance(features, list):
        return []

    observations: list[Observation] = []
    for feature in features:
        obs = _parse_feature(feature)
        if obs is not None and bbox.contains(obs.coordinate.lat, obs.coordinate.lon):
            observations.append(obs)
    return observations


# =============================================================================
# API Fetching
# =============================================================================


def fetch_observations(
    bbox: BoundingBox,
    *,
    country_code: str = DEFAULT_COUNTRY,
    protocol: str = DEFAULT_PROTOCOL,
    start_date: str = DEFAULT_START_DATE,
    end_date: str = DEFAULT_END_DATE,
    timeout: float = DEFAULT_TIMEOUT,
) -> list[Observation]:
    """
    Fetch GLOBE measurement sites for a country and keep those inside ``bbox``.

    Observations only enrich the heatmap, so every failure (timeout, HTTP
    error, malformed body) is logged and yields an empty list.

    Args:
        bbox: Heatmap bounding box.
        country_code: ISO alpha-3 country filter.
        protocol: GLOBE protocol id.
        start_date: ISO date string (YYYY-MM-DD).
        end_date: ISO date string (YYYY-MM-DD).
        timeout: Request timeout in seconds.

    Returns:
        Observations in source order.
    """
    params = {
        "protocols": protocol,
        "startdate": start_date,
        "enddate": end_date,
        "countrycode": country_code,
        "geojson": "TRUE",
        "sample": "TRUE",
    }
    try:
        resp = session.get(MEASUREMENT_SEARCH, params=params, timeout=timeout)
        resp.raise_for_status()
        data = resp.json()
    except requests.RequestException as exc:
        logger.warning("GLOBE observations unavailable: %s", exc)
        return []

    if not isinstance(data, dict):
        logger.warning("GLOBE response is not a GeoJSON object, ignoring it")
        return []
    return parse_features(data, bbox)
