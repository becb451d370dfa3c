"""Bee-habitat land-cover polygons from OpenStreetMap."""

from __future__ import annotations

from typing import Any

import requests

from bee_heatmap.datasources.overpass.client import DEFAULT_TIMEOUT, OVERPASS_API, session
from bee_heatmap.errors import UpstreamTimeout, UpstreamUnavailable
from bee_heatmap.reference.landcover import LANDUSE_TAGS, LEISURE_TAGS
from bee_heatmap.schemas import BoundingBox, Polygon

SOURCE = "overpass"


def build_query(bbox: BoundingBox) -> str:
    """Overpass QL selecting habitat ways in ``bbox``, with inline geometry."""
    area = f"({bbox.south},{bbox.west},{bbox.north},{bbox.east})"
    return (
        "[out:json];\n"
        "(\n"
        f'  way["landuse"~"{"|".join(LANDUSE_TAGS)}"]{area};\n'
        f'  way["leisure"~"{"|".join(LEISURE_TAGS)}"]{area};\n'
        ");\n"
        "out geom;\n"
    )


def _parse_element(element: dict[str, Any]) -> Polygon | None:
    """Convert one way into a Polygon. Returns None if it has no usable geometry."""
    if not isinstance(element, dict):
        return None
    geometry = element.get("geometry") or []
    try:
        ring = tuple((float(node["lon"]), float(node["lat"])) for node in geometry)
    except (KeyError, TypeError, ValueError):
        return None
    if len(ring) < 3:
        return None

    tags = element.get("tags") or {}
    return Polygon(ring=ring, landcover=tags.get("landuse") or tags.get("leisure"))


def fetch_vegetation_polygons(
    bbox: BoundingBox,
    *,
    timeout: float = DEFAULT_TIMEOUT,
) -> list[Polygon]:
    """
    Fetch forest, meadow, orchard, farmland, park, nature reserve and garden
    polygons intersecting ``bbox``.

    Raises:
        UpstreamTimeout: Overpass did not answer within ``timeout``.
        UpstreamUnavailable: HTTP error or a body without ``elements``.
    """
    try:
        resp = session.get(OVERPASS_API, params={"data": build_query(bbox)}, timeout=timeout)
        resp.raise_for_status()
        data = resp.json()
    except requests.Timeout as exc:
        raise UpstreamTimeout(SOURCE, f"no response within {timeout}s") from exc
    except requests.RequestException as exc:
        raise UpstreamUnavailable(SOURCE, str(exc)) from exc

    elements = data.get("elements") if isinstance(data, dict) else None
    if not isinstance(elements, list):
        raise UpstreamUnavailable(SOURCE, "response has no 'elements' list")

    polygons: list[Polygon] = []
    for element in elements:
        parsed = _parse_element(element)
        if parsed is not None:
            polygons.append(parsed)
    return polygons
