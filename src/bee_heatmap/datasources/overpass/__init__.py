"""OpenStreetMap land-cover data source (Overpass API).

Public API:
  - polygons: fetch_vegetation_polygons, build_query
  - client: API URL, session
"""

from bee_heatmap.datasources.overpass.client import OVERPASS_API
from bee_heatmap.datasources.overpass.polygons import build_query, fetch_vegetation_polygons

__all__ = [
    "OVERPASS_API",
    "build_query",
    "fetch_vegetation_polygons",
]
