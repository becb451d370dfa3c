"""GLOBE Program observation data source.

Public API:
  - observations: fetch_observations, parse_features
  - client: API URLs, default query parameters
"""

from bee_heatmap.datasources.globe.client import MEASUREMENT_SEARCH
from bee_heatmap.datasources.globe.observations import fetch_observations, parse_features

__all__ = [
    "MEASUREMENT_SEARCH",
    "fetch_observations",
    "parse_features",
]
