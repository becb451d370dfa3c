"""Open-Meteo temperature data source.

Fetches the current 2 m air temperature for heatmap grid points.

Public API:
  - temperature: fetch_temperatures (dispatch by mode),
    fetch_temperatures_batched, fetch_temperatures_sequential,
    fetch_current_temperature
  - client: API URL, defaults, session
"""

from bee_heatmap.datasources.weather.client import OPEN_METEO_API
from bee_heatmap.datasources.weather.temperature import (
    estimated_duration_s,
    fetch_current_temperature,
    fetch_temperatures,
    fetch_temperatures_batched,
    fetch_temperatures_sequential,
)

__all__ = [
    "OPEN_METEO_API",
    "estimated_duration_s",
    "fetch_current_temperature",
    "fetch_temperatures",
    "fetch_temperatures_batched",
    "fetch_temperatures_sequential",
]
