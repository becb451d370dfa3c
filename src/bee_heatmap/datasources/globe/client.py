"""GLOBE Program API client constants and shared session.

API docs: https://www.globe.gov/globe-data/globe-api

The measured-date search only filters by country, so results are narrowed
to the heatmap box locally.
"""

from __future__ import annotations

from bee_heatmap.services.http import create_session

GLOBE_API = "https://api.globe.gov/search/v1"
MEASUREMENT_SEARCH = f"{GLOBE_API}/measurement/protocol/measureddate/country/"

DEFAULT_TIMEOUT = 20  # seconds

# Upstream protocol id, spelled as the API spells it.
DEFAULT_PROTOCOL = "vegatation_covers"
DEFAULT_COUNTRY = "USA"
DEFAULT_START_DATE = "2023-05-05"
DEFAULT_END_DATE = "2025-05-05"

session = create_session(timeout=DEFAULT_TIMEOUT)
