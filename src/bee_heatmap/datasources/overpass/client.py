"""Overpass API client constants and shared session.

API docs: https://wiki.openstreetmap.org/wiki/Overpass_API
"""

from __future__ import annotations

from bee_heatmap.services.http import create_session

OVERPASS_API = "https://overpass-api.de/api/interpreter"

DEFAULT_TIMEOUT = 25  # seconds

session = create_session(timeout=DEFAULT_TIMEOUT)
