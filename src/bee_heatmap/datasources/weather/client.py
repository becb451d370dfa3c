"""Open-Meteo API client constants and shared session.

API docs: https://open-meteo.com/en/docs

Open-Meteo throttles bursts from one client without documenting the limit,
so per-point requests are spaced by a fixed delay and never retried.
"""

from __future__ import annotations

from bee_heatmap.services.http import NO_RETRY, create_session

OPEN_METEO_API = "https://api.open-meteo.com/v1/forecast"

CURRENT_VAR = "temperature_2m"

DEFAULT_TIMEOUT = 15  # seconds
DEFAULT_DELAY_S = 1.5  # pause between sequential requests
DEFAULT_FALLBACK_C = 25.0

# Coordinates are sent rounded to this many decimals (~11 m)
COORD_DECIMALS = 4

session = create_session(retry=NO_RETRY, timeout=DEFAULT_TIMEOUT)
