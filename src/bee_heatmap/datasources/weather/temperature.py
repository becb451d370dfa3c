"""Current temperatures for grid points from the Open-Meteo Forecast API.

Two modes:

- batched: one request carrying every coordinate. The response must line up
  with the submission order; any failure fails the whole batch.
- sequential: one request per point, strictly serialized with a fixed pause
  between requests. A failed point gets the fallback temperature and the
  loop carries on. Slow by design: 225 points at 1.5 s take ~5.6 minutes.
"""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable, Sequence
from typing import Any

import requests

from bee_heatmap.datasources.weather.client import (
    COORD_DECIMALS,
    CURRENT_VAR,
    DEFAULT_DELAY_S,
    DEFAULT_FALLBACK_C,
    DEFAULT_TIMEOUT,
    OPEN_METEO_API,
    session,
)
from bee_heatmap.errors import (
    TemperatureFetchFailed,
    UpstreamError,
    UpstreamTimeout,
    UpstreamUnavailable,
)
from bee_heatmap.schemas import Coordinate, TemperatureMode

logger = logging.getLogger(__name__)

SOURCE = "open-meteo"


def _fmt(value: float) -> str:
    return f"{value:.{COORD_DECIMALS}f}"


def _get(params: dict[str, Any], timeout: float) -> Any:
    """GET the forecast endpoint, mapping transport errors to upstream errors."""
    try:
        resp = session.get(OPEN_METEO_API, params=params, timeout=timeout)
        if resp.status_code == 429:
            raise UpstreamUnavailable(SOURCE, "rate limited (HTTP 429)")
        resp.raise_for_status()
        return resp.json()
    except requests.Timeout as exc:
        raise UpstreamTimeout(SOURCE, f"no response within {timeout}s") from exc
    except requests.RequestException as exc:
        raise UpstreamUnavailable(SOURCE, str(exc)) from exc


def _parse_current(data: Any) -> float:
    """Pull ``current.temperature_2m`` out of one location's response."""
    current = data.get("current") if isinstance(data, dict) else None
    value = current.get(CURRENT_VAR) if isinstance(current, dict) else None
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise UpstreamUnavailable(SOURCE, f"response has no usable current {CURRENT_VAR}") from exc


def _params(latitude: str, longitude: str) -> dict[str, Any]:
    return {
        "latitude": latitude,
        "longitude": longitude,
        "current": CURRENT_VAR,
        "temperature_unit": "celsius",
    }


def fetch_current_temperature(point: Coordinate, *, timeout: float = DEFAULT_TIMEOUT) -> float:
    """
    Fetch the current temperature (Celsius) at one point.

    Raises:
        UpstreamTimeout: The request exceeded ``timeout``.
        UpstreamUnavailable: HTTP error, rate limiting or a malformed body.
    """
    data = _get(_params(_fmt(point.lat), _fmt(point.lon)), timeout)
    return _parse_current(data)


def fetch_temperatures_batched(
    points: Sequence[Coordinate],
    *,
    timeout: float = DEFAULT_TIMEOUT,
) -> list[float]:
    """
    Fetch temperatures for all points in a single request.

    Open-Meteo accepts comma-separated coordinate lists and answers with one
    object per location, in submission order (a bare object for one location).

    Raises:
        UpstreamTimeout: The request exceeded ``timeout``.
        TemperatureFetchFailed: Any other failure, including a response whose
            length or content does not line up with ``points``.
    """
    if not points:
        return []

    params = _params(
        ",".join(_fmt(p.lat) for p in points),
        ",".join(_fmt(p.lon) for p in points),
    )
    try:
        data = _get(params, timeout)
        locations = data if isinstance(data, list) else [data]
        if len(locations) != len(points):
            raise TemperatureFetchFailed(
                SOURCE, f"expected {len(points)} locations, got {len(locations)}"
            )
        return [_parse_current(loc) for loc in locations]
    except (UpstreamTimeout, TemperatureFetchFailed):
        raise
    except UpstreamUnavailable as exc:
        raise TemperatureFetchFailed(SOURCE, f"batch failed: {exc}") from exc


def fetch_temperatures_sequential(
    points: Sequence[Coordinate],
    *,
    delay_s: float = DEFAULT_DELAY_S,
    fallback: float = DEFAULT_FALLBACK_C,
    timeout: float = DEFAULT_TIMEOUT,
    fetch_one: Callable[[Coordinate], float] | None = None,
    sleep: Callable[[float], None] = time.sleep,
    cancel: threading.Event | None = None,
) -> list[float]:
    """
    Fetch temperatures one point at a time, pausing ``delay_s`` between calls.

    Never raises for upstream failures: a point that fails (timeout, HTTP 429,
    malformed body) gets ``fallback`` and the loop moves on without retrying.

    Args:
        points: Grid coordinates, in grid order.
        delay_s: Fixed pause between consecutive requests.
        fallback: Temperature substituted for a failed point.
        timeout: Per-request timeout in seconds.
        fetch_one: Single-point fetcher (defaults to ``fetch_current_temperature``).
        sleep: Sleep function, replaceable in tests.
        cancel: Once set, no further requests are made and the loop returns
            the temperatures gathered so far.

    Returns:
        One temperature per input point, in input order (shorter if cancelled).
    """
    fetch = fetch_one or (lambda p: fetch_current_temperature(p, timeout=timeout))

    temperatures: list[float] = []
    for index, point in enumerate(points):
        if index:
            sleep(delay_s)
        if cancel is not None and cancel.is_set():
            logger.info("Temperature fetch cancelled after %d of %d points", index, len(points))
            break
        try:
            temperatures.append(fetch(point))
        except UpstreamError as exc:
            logger.warning(
                "Temperature unavailable for (%.2f, %.2f), using fallback %.1f C: %s",
                point.lat,
                point.lon,
                fallback,
                exc,
            )
            temperatures.append(fallback)
    return temperatures


def estimated_duration_s(n_points: int, delay_s: float = DEFAULT_DELAY_S) -> float:
    """Lower bound on sequential-mode duration: the pauses alone."""
    return max(n_points - 1, 0) * delay_s


def fetch_temperatures(
    points: Sequence[Coordinate],
    mode: TemperatureMode = TemperatureMode.SEQUENTIAL,
    *,
    delay_s: float = DEFAULT_DELAY_S,
    fallback: float = DEFAULT_FALLBACK_C,
    timeout: float = DEFAULT_TIMEOUT,
    cancel: threading.Event | None = None,
) -> list[float]:
    """Fetch one temperature per point using the configured mode.

    ``cancel`` only affects sequential mode; a batch is a single request.
    """
    if mode == TemperatureMode.BATCHED:
        return fetch_temperatures_batched(points, timeout=timeout)

    logger.info(
        "Fetching %d temperatures sequentially; this takes at least %.0f s",
        len(points),
        estimated_duration_s(len(points), delay_s),
    )
    return fetch_temperatures_sequential(
        points, delay_s=delay_s, fallback=fallback, timeout=timeout, cancel=cancel
    )
