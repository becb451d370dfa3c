"""
Session factory for the upstream APIs.

Each datasource client builds its own session here so it can pick a retry
policy and a timeout: Overpass and GLOBE retry gateway errors, while the
per-point Open-Meteo calls never retry and fall back instead. A timeout is
attached to every request that does not carry one.
"""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

#: Polygon and observation sources: two retries on gateway errors, GET only.
DEFAULT_RETRY = Retry(
    total=2,
    backoff_factor=1,
    status_forcelist=[502, 503, 504],
    allowed_methods=["GET", "HEAD", "OPTIONS"],
    raise_on_status=False,  # callers use resp.raise_for_status()
)

#: Per-point temperature calls.
NO_RETRY = Retry(total=0, raise_on_status=False)

DEFAULT_TIMEOUT = 20  # seconds

USER_AGENT = "bee-heatmap/0.1"


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> requests.Session:
    """
    Build a session for one upstream.

    Args:
        retry: Retry policy for the mounted adapter (``DEFAULT_RETRY`` if None).
        timeout: Seconds applied when a request passes no ``timeout``.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or DEFAULT_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = USER_AGENT

    # Session.request forwards timeout=None, so fill it in at send time.
    send = s.send

    def _send(prepared: requests.PreparedRequest, **kwargs: object) -> requests.Response:
        if kwargs.get("timeout") is None:
            kwargs["timeout"] = timeout
        return send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send  # type: ignore[method-assign]
    return s
