"""
Minimal HTTP boundary: ``GET /api/bee-map?lat=<float>&lon=<float>``.

Responds with the heatmap JSON list. Errors map to status codes:
invalid input → 400, upstream timeout → 504, anything else → 500.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any
from urllib.parse import parse_qs, urlsplit

from bee_heatmap.config import Settings
from bee_heatmap.errors import InvalidInput, UpstreamTimeout
from bee_heatmap.heatmap import compute_heatmap, heatmap_to_json

logger = logging.getLogger(__name__)

BEE_MAP_PATH = "/api/bee-map"


def handle_bee_map(
    lat: str | None,
    lon: str | None,
    *,
    settings: Settings | None = None,
    compute: Callable[..., Any] | None = None,
) -> tuple[HTTPStatus, Any]:
    """Run the pipeline for raw query values; return ``(status, json_body)``."""
    compute = compute or compute_heatmap
    try:
        points = compute(lat, lon, settings=settings)
    except InvalidInput as exc:
        return HTTPStatus.BAD_REQUEST, {"error": f"Invalid latitude/longitude: {exc}"}
    except UpstreamTimeout as exc:
        logger.error("Upstream timeout: %s", exc)
        return HTTPStatus.GATEWAY_TIMEOUT, {"error": f"Upstream timeout: {exc}"}
    except Exception as exc:
        logger.exception("Heatmap request failed")
        return HTTPStatus.INTERNAL_SERVER_ERROR, {"error": f"Failed to process request: {exc}"}
    return HTTPStatus.OK, heatmap_to_json(points)


class BeeMapHandler(BaseHTTPRequestHandler):
    """Serves the bee map endpoint; everything else is 404."""

    settings: Settings | None = None

    def do_GET(self) -> None:  # noqa: N802
        url = urlsplit(self.path)
        if url.path != BEE_MAP_PATH:
            self._send_json(HTTPStatus.NOT_FOUND, {"error": "Not found"})
            return

        query = parse_qs(url.query)
        status, body = handle_bee_map(
            query.get("lat", [None])[0],
            query.get("lon", [None])[0],
            settings=self.settings,
        )
        self._send_json(status, body)

    def _send_json(self, status: HTTPStatus, body: Any) -> None:
        payload = json.dumps(body).encode()
        self.send_response(status)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(payload)))
        self.end_headers()
        self.wfile.write(payload)


def create_server(port: int, settings: Settings | None = None) -> ThreadingHTTPServer:
    """Bind a threaded server on all interfaces."""
    handler = type("ConfiguredBeeMapHandler", (BeeMapHandler,), {"settings": settings})
    return ThreadingHTTPServer(("", port), handler)
