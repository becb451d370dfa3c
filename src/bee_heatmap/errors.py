"""Exception taxonomy for the heatmap pipeline.

Input problems are fatal to a request and never retried. Upstream problems
are expected; how they are recovered depends on the subsystem (see
``heatmap.compute_heatmap`` and ``datasources.weather``).
"""

from __future__ import annotations


class HeatmapError(RuntimeError):
    """Base error for the heatmap pipeline."""


class InvalidInput(HeatmapError, ValueError):
    """Request input could not be used."""


class InvalidCoordinates(InvalidInput):
    """Latitude/longitude are not finite numbers within range."""


class InvalidResolution(HeatmapError, ValueError):
    """Grid resolution below 2. A configuration fault, not a request fault."""


class UpstreamError(HeatmapError):
    """An external data source failed."""

    def __init__(self, source: str, message: str) -> None:
        super().__init__(f"{source}: {message}")
        self.source = source


class UpstreamTimeout(UpstreamError):
    """An external call exceeded its time bound."""


class UpstreamUnavailable(UpstreamError):
    """Non-timeout upstream failure: HTTP error, rate limit, malformed payload."""


class TemperatureFetchFailed(UpstreamUnavailable):
    """A batched temperature request failed or came back misaligned."""


__all__ = [
    "HeatmapError",
    "InvalidCoordinates",
    "InvalidInput",
    "InvalidResolution",
    "TemperatureFetchFailed",
    "UpstreamError",
    "UpstreamTimeout",
    "UpstreamUnavailable",
]
