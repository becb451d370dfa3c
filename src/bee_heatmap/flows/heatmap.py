"""
Prefect flow that computes a bee heatmap and writes it to disk.

Run locally:
    python -m bee_heatmap.flows.heatmap

Run with Prefect dashboard:
    prefect server start &
    python -m bee_heatmap.flows.heatmap
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from prefect import flow, task

from bee_heatmap import heatmap
from bee_heatmap.config import Settings, get_settings
from bee_heatmap.datasources.weather import estimated_duration_s
from bee_heatmap.schemas import FilterPolicy, TemperatureMode


def resolve_settings(
    resolution: int | None = None,
    mode: TemperatureMode | None = None,
    policy: FilterPolicy | None = None,
) -> Settings:
    """Apply per-run overrides on top of the process settings."""
    overrides: dict[str, Any] = {}
    if resolution is not None:
        overrides["grid_resolution"] = resolution
    if mode is not None:
        overrides["temperature_mode"] = TemperatureMode(mode)
    if policy is not None:
        overrides["filter_policy"] = FilterPolicy(policy)
    return get_settings().model_copy(update=overrides)


# No retries: a sequential run is minutes long and already degrades per point.
@task(name="compute-heatmap")
def compute_points(
    lat: float, lon: float, settings: Settings, month: int | None = None
) -> list[dict[str, Any]]:
    """Run the pipeline and return the boundary JSON."""
    points = heatmap.compute_heatmap(lat, lon, settings=settings, month=month)
    return heatmap.heatmap_to_json(points)


@task(name="save-heatmap")
def save_heatmap(points: list[dict[str, Any]], output: Path) -> Path:
    """Write the heatmap as a JSON array."""
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(json.dumps(points, indent=2))
    return output


@flow(name="bee-heatmap", log_prints=True)
def heatmap_flow(
    lat: float | None = None,
    lon: float | None = None,
    resolution: int | None = None,
    mode: TemperatureMode | None = None,
    policy: FilterPolicy | None = None,
    month: int | None = None,
    output: Path | None = None,
) -> list[dict[str, Any]]:
    """
    Compute a heatmap around ``(lat, lon)``.

    Unset arguments come from settings. When ``output`` is given the points
    are also written there.
    """
    settings = resolve_settings(resolution, mode, policy)
    lat = settings.lat if lat is None else lat
    lon = settings.lon if lon is None else lon

    if settings.temperature_mode == TemperatureMode.SEQUENTIAL:
        eta = estimated_duration_s(settings.grid_size, settings.request_delay_s)
        print(
            f"Sequential temperature mode: {settings.grid_size} requests, "
            f"expect at least {eta / 60:.1f} minutes."
        )

    print(f"Computing heatmap for ({lat}, {lon})...")
    points = compute_points(lat, lon, settings, month)
    print(f"Heatmap has {len(points)} of {settings.grid_size} grid points.")

    if output is not None:
        path = save_heatmap(points, output)
        print(f"Saved heatmap to {path}")

    return points


if __name__ == "__main__":
    result = heatmap_flow()
    print(f"Flow complete: {len(result)} points")
