"""Bee Heatmap - how favorable is the area around a point for bee activity right now.

Architecture::

    grid.py          Uniform lat/lon sampling grid around a center
    vegetation.py    Point-in-polygon land-cover classification
    scoring.py       Vegetation x temperature x seasonality weight
    fusion.py        Attach nearby GLOBE observations to grid points
    heatmap.py       Orchestration and filtering (compute_heatmap)
    datasources/     External APIs (Overpass, Open-Meteo, GLOBE)
    reference/       Static constants (land-cover tags, seasonal tables)
    flows/           Prefect orchestration (heatmap flow)
    services/        Shared utilities (HTTP client with retry and timeout)
    api.py, cli.py   HTTP endpoint and command line

Data flow: coordinates → grid → {polygons, temperatures, observations}
→ score per point → filter → fuse → scored points
"""

__version__ = "0.1.0"

from bee_heatmap.config import Settings
from bee_heatmap.schemas import ScoredPoint

__all__ = ["ScoredPoint", "Settings", "__version__"]
