"""
Prefect flows for the heatmap pipeline.

Flows:
- heatmap: compute a heatmap around a point and optionally save it as JSON

Usage (local):
    python -m bee_heatmap.flows.heatmap

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    python -m bee_heatmap.flows.heatmap
"""
