"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants, session
    └── {feature}.py      # Fetch functions (one per endpoint/concept)

Sources:
  - overpass/  land-cover polygons from OpenStreetMap
  - weather/   current temperatures from Open-Meteo (batched or rate-limited)
  - globe/     citizen-science observation sites from the GLOBE Program

Fetch functions translate transport failures into ``errors.UpstreamTimeout``
or ``errors.UpstreamUnavailable``; how a failure is recovered is decided per
source (see ``heatmap.compute_heatmap``).

Adding a new datasource
-----------------------
1. Create ``datasources/{name}/`` with the files above.
   See ``globe/`` for a minimal example, ``weather/`` for a richer one.

2. Write fetch functions that return schema models::

       from bee_heatmap.datasources.{name}.client import session

       def fetch_something(bbox: BoundingBox) -> list[Something]:
           resp = session.get(API_URL, params={...})
           resp.raise_for_status()
           return [_parse(item) for item in resp.json()]

3. Re-export public API in ``__init__.py`` with ``__all__``.

4. Wire it into ``heatmap.HeatmapSources`` and add tests in
   ``tests/test_{name}.py``.
"""
