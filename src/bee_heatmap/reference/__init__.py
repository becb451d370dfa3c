"""Static bee-activity constants.

Reference data that doesn't change with API calls: land-cover tags counted
as bee habitat, seasonal activity tables, scoring thresholds.

Adding a new module:
1. Create ``reference/{name}.py`` with constants
2. Re-export from this ``__init__.py``
"""

from bee_heatmap.reference.landcover import LANDUSE_TAGS as LANDUSE_TAGS
from bee_heatmap.reference.landcover import LEISURE_TAGS as LEISURE_TAGS
from bee_heatmap.reference.seasons import NORTHERN_SEASONALITY as NORTHERN_SEASONALITY
from bee_heatmap.reference.seasons import SOUTHERN_SEASONALITY as SOUTHERN_SEASONALITY
