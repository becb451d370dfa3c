"""OpenStreetMap land-cover tags treated as bee habitat."""

# ``landuse=*`` values
LANDUSE_TAGS: tuple[str, ...] = ("forest", "meadow", "orchard", "farmland")

# ``leisure=*`` values
LEISURE_TAGS: tuple[str, ...] = ("park", "nature_reserve", "garden")
