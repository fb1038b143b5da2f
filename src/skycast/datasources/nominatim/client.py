"""Nominatim (OpenStreetMap) geocoding constants.

API docs: https://nominatim.org/release-docs/latest/api/Overview/
Usage policy requires an identifying User-Agent and at most 1 request/second.
"""

NOMINATIM_API = "https://nominatim.openstreetmap.org"

SEARCH_PATH = "/search"
REVERSE_PATH = "/reverse"

DEFAULT_LANGUAGE = "en"

# Address keys tried in order when naming a place
PLACE_KEYS = ("city", "town", "village")
