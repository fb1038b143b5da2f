"""Nominatim geocoding data source.

Public API:
  - geocode: search_city (name -> Location), reverse_lookup (coords -> PlaceLabel)
  - client: API URL, endpoint paths
"""

from skycast.datasources.nominatim.client import NOMINATIM_API
from skycast.datasources.nominatim.geocode import reverse_lookup, search_city

__all__ = [
    "NOMINATIM_API",
    "reverse_lookup",
    "search_city",
]
