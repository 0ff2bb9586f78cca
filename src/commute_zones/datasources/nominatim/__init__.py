"""Nominatim geocoding data source.

Turns a free-text address into a coordinate and display name.

Public API:
  - geocode: GeocodeResult, geocode_address
  - client: API URL, service name
"""

from commute_zones.datasources.nominatim.client import NOMINATIM_API
from commute_zones.datasources.nominatim.geocode import GeocodeResult, geocode_address

__all__ = [
    "NOMINATIM_API",
    "GeocodeResult",
    "geocode_address",
]
