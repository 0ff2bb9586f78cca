"""OpenRouteService isochrone data source.

Public API:
  - isochrones: fetch_isochrones, parse_isochrones
  - client: API URL, endpoint template
"""

from commute_zones.datasources.openrouteservice.client import ORS_API
from commute_zones.datasources.openrouteservice.isochrones import (
    fetch_isochrones,
    parse_isochrones,
)

__all__ = [
    "ORS_API",
    "fetch_isochrones",
    "parse_isochrones",
]
