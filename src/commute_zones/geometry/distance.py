"""Great-circle distance and degree conversions."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from commute_zones.geometry.models import Coordinate

EARTH_RADIUS_KM = 6371.0

# Length of one degree of latitude on the same sphere the haversine uses.
KM_PER_DEGREE_LAT = math.pi * EARTH_RADIUS_KM / 180


def haversine_km(a: Coordinate, b: Coordinate) -> float:
    """Compute great-circle distance in kilometers between two points."""
    lat1 = math.radians(a.lat)
    lat2 = math.radians(b.lat)
    dlat = lat2 - lat1
    dlon = math.radians(b.lon - a.lon)

    h = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    return 2 * EARTH_RADIUS_KM * math.asin(math.sqrt(min(1.0, h)))


def km_to_lat_degrees(km: float) -> float:
    """Convert a north-south distance to degrees of latitude."""
    return km / KM_PER_DEGREE_LAT
