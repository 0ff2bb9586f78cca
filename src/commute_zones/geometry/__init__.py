"""Geometric core: distances, radial sampling and convex hulls.

Pure functions only: no I/O, no HTTP, no logging.

Public API:
  - models: Coordinate, SampledPoint, Bounds
  - distance: haversine_km, km_to_lat_degrees, EARTH_RADIUS_KM
  - sampling: radial_sample, circle_boundary
  - hull: convex_hull, cross
"""

from commute_zones.geometry.distance import (
    EARTH_RADIUS_KM,
    KM_PER_DEGREE_LAT,
    haversine_km,
    km_to_lat_degrees,
)
from commute_zones.geometry.hull import convex_hull, cross
from commute_zones.geometry.models import Bounds, Coordinate, SampledPoint
from commute_zones.geometry.sampling import (
    CIRCLE_POINTS,
    DEFAULT_DIRECTIONS,
    DEFAULT_RING_RADII_DEG,
    circle_boundary,
    radial_sample,
)

__all__ = [
    "CIRCLE_POINTS",
    "DEFAULT_DIRECTIONS",
    "DEFAULT_RING_RADII_DEG",
    "EARTH_RADIUS_KM",
    "KM_PER_DEGREE_LAT",
    "Bounds",
    "Coordinate",
    "SampledPoint",
    "circle_boundary",
    "convex_hull",
    "cross",
    "haversine_km",
    "km_to_lat_degrees",
    "radial_sample",
]
