"""Radial sampling of candidate destinations around an origin.

Offsets are applied in degree space: the latitude offset is ``r·cos(angle)``
and the longitude offset is ``r·sin(angle)`` stretched by ``1/cos(lat)`` so a
ring keeps its ground shape away from the equator.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from commute_zones.geometry.models import Coordinate

if TYPE_CHECKING:
    from collections.abc import Sequence

# Seven concentric rings, ~1.7 km to ~11.7 km (degrees of latitude).
DEFAULT_RING_RADII_DEG: tuple[float, ...] = (0.015, 0.03, 0.045, 0.06, 0.075, 0.09, 0.105)
DEFAULT_DIRECTIONS = 12
CIRCLE_POINTS = 32


def _offset(origin: Coordinate, radius_deg: float, angle: float) -> Coordinate:
    lat_scale = math.cos(math.radians(origin.lat))
    return Coordinate(
        lat=origin.lat + radius_deg * math.cos(angle),
        lon=origin.lon + radius_deg * math.sin(angle) / lat_scale,
    )


def radial_sample(
    origin: Coordinate,
    radii_deg: Sequence[float] = DEFAULT_RING_RADII_DEG,
    directions: int = DEFAULT_DIRECTIONS,
) -> list[Coordinate]:
    """
    Generate a ring grid of ``len(radii_deg) * directions`` points.

    Args:
        origin: Center of the rings.
        radii_deg: Ring radii in degrees of latitude.
        directions: Evenly spaced bearings per ring, starting due north.

    Returns:
        One coordinate per (radius, direction) pair, ring by ring.
    """
    if directions < 1:
        raise ValueError(f"directions must be at least 1, got {directions}")

    points: list[Coordinate] = []
    for radius in radii_deg:
        for i in range(directions):
            angle = (i / directions) * 2 * math.pi
            points.append(_offset(origin, radius, angle))
    return points


def circle_boundary(origin: Coordinate, radius_deg: float, points: int = CIRCLE_POINTS) -> list[Coordinate]:
    """Polygon of ``points`` vertices approximating a circle around ``origin``."""
    return radial_sample(origin, [radius_deg], points)
