"""Convex hull of reachable points (Graham scan).

Coordinates are treated as planar ``(lat, lon)`` pairs: latitude is the first
axis, longitude the second. "Counter-clockwise" is meant in that frame.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from commute_zones.geometry.models import Coordinate


def cross(o: Coordinate, a: Coordinate, b: Coordinate) -> float:
    """Z component of ``(a - o) x (b - o)``; positive for a counter-clockwise turn."""
    return (a.lat - o.lat) * (b.lon - o.lon) - (a.lon - o.lon) * (b.lat - o.lat)


def _distinct(points: Iterable[Coordinate]) -> list[Coordinate]:
    seen: set[Coordinate] = set()
    unique: list[Coordinate] = []
    for p in points:
        if p not in seen:
            seen.add(p)
            unique.append(p)
    return unique


def convex_hull(points: Iterable[Coordinate]) -> list[Coordinate]:
    """
    Ordered convex hull vertices, counter-clockwise starting at the pivot.

    With fewer than 3 distinct points the input is returned unchanged; callers
    must treat anything shorter than 3 vertices as degenerate. Collinear
    triples pop the middle point, so an all-collinear input also comes back
    degenerate.
    """
    given = list(points)
    unique = _distinct(given)
    if len(unique) < 3:
        return given

    pivot = min(unique, key=lambda p: (p.lat, p.lon))
    rest = [p for p in unique if p != pivot]

    def polar_key(p: Coordinate) -> tuple[float, float]:
        d_first = p.lat - pivot.lat
        d_second = p.lon - pivot.lon
        return (math.atan2(d_second, d_first), d_first * d_first + d_second * d_second)

    rest.sort(key=polar_key)

    stack = [pivot]
    for p in rest:
        while len(stack) > 1 and cross(stack[-2], stack[-1], p) <= 0:
            stack.pop()
        stack.append(p)
    return stack
