"""Geometry primitives shared by the sampler, hull builder and assembler."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


@dataclass(frozen=True)
class Coordinate:
    """A latitude/longitude pair in decimal degrees."""

    lat: float
    lon: float

    def as_lat_lon(self) -> list[float]:
        """``[lat, lon]`` as Leaflet expects it."""
        return [self.lat, self.lon]

    def as_lon_lat(self) -> list[float]:
        """``[lon, lat]`` as GeoJSON and OpenRouteService expect it."""
        return [self.lon, self.lat]


@dataclass
class SampledPoint:
    """A destination with its estimated travel time from the origin."""

    coordinate: Coordinate
    duration_seconds: float
    estimated: bool = False

    def __post_init__(self) -> None:
        if self.duration_seconds < 0:
            raise ValueError(f"duration_seconds must be non-negative, got {self.duration_seconds}")

    @property
    def duration_minutes(self) -> float:
        """Travel time in minutes."""
        return self.duration_seconds / 60


@dataclass(frozen=True)
class Bounds:
    """South-west / north-east box framing a set of coordinates."""

    south: float
    west: float
    north: float
    east: float

    @classmethod
    def from_coordinates(cls, coordinates: Iterable[Coordinate]) -> Bounds | None:
        """Smallest box containing every coordinate, or None for an empty input."""
        coords = list(coordinates)
        if not coords:
            return None
        lats = [c.lat for c in coords]
        lons = [c.lon for c in coords]
        return cls(south=min(lats), west=min(lons), north=max(lats), east=max(lons))

    def padded(self, ratio: float) -> Bounds:
        """Grow every side by ``ratio`` times the box span (Leaflet ``pad``)."""
        lat_pad = (self.north - self.south) * ratio
        lon_pad = (self.east - self.west) * ratio
        return Bounds(
            south=self.south - lat_pad,
            west=self.west - lon_pad,
            north=self.north + lat_pad,
            east=self.east + lon_pad,
        )

    def contains(self, coordinate: Coordinate) -> bool:
        return self.south <= coordinate.lat <= self.north and self.west <= coordinate.lon <= self.east

    def as_leaflet(self) -> list[list[float]]:
        """``[[south, west], [north, east]]`` for ``map.fitBounds``."""
        return [[self.south, self.west], [self.north, self.east]]
