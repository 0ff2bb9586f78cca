"""Circles sized by an assumed average speed."""

from __future__ import annotations

from typing import TYPE_CHECKING

from commute_zones.estimation.base import TimeEstimate, TimeEstimationStrategy
from commute_zones.geometry import CIRCLE_POINTS, circle_boundary, km_to_lat_degrees
from commute_zones.reference import MODE_PROFILES
from commute_zones.schemas import StrategyName, TransportMode

if TYPE_CHECKING:
    from collections.abc import Sequence

    from commute_zones.geometry import Coordinate
    from commute_zones.reference import TimeThreshold


class ConstantSpeedStrategy(TimeEstimationStrategy):
    """Reachable area = circle of radius ``speed × time``; no external calls."""

    name = StrategyName.CONSTANT_SPEED

    def __init__(self, speed_kmh: float, points: int = CIRCLE_POINTS) -> None:
        if speed_kmh <= 0:
            raise ValueError(f"speed_kmh must be positive, got {speed_kmh}")
        self.speed_kmh = speed_kmh
        self.points = points

    @classmethod
    def for_mode(cls, mode: TransportMode) -> ConstantSpeedStrategy:
        return cls(MODE_PROFILES[mode].speed_kmh)

    def radius_km(self, minutes: float) -> float:
        return self.speed_kmh * minutes / 60

    def radius_deg(self, minutes: float) -> float:
        return km_to_lat_degrees(self.radius_km(minutes))

    def estimate(self, origin: Coordinate, thresholds: Sequence[TimeThreshold]) -> TimeEstimate:
        boundaries = {
            t.minutes: circle_boundary(origin, self.radius_deg(t.minutes), self.points)
            for t in thresholds
        }
        return TimeEstimate(boundaries=boundaries)
