"""
Isochrones from sampled transit journeys.

Destinations on a radial grid around the origin are timed one by one against
a journey planner. A failed or empty lookup is retried once, then replaced by
a conservative distance/speed estimate and flagged ``estimated``. The
resulting point cloud is handed to the assembler, which hulls it per
threshold.

Lookups run in small thread batches with a pause in between to stay under
the planner's rate limit.
"""

from __future__ import annotations

import functools
import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING

import requests

from commute_zones.datasources.navitia import fetch_journey_duration
from commute_zones.estimation.base import EstimationStats, TimeEstimate, TimeEstimationStrategy
from commute_zones.geometry import (
    DEFAULT_DIRECTIONS,
    DEFAULT_RING_RADII_DEG,
    SampledPoint,
    haversine_km,
    radial_sample,
)
from commute_zones.reference import TRANSIT_FALLBACK_SPEED_KMH
from commute_zones.schemas import StrategyName

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from commute_zones.config import Settings
    from commute_zones.geometry import Coordinate
    from commute_zones.reference import TimeThreshold

    DurationLookup = Callable[[Coordinate, Coordinate], float | None]

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 2  # first try + one retry
DEFAULT_BATCH_SIZE = 5
DEFAULT_BATCH_PAUSE_S = 0.5


def fallback_duration(origin: Coordinate, destination: Coordinate, speed_kmh: float) -> float:
    """Seconds to cover the great-circle distance at ``speed_kmh``."""
    return haversine_km(origin, destination) / speed_kmh * 3600


def _batched(items: list[Coordinate], size: int) -> list[list[Coordinate]]:
    return [items[i : i + size] for i in range(0, len(items), size)]


class JourneySamplingStrategy(TimeEstimationStrategy):
    """Time a radial grid of destinations with an external journey planner."""

    name = StrategyName.JOURNEY_SAMPLING

    def __init__(
        self,
        lookup: DurationLookup,
        *,
        fallback_speed_kmh: float = TRANSIT_FALLBACK_SPEED_KMH,
        radii_deg: Sequence[float] = DEFAULT_RING_RADII_DEG,
        directions: int = DEFAULT_DIRECTIONS,
        batch_size: int = DEFAULT_BATCH_SIZE,
        batch_pause_s: float = DEFAULT_BATCH_PAUSE_S,
    ) -> None:
        self.lookup = lookup
        self.fallback_speed_kmh = fallback_speed_kmh
        self.radii_deg = tuple(radii_deg)
        self.directions = directions
        self.batch_size = max(1, batch_size)
        self.batch_pause_s = batch_pause_s

    @classmethod
    def from_settings(cls, settings: Settings) -> JourneySamplingStrategy:
        lookup = functools.partial(
            fetch_journey_duration,
            token=settings.navitia_token,
            coverage=settings.navitia_coverage,
            base_url=settings.navitia_api_url,
        )
        return cls(
            lookup,
            fallback_speed_kmh=settings.transit_fallback_speed_kmh,
            directions=settings.sample_directions,
            batch_size=settings.transit_batch_size,
            batch_pause_s=settings.transit_batch_pause_s,
        )

    def time_point(self, origin: Coordinate, destination: Coordinate) -> SampledPoint:
        """Duration to one destination; falls back after ``MAX_ATTEMPTS`` misses."""
        for attempt in range(1, MAX_ATTEMPTS + 1):
            try:
                duration = self.lookup(origin, destination)
            except (requests.RequestException, ValueError, KeyError) as e:
                logger.debug("Journey lookup %d/%d failed for %s: %s", attempt, MAX_ATTEMPTS, destination, e)
                continue
            if duration is not None and duration >= 0:
                return SampledPoint(coordinate=destination, duration_seconds=duration)
            logger.debug("Journey lookup %d/%d empty for %s", attempt, MAX_ATTEMPTS, destination)

        return SampledPoint(
            coordinate=destination,
            duration_seconds=fallback_duration(origin, destination, self.fallback_speed_kmh),
            estimated=True,
        )

    def sample(self, origin: Coordinate) -> list[SampledPoint]:
        """Time every destination on the grid, batch by batch."""
        destinations = radial_sample(origin, self.radii_deg, self.directions)
        batches = _batched(destinations, self.batch_size)

        points: list[SampledPoint] = []
        for i, batch in enumerate(batches):
            if i > 0 and self.batch_pause_s > 0:
                time.sleep(self.batch_pause_s)
            with ThreadPoolExecutor(max_workers=len(batch)) as pool:
                batch_points = list(pool.map(lambda d: self.time_point(origin, d), batch))
            points.extend(batch_points)
        return points

    def estimate(self, origin: Coordinate, thresholds: Sequence[TimeThreshold]) -> TimeEstimate:
        sampled = self.sample(origin)
        stats = EstimationStats(queried=len(sampled), fallbacks=sum(1 for p in sampled if p.estimated))
        logger.info(
            "Journey sampling: %d/%d from planner, %d estimated",
            stats.succeeded,
            stats.queried,
            stats.fallbacks,
        )

        # The origin is always reachable; keeps small bands anchored on it.
        points = [SampledPoint(coordinate=origin, duration_seconds=0.0), *sampled]
        return TimeEstimate(points=points, stats=stats)
