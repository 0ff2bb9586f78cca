"""Isochrones delegated to the OpenRouteService routing engine."""

from __future__ import annotations

from typing import TYPE_CHECKING

from commute_zones.datasources.openrouteservice import ORS_API, fetch_isochrones
from commute_zones.estimation.base import TimeEstimate, TimeEstimationStrategy
from commute_zones.reference import MODE_PROFILES
from commute_zones.schemas import StrategyName

if TYPE_CHECKING:
    from collections.abc import Sequence

    from commute_zones.config import Settings
    from commute_zones.geometry import Coordinate
    from commute_zones.reference import TimeThreshold
    from commute_zones.schemas import TransportMode


class RoutingEngineStrategy(TimeEstimationStrategy):
    """One isochrone request returns every band's polygon; no sampling."""

    name = StrategyName.ROUTING_ENGINE

    def __init__(self, profile: str, api_key: str, base_url: str = ORS_API) -> None:
        self.profile = profile
        self.api_key = api_key
        self.base_url = base_url

    @classmethod
    def for_mode(cls, mode: TransportMode, settings: Settings) -> RoutingEngineStrategy:
        return cls(
            profile=MODE_PROFILES[mode].ors_profile,
            api_key=settings.ors_api_key,
            base_url=settings.ors_api_url,
        )

    def estimate(self, origin: Coordinate, thresholds: Sequence[TimeThreshold]) -> TimeEstimate:
        rings = fetch_isochrones(
            origin,
            self.profile,
            [t.seconds for t in thresholds],
            api_key=self.api_key,
            base_url=self.base_url,
        )
        return TimeEstimate(boundaries={t.minutes: rings.get(t.seconds, []) for t in thresholds})
