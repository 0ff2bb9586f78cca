"""Pick the isochrone strategy for a transport mode."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from commute_zones.errors import ConfigurationError
from commute_zones.estimation.constant_speed import ConstantSpeedStrategy
from commute_zones.estimation.journey_sampling import JourneySamplingStrategy
from commute_zones.estimation.routing_engine import RoutingEngineStrategy
from commute_zones.schemas import StrategyName, TransportMode

if TYPE_CHECKING:
    from commute_zones.config import Settings
    from commute_zones.estimation.base import TimeEstimationStrategy

logger = logging.getLogger(__name__)


def select_strategy(
    mode: TransportMode,
    settings: Settings,
    override: StrategyName | None = None,
) -> TimeEstimationStrategy:
    """
    Choose how to compute zones for ``mode``.

    Without an override: transit uses journey sampling when a Navitia token
    is configured; other modes use OpenRouteService when an ORS key is
    configured; everything else falls back to constant-speed circles.

    Raises:
        ConfigurationError: ``override`` names a strategy whose credentials are missing.
    """
    if override is StrategyName.CONSTANT_SPEED:
        return ConstantSpeedStrategy.for_mode(mode)

    if override is StrategyName.ROUTING_ENGINE:
        if not settings.has_ors_key:
            raise ConfigurationError(
                "Please configure your OpenRouteService API key (ORS_API_KEY)."
            )
        return RoutingEngineStrategy.for_mode(mode, settings)

    if override is StrategyName.JOURNEY_SAMPLING:
        if not settings.has_navitia_token:
            raise ConfigurationError("Please configure your Navitia API token (NAVITIA_API_TOKEN).")
        return JourneySamplingStrategy.from_settings(settings)

    if mode is TransportMode.PUBLIC_TRANSIT:
        if settings.has_navitia_token:
            return JourneySamplingStrategy.from_settings(settings)
    elif settings.has_ors_key:
        return RoutingEngineStrategy.for_mode(mode, settings)

    logger.debug("No credentials for %s; using constant-speed zones", mode)
    return ConstantSpeedStrategy.for_mode(mode)
