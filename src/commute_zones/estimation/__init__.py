"""Travel-time estimation strategies.

Each strategy turns (origin, thresholds) into a ``TimeEstimate``:

  - constant_speed: circles from an assumed speed, no network
  - journey_sampling: radial grid timed by Navitia, with distance fallback
  - routing_engine: polygons straight from OpenRouteService
  - selection: select_strategy(mode, settings, override)

Adding a strategy
-----------------
1. Subclass ``TimeEstimationStrategy`` and set ``name``.
2. Return either ``TimeEstimate(points=...)`` (the assembler hulls them) or
   ``TimeEstimate(boundaries=...)`` keyed by threshold minutes.
3. Add a ``StrategyName`` member and a branch in ``select_strategy``.
"""

from commute_zones.estimation.base import EstimationStats, TimeEstimate, TimeEstimationStrategy
from commute_zones.estimation.constant_speed import ConstantSpeedStrategy
from commute_zones.estimation.journey_sampling import JourneySamplingStrategy, fallback_duration
from commute_zones.estimation.routing_engine import RoutingEngineStrategy
from commute_zones.estimation.selection import select_strategy

__all__ = [
    "ConstantSpeedStrategy",
    "EstimationStats",
    "JourneySamplingStrategy",
    "RoutingEngineStrategy",
    "TimeEstimate",
    "TimeEstimationStrategy",
    "fallback_duration",
    "select_strategy",
]
