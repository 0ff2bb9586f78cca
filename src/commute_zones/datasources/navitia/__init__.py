"""Navitia transit journey data source.

Answers "how long does the fastest transit itinerary take from A to B if I
leave now", including walking, waiting and transfers.

Public API:
  - journeys: fetch_journey_duration, fastest_duration
  - client: API URL, coverage default, dedicated no-retry session
"""

from commute_zones.datasources.navitia.client import DEFAULT_COVERAGE, NAVITIA_API
from commute_zones.datasources.navitia.journeys import fastest_duration, fetch_journey_duration

__all__ = [
    "DEFAULT_COVERAGE",
    "NAVITIA_API",
    "fastest_duration",
    "fetch_journey_duration",
]
