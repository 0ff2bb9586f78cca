"""Navitia journey-planner client configuration.

API docs: https://doc.navitia.io/#journeys
Requires API token: NAVITIA_API_TOKEN env var.

Journey lookups get their own session with HTTP-level retries disabled:
the sampling strategy retries each point exactly once and then falls back
to a distance estimate, so urllib3 backoff would only slow the batch down.
"""

from __future__ import annotations

from commute_zones.services.http import NO_RETRY, create_session

NAVITIA_API = "https://api.navitia.io/v1"
JOURNEYS_ENDPOINT = "coverage/{coverage}/journeys"
DEFAULT_COVERAGE = "fr-idf"  # Ile-de-France
DATETIME_FORMAT = "%Y%m%dT%H%M%S"

JOURNEY_TIMEOUT = 15  # seconds

journey_session = create_session(retry=NO_RETRY, timeout=JOURNEY_TIMEOUT)
