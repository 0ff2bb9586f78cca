"""Fastest door-to-door transit journey between two points."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from commute_zones.datasources.navitia.client import (
    DATETIME_FORMAT,
    DEFAULT_COVERAGE,
    JOURNEYS_ENDPOINT,
    NAVITIA_API,
    journey_session,
)
from commute_zones.geometry import Coordinate


def _place(c: Coordinate) -> str:
    """Navitia addresses raw coordinates as ``lon;lat``."""
    return f"{c.lon};{c.lat}"


def fastest_duration(data: dict[str, Any]) -> float | None:
    """Shortest ``duration`` (seconds) among returned journeys, or None."""
    durations = [
        float(j["duration"]) for j in data.get("journeys") or [] if j.get("duration") is not None
    ]
    return min(durations) if durations else None


def fetch_journey_duration(
    origin: Coordinate,
    destination: Coordinate,
    *,
    token: str,
    coverage: str = DEFAULT_COVERAGE,
    base_url: str = NAVITIA_API,
    departure: datetime | None = None,
) -> float | None:
    """
    Travel time of the fastest itinerary departing now (or at ``departure``).

    Returns:
        Duration in seconds, or None when the planner found no journey.

    Raises:
        requests.RequestException: Connection failure or non-2xx response.
    """
    url = f"{base_url.rstrip('/')}/{JOURNEYS_ENDPOINT.format(coverage=coverage)}"
    params = {
        "from": _place(origin),
        "to": _place(destination),
        "datetime": (departure or datetime.now()).strftime(DATETIME_FORMAT),
        "datetime_represents": "departure",
    }
    resp = journey_session.get(url, params=params, headers={"Authorization": token})
    resp.raise_for_status()
    data: dict[str, Any] = resp.json()
    return fastest_duration(data)
