"""Isochrone polygons computed by the OpenRouteService routing engine."""

from __future__ import annotations

import logging
from typing import Any

import requests

from commute_zones.datasources.openrouteservice.client import (
    ISOCHRONES_ENDPOINT,
    ORS_API,
    SERVICE_NAME,
)
from commute_zones.errors import UpstreamUnavailable
from commute_zones.geometry import Coordinate
from commute_zones.services.http import session
from commute_zones.services.upstream import raise_for_upstream_status

logger = logging.getLogger(__name__)


def _outer_ring(geometry: dict[str, Any]) -> list[Coordinate]:
    """Outer ring of a Polygon (or the first polygon of a MultiPolygon), without the closing vertex."""
    coords = geometry.get("coordinates") or []
    if geometry.get("type") == "MultiPolygon":
        coords = coords[0] if coords else []
    if not coords:
        return []

    ring = [Coordinate(lat=float(lat), lon=float(lon)) for lon, lat, *_ in coords[0]]
    if len(ring) > 1 and ring[0] == ring[-1]:
        ring.pop()
    return ring


def parse_isochrones(data: dict[str, Any], ranges_s: list[int]) -> dict[int, list[Coordinate]]:
    """
    Key each returned feature by its range in seconds.

    ORS echoes the range in ``properties.value``; when it is missing the
    feature order is assumed to follow ``ranges_s``.
    """
    rings: dict[int, list[Coordinate]] = {}
    for i, feature in enumerate(data.get("features") or []):
        value = (feature.get("properties") or {}).get("value")
        if value is None:
            if i >= len(ranges_s):
                continue
            value = ranges_s[i]
        rings[int(value)] = _outer_ring(feature.get("geometry") or {})
    return rings


def fetch_isochrones(
    origin: Coordinate,
    profile: str,
    ranges_s: list[int],
    *,
    api_key: str,
    base_url: str = ORS_API,
) -> dict[int, list[Coordinate]]:
    """
    Request time isochrones for one origin.

    Args:
        origin: Start point.
        profile: ORS profile (``foot-walking``, ``cycling-regular``, ``driving-car``).
        ranges_s: Travel-time limits in seconds.
        api_key: ORS API key, sent as the ``Authorization`` header.
        base_url: ORS instance.

    Returns:
        Outer ring per range in seconds.

    Raises:
        UpstreamUnavailable: Connection failure, non-2xx response or unreadable body
            (``AuthenticationFailed`` for 401/403, ``RateLimited`` for 429).
    """
    url = f"{base_url.rstrip('/')}/{ISOCHRONES_ENDPOINT.format(profile=profile)}"
    payload = {
        "locations": [origin.as_lon_lat()],
        "range": ranges_s,
        "range_type": "time",
    }
    headers = {"Authorization": api_key, "Content-Type": "application/json"}

    logger.info("Requesting ORS isochrones: profile=%s ranges=%s", profile, ranges_s)
    try:
        resp = session.post(url, json=payload, headers=headers)
    except requests.RequestException as e:
        logger.error("ORS connection failed: %s", e)
        raise UpstreamUnavailable(
            "Error generating commute zones. Please try again.", original_error=str(e)
        ) from e

    raise_for_upstream_status(resp, SERVICE_NAME)
    try:
        data: dict[str, Any] = resp.json()
    except ValueError as e:
        logger.error("ORS returned a non-JSON body: %s", e)
        raise UpstreamUnavailable(
            "Error generating commute zones. Please try again.",
            status_code=resp.status_code,
            original_error=resp.text[:200],
        ) from e
    rings = parse_isochrones(data, ranges_s)
    if not rings:
        logger.warning("ORS returned no isochrone features.")
    return rings
