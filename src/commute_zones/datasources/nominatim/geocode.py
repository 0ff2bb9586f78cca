"""Free-text address search."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import requests

from commute_zones.datasources.nominatim.client import NOMINATIM_API, SEARCH_ENDPOINT, SERVICE_NAME
from commute_zones.errors import UpstreamUnavailable
from commute_zones.geometry import Coordinate
from commute_zones.services.http import session
from commute_zones.services.upstream import raise_for_upstream_status

logger = logging.getLogger(__name__)


@dataclass
class GeocodeResult:
    """Best match for an address search."""

    coordinate: Coordinate
    display_name: str


def _parse_result(item: dict[str, Any]) -> GeocodeResult | None:
    """Parse one Nominatim hit. Returns None if it has no usable position."""
    try:
        lat = float(item["lat"])
        lon = float(item["lon"])
    except (KeyError, TypeError, ValueError):
        return None
    name = item.get("display_name") or f"{lat:.5f}, {lon:.5f}"
    return GeocodeResult(coordinate=Coordinate(lat=lat, lon=lon), display_name=name)


def geocode_address(address: str, *, base_url: str = NOMINATIM_API) -> GeocodeResult | None:
    """
    Look up the best match for a free-text address.

    Args:
        address: Non-empty search text.
        base_url: Nominatim instance.

    Returns:
        The first hit, or None when nothing matched.

    Raises:
        UpstreamUnavailable: The service could not be reached, answered non-2xx
            or sent an unreadable body.
    """
    params = {"format": "json", "q": address, "limit": 1}
    url = f"{base_url.rstrip('/')}/{SEARCH_ENDPOINT}"
    try:
        resp = session.get(url, params=params)
    except requests.RequestException as e:
        logger.error("Geocoding request failed: %s", e)
        raise UpstreamUnavailable(
            "Error searching for location. Please try again.", original_error=str(e)
        ) from e

    raise_for_upstream_status(resp, SERVICE_NAME)
    try:
        data: list[dict[str, Any]] = resp.json() or []
    except ValueError as e:
        logger.error("Geocoding returned a non-JSON body: %s", e)
        raise UpstreamUnavailable(
            "Error searching for location. Please try again.",
            status_code=resp.status_code,
            original_error=resp.text[:200],
        ) from e
    if not data:
        logger.info("No geocoding match for %r", address)
        return None
    return _parse_result(data[0])
