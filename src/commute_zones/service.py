"""
User-interaction entry points.

``CommuteMap`` ties the pieces together for one user: address search, map
click and mode change each start a new request on the ``MapSession``, pick
the strategy for the current mode, build the zones and apply them if the
request is still the latest.

Geocoding and routing failures raise (``InputError``,
``UpstreamUnavailable``) before anything is applied, so the map never shows
a partial zone set.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import ValidationError

from commute_zones.config import get_settings
from commute_zones.datasources.nominatim import geocode_address
from commute_zones.errors import InputError
from commute_zones.estimation import select_strategy
from commute_zones.geometry import Coordinate
from commute_zones.isochrones import build_isochrones
from commute_zones.schemas import IsochroneRequest, StrategyName, TransportMode
from commute_zones.session import MapSession

if TYPE_CHECKING:
    from commute_zones.config import Settings
    from commute_zones.isochrones import IsochroneResult
    from commute_zones.session import RequestContext

logger = logging.getLogger(__name__)

DEFAULT_LABEL = "Selected Location"


class CommuteMap:
    """One user's commute map: search, click, change mode."""

    def __init__(
        self,
        settings: Settings | None = None,
        session: MapSession | None = None,
        strategy: StrategyName | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.session = session or MapSession()
        self.strategy = strategy

    def search(self, address: str) -> IsochroneResult | None:
        """Geocode ``address`` and compute zones around the match."""
        query = (address or "").strip()
        if not query:
            raise InputError("Please enter a location")

        match = geocode_address(query, base_url=self.settings.nominatim_url)
        if match is None:
            raise InputError("Location not found. Please try a different address.")

        context = self.session.begin(match.coordinate, label=match.display_name)
        return self._compute(context)

    def click(self, lat: float, lon: float) -> IsochroneResult | None:
        """Compute zones around a clicked map position."""
        origin = validate_origin(lat, lon)
        context = self.session.begin(origin, label=DEFAULT_LABEL)
        return self._compute(context)

    def change_mode(self, mode: TransportMode | str) -> IsochroneResult | None:
        """Switch transport mode; recomputes if an origin is already set."""
        try:
            parsed = mode if isinstance(mode, TransportMode) else TransportMode.parse(mode)
        except ValueError as e:
            raise InputError(f"Unknown transport mode: {mode}") from e

        context = self.session.select_mode(parsed)
        if context is None:
            return None
        return self._compute(context)

    def _compute(self, context: RequestContext) -> IsochroneResult | None:
        strategy = select_strategy(context.mode, self.settings, self.strategy)
        result = build_isochrones(context, strategy)
        if not self.session.apply(result):
            return None
        return result


def validate_origin(lat: float, lon: float) -> Coordinate:
    """Range-check a clicked or typed coordinate."""
    try:
        request = IsochroneRequest(lat=lat, lon=lon)
    except ValidationError as e:
        raise InputError(f"Invalid location: {lat}, {lon}") from e
    return Coordinate(lat=request.lat, lon=request.lon)
