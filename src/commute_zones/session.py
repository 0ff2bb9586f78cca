"""
Per-user map state and request sequencing.

A ``MapSession`` holds what the page currently shows (origin marker, mode,
zones). Every computation starts with ``begin()``, which hands out a
``RequestContext`` with a fresh, strictly increasing ``request_id``. When a
computation finishes, ``apply()`` installs its result only if no newer
request has been started since; otherwise the result is dropped so a slow,
superseded request can never overwrite a fresher one.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from commute_zones.reference import DEFAULT_THRESHOLDS
from commute_zones.schemas import TransportMode

if TYPE_CHECKING:
    from commute_zones.geometry import Bounds, Coordinate
    from commute_zones.isochrones import IsochroneResult, Zone
    from commute_zones.reference import TimeThreshold

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RequestContext:
    """Everything one isochrone computation needs to know."""

    request_id: int
    origin: Coordinate
    mode: TransportMode
    auto_fit: bool = False
    label: str = "Selected Location"
    thresholds: tuple[TimeThreshold, ...] = DEFAULT_THRESHOLDS


@dataclass
class MapSession:
    """What one user's map currently shows."""

    mode: TransportMode = TransportMode.WALKING
    origin: Coordinate | None = None
    origin_label: str | None = None
    zones: list[Zone] = field(default_factory=list)
    bounds: Bounds | None = None
    thresholds: tuple[TimeThreshold, ...] = DEFAULT_THRESHOLDS
    _latest_request: int = 0
    _applied_request: int = 0
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    @property
    def latest_request(self) -> int:
        return self._latest_request

    @property
    def applied_request(self) -> int:
        return self._applied_request

    def begin(
        self,
        origin: Coordinate,
        label: str | None = None,
        mode: TransportMode | None = None,
        auto_fit: bool | None = None,
    ) -> RequestContext:
        """
        Start a computation for ``origin``, superseding any in flight.

        ``auto_fit`` defaults to True until a result has been applied;
        after that, clicks and mode changes keep the current view.

        Previous zones are cleared up front, so a failed computation leaves
        an empty map rather than zones for another origin.
        """
        with self._lock:
            first = self._applied_request == 0
            self._latest_request += 1
            self.zones = []
            self.bounds = None
            request_id = self._latest_request
            if mode is not None:
                self.mode = mode
            self.origin = origin
            self.origin_label = label or self.origin_label or "Selected Location"
            return RequestContext(
                request_id=request_id,
                origin=origin,
                mode=self.mode,
                auto_fit=first if auto_fit is None else auto_fit,
                label=self.origin_label,
                thresholds=self.thresholds,
            )

    def select_mode(self, mode: TransportMode) -> RequestContext | None:
        """Switch mode; returns a context to recompute the current origin, if any."""
        if self.origin is None:
            self.mode = mode
            return None
        return self.begin(self.origin, mode=mode)

    def apply(self, result: IsochroneResult) -> bool:
        """Install ``result`` unless a newer request has started. Returns True if installed."""
        with self._lock:
            if result.request_id != self._latest_request:
                logger.info(
                    "Dropping stale result %d (latest is %d)",
                    result.request_id,
                    self._latest_request,
                )
                return False
            self.zones = list(result.zones)
            self.bounds = result.bounds
            self._applied_request = result.request_id
            return True
