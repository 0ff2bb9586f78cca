"""
Isochrone assembly: strategy output → layered zones.

For every threshold, largest first so bigger zones are drawn underneath,
the assembler either filters the sampled point cloud to the points reachable
within the threshold and hulls them, or takes the boundary the strategy
already computed. Bands whose boundary has fewer than 3 distinct vertices are
dropped: they cannot be drawn as a filled shape.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from commute_zones.estimation import EstimationStats, TimeEstimate
from commute_zones.geometry import Bounds, convex_hull
from commute_zones.reference import mode_label

if TYPE_CHECKING:
    from collections.abc import Sequence

    from commute_zones.estimation import TimeEstimationStrategy
    from commute_zones.geometry import Coordinate
    from commute_zones.reference import TimeThreshold
    from commute_zones.schemas import StrategyName, TransportMode
    from commute_zones.session import RequestContext

logger = logging.getLogger(__name__)

MIN_POLYGON_POINTS = 3
FIT_PADDING = 0.1


@dataclass
class Zone:
    """One drawable travel-time band."""

    threshold: TimeThreshold
    boundary: list[Coordinate]
    label: str
    estimated_share: float = 0.0

    @property
    def minutes(self) -> int:
        return self.threshold.minutes

    @property
    def color(self) -> str:
        return self.threshold.color

    @property
    def opacity(self) -> float:
        return self.threshold.opacity


@dataclass
class IsochroneResult:
    """Everything the presentation layer needs for one request."""

    request_id: int
    origin: Coordinate
    mode: TransportMode
    strategy: StrategyName
    zones: list[Zone] = field(default_factory=list)
    bounds: Bounds | None = None
    stats: EstimationStats = field(default_factory=EstimationStats)

    @property
    def is_empty(self) -> bool:
        return not self.zones


def zone_label(minutes: int, mode: TransportMode) -> str:
    return f"{minutes} minutes by {mode_label(mode)}"


def assemble_zones(
    estimate: TimeEstimate,
    thresholds: Sequence[TimeThreshold],
    mode: TransportMode,
) -> list[Zone]:
    """Build zones largest-first, skipping degenerate bands."""
    zones: list[Zone] = []
    for threshold in sorted(thresholds, key=lambda t: t.minutes, reverse=True):
        estimated_share = 0.0
        if estimate.points is not None:
            reachable = [p for p in estimate.points if p.duration_seconds <= threshold.seconds]
            boundary = convex_hull(p.coordinate for p in reachable)
            if reachable:
                estimated_share = sum(1 for p in reachable if p.estimated) / len(reachable)
        else:
            boundary = estimate.boundaries.get(threshold.minutes, [])

        distinct = len(set(boundary))
        if distinct < MIN_POLYGON_POINTS:
            logger.debug("Skipping %d min band: %d distinct boundary point(s)", threshold.minutes, distinct)
            continue

        zones.append(
            Zone(
                threshold=threshold,
                boundary=boundary,
                label=zone_label(threshold.minutes, mode),
                estimated_share=estimated_share,
            )
        )
    return zones


def build_isochrones(context: RequestContext, strategy: TimeEstimationStrategy) -> IsochroneResult:
    """
    Run ``strategy`` for the request and assemble its zones.

    When ``context.auto_fit`` is set and at least one zone was produced, the
    result carries padded bounds for the map to frame; otherwise ``bounds``
    stays None so the view does not move.
    """
    estimate = strategy.estimate(context.origin, context.thresholds)
    zones = assemble_zones(estimate, context.thresholds, context.mode)

    bounds = None
    if context.auto_fit and zones:
        box = Bounds.from_coordinates(c for z in zones for c in z.boundary)
        bounds = box.padded(FIT_PADDING) if box else None

    logger.info(
        "Request %d: %d zone(s) via %s for %s",
        context.request_id,
        len(zones),
        strategy.name,
        context.mode,
    )
    return IsochroneResult(
        request_id=context.request_id,
        origin=context.origin,
        mode=context.mode,
        strategy=strategy.name,
        zones=zones,
        bounds=bounds,
        stats=estimate.stats,
    )
