"""Strategy interface shared by every isochrone source."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from collections.abc import Sequence

    from commute_zones.geometry import Coordinate, SampledPoint
    from commute_zones.reference import TimeThreshold
    from commute_zones.schemas import StrategyName


@dataclass
class EstimationStats:
    """How many per-point lookups answered versus fell back."""

    queried: int = 0
    fallbacks: int = 0

    @property
    def succeeded(self) -> int:
        return self.queried - self.fallbacks

    @property
    def accuracy(self) -> float:
        """Share of lookups answered by the external service (1.0 if none were made)."""
        if self.queried == 0:
            return 1.0
        return self.succeeded / self.queried


@dataclass
class TimeEstimate:
    """
    Output of a strategy.

    Sampling strategies fill ``points`` and leave hull construction to the
    assembler. Strategies that know their polygons up front fill
    ``boundaries`` (keyed by threshold minutes) and leave ``points`` as None.
    """

    points: list[SampledPoint] | None = None
    boundaries: dict[int, list[Coordinate]] = field(default_factory=dict)
    stats: EstimationStats = field(default_factory=EstimationStats)

    @property
    def is_sampled(self) -> bool:
        return self.points is not None


class TimeEstimationStrategy(ABC):
    """Turns an origin and a set of time bands into reachable-area data."""

    name: ClassVar[StrategyName]

    @abstractmethod
    def estimate(self, origin: Coordinate, thresholds: Sequence[TimeThreshold]) -> TimeEstimate:
        """Compute reachability for ``origin`` covering every threshold."""
