"""Travel-time bands and their map styling."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TimeThreshold:
    """A travel-time band and how it is drawn."""

    minutes: int
    color: str
    opacity: float = 0.3

    @property
    def seconds(self) -> int:
        return self.minutes * 60


DEFAULT_THRESHOLDS: tuple[TimeThreshold, ...] = (
    TimeThreshold(15, "#dc2626"),  # red
    TimeThreshold(30, "#ea580c"),  # orange
    TimeThreshold(45, "#eab308"),  # yellow
)

# Used for bands requested outside the defaults.
EXTRA_THRESHOLD_COLOR = "#2563eb"


def thresholds_for(minutes: list[int]) -> list[TimeThreshold]:
    """Map requested minutes to styled thresholds, reusing default colours."""
    by_minutes = {t.minutes: t for t in DEFAULT_THRESHOLDS}
    return [by_minutes.get(m, TimeThreshold(m, EXTRA_THRESHOLD_COLOR)) for m in minutes]
