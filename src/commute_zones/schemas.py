"""
Request-level models.

Pydantic models for what the embedding application hands us. Geometry and
results are plain dataclasses (see ``geometry.models`` and ``isochrones``).
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field, field_validator

# =============================================================================
# Enums
# =============================================================================


class TransportMode(StrEnum):
    """How the user travels from the origin."""

    WALKING = "walking"
    CYCLING = "cycling"
    DRIVING = "driving"
    PUBLIC_TRANSIT = "public-transit"

    @classmethod
    def parse(cls, value: str) -> TransportMode:
        """Accept our names as well as OpenRouteService profile names."""
        normalized = value.strip().lower()
        aliases = {
            "foot-walking": cls.WALKING,
            "cycling-regular": cls.CYCLING,
            "driving-car": cls.DRIVING,
            "transit": cls.PUBLIC_TRANSIT,
        }
        if normalized in aliases:
            return aliases[normalized]
        return cls(normalized)


class StrategyName(StrEnum):
    """Isochrone strategies, one per original app variant."""

    ROUTING_ENGINE = "routing-engine"
    JOURNEY_SAMPLING = "journey-sampling"
    CONSTANT_SPEED = "constant-speed"


# =============================================================================
# Requests
# =============================================================================


class IsochroneRequest(BaseModel):
    """Where, how, and which travel-time bands."""

    model_config = {"str_strip_whitespace": True}

    lat: float = Field(..., ge=-90, le=90, description="Origin latitude (WGS84)")
    lon: float = Field(..., ge=-180, le=180, description="Origin longitude (WGS84)")
    mode: TransportMode = Field(default=TransportMode.WALKING)
    thresholds: list[int] = Field(default_factory=lambda: [15, 30, 45])

    @field_validator("mode", mode="before")
    @classmethod
    def _parse_mode(cls, value: object) -> object:
        if isinstance(value, str):
            return TransportMode.parse(value)
        return value

    @field_validator("thresholds")
    @classmethod
    def _check_thresholds(cls, value: list[int]) -> list[int]:
        if not value:
            raise ValueError("at least one threshold is required")
        for minutes in value:
            if not 0 < minutes <= 120:
                raise ValueError(f"threshold {minutes} min is outside 1..120")
        return sorted(set(value))
