"""Per-mode constants: display labels, assumed speeds and ORS profiles."""

from __future__ import annotations

from dataclasses import dataclass

from commute_zones.schemas import TransportMode


@dataclass(frozen=True)
class ModeProfile:
    """Static facts about a transport mode."""

    mode: TransportMode
    label: str
    speed_kmh: float
    ors_profile: str


MODE_PROFILES: dict[TransportMode, ModeProfile] = {
    TransportMode.WALKING: ModeProfile(TransportMode.WALKING, "walking", 5.0, "foot-walking"),
    TransportMode.CYCLING: ModeProfile(TransportMode.CYCLING, "cycling", 15.0, "cycling-regular"),
    TransportMode.DRIVING: ModeProfile(TransportMode.DRIVING, "driving", 40.0, "driving-car"),
    # ORS has no transit profile; cycling speeds are the closest stand-in.
    TransportMode.PUBLIC_TRANSIT: ModeProfile(
        TransportMode.PUBLIC_TRANSIT, "public transit", 20.0, "cycling-regular"
    ),
}

# Door-to-door transit including walking, waiting and transfers.
TRANSIT_FALLBACK_SPEED_KMH: float = 8.0


def mode_label(mode: TransportMode) -> str:
    """Human-readable mode name used in zone popups."""
    return MODE_PROFILES[mode].label
