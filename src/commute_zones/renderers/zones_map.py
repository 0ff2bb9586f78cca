"""Leaflet map renderer for commute zones.

Zones arrive largest-first and are added to the map in that order, so the
smaller, more reachable bands sit on top.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from commute_zones.reference import MODE_PROFILES, mode_label
from commute_zones.renderers import render_template

if TYPE_CHECKING:
    from commute_zones.isochrones import IsochroneResult, Zone
    from commute_zones.schemas import TransportMode

DEFAULT_ZOOM = 13
ZONE_WEIGHT = 2
ZONE_STROKE_OPACITY = 0.8


def _zone_payload(zone: Zone) -> dict[str, Any]:
    return {
        "minutes": zone.minutes,
        "label": zone.label,
        "color": zone.color,
        "fillOpacity": zone.opacity,
        "weight": ZONE_WEIGHT,
        "opacity": ZONE_STROKE_OPACITY,
        "estimated": round(zone.estimated_share * 100),
        "latlngs": [c.as_lat_lon() for c in zone.boundary],
    }


def build_zones_map_html(result: IsochroneResult, origin_label: str) -> tuple[str, str]:
    """Build the map container and the script that draws ``result`` on it.

    Returns a (map_div_html, map_script_js) tuple.
    """
    map_div = render_template(
        "zones_map.html.j2",
        mode_label=mode_label(result.mode),
        zone_count=len(result.zones),
        strategy=str(result.strategy),
        stats=result.stats,
    )
    map_script = render_template(
        "zones_map_script.html.j2",
        center=result.origin.as_lat_lon(),
        zoom=DEFAULT_ZOOM,
        origin_label=origin_label,
        zones=[_zone_payload(z) for z in result.zones],
        bounds=result.bounds.as_leaflet() if result.bounds else None,
    )
    return (map_div, map_script)


def build_page(
    result: IsochroneResult | None,
    origin_label: str = "",
    *,
    mode: TransportMode | None = None,
    error: str | None = None,
) -> str:
    """Full HTML page: zones map when ``result`` is given, error banner when ``error`` is."""
    map_div, map_script = ("", "")
    if result is not None:
        map_div, map_script = build_zones_map_html(result, origin_label)

    selected = result.mode if result is not None else mode
    return render_template(
        "base.html.j2",
        title="Commute Zones",
        origin_label=origin_label,
        modes=[(str(m), p.label) for m, p in MODE_PROFILES.items()],
        selected_mode=str(selected) if selected else "",
        map_div=map_div,
        map_script=map_script,
        error=error,
    )
