"""
Prefect flow that builds a static commute-zones page.

Resolves the origin (address or coordinates), computes the zones for the
chosen mode and writes a standalone Leaflet page.

Run locally:
    python -m commute_zones.flows.zones

Run with Prefect dashboard:
    prefect server start &
    python -m commute_zones.flows.zones
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from prefect import flow, task
from prefect.cache_policies import NO_CACHE
from pydantic import ValidationError

from commute_zones.config import get_settings
from commute_zones.errors import CommuteZonesError, InputError
from commute_zones.isochrones import IsochroneResult
from commute_zones.reference import thresholds_for
from commute_zones.renderers.zones_map import build_page
from commute_zones.schemas import IsochroneRequest, StrategyName, TransportMode
from commute_zones.service import DEFAULT_LABEL, CommuteMap
from commute_zones.session import MapSession

PAGE_NAME = "index.html"


@task(name="validate-request", cache_policy=NO_CACHE)
def validate_request(
    lat: float,
    lon: float,
    mode: str,
    thresholds: list[int] | None = None,
) -> IsochroneRequest:
    """Check mode and thresholds before any network call."""
    try:
        if thresholds is None:
            return IsochroneRequest(lat=lat, lon=lon, mode=mode)
        return IsochroneRequest(lat=lat, lon=lon, mode=mode, thresholds=thresholds)
    except ValidationError as e:
        raise InputError(f"Invalid request: {e.errors()[0]['msg']}") from e


@task(name="compute-zones", cache_policy=NO_CACHE)
def compute_zones(
    request: IsochroneRequest,
    address: str | None = None,
    strategy: StrategyName | None = None,
) -> tuple[IsochroneResult | None, str]:
    """Compute zones around ``address`` if given, else around the request coordinates."""
    session = MapSession(mode=request.mode, thresholds=tuple(thresholds_for(request.thresholds)))
    commute_map = CommuteMap(get_settings(), session=session, strategy=strategy)
    if address:
        result = commute_map.search(address)
    else:
        result = commute_map.click(request.lat, request.lon)
    return result, session.origin_label or DEFAULT_LABEL


@task(name="render-page", cache_policy=NO_CACHE)
def render_page(
    result: IsochroneResult | None,
    origin_label: str,
    mode: TransportMode | None = None,
    error: str | None = None,
) -> str:
    """Render the full HTML page."""
    return build_page(result, origin_label, mode=mode, error=error)


@task(name="write-page", cache_policy=NO_CACHE)
def write_page(html: str, output: Path) -> Path:
    """Write HTML to ``output``."""
    output.parent.mkdir(parents=True, exist_ok=True)
    with output.open("w") as f:
        f.write(html)
    return output


@flow(name="build-zone-map", log_prints=True)
def build_zone_map(
    address: str | None = None,
    lat: float | None = None,
    lon: float | None = None,
    mode: str = "walking",
    strategy: str | None = None,
    thresholds: list[int] | None = None,
    output: str | None = None,
) -> dict[str, Any]:
    """
    Build a commute-zones page for one origin.

    User-facing errors (bad input, unreachable services) end up in the
    page's error banner instead of aborting the flow.
    """
    settings = get_settings()
    output_path = Path(output) if output else Path(settings.site_dir) / PAGE_NAME
    chosen = StrategyName(strategy) if strategy else None

    result: IsochroneResult | None = None
    selected_mode: TransportMode | None = None
    origin_label = ""
    error: str | None = None
    try:
        request = validate_request(
            lat if lat is not None else settings.lat,
            lon if lon is not None else settings.lon,
            mode,
            thresholds,
        )
        selected_mode = request.mode
        where = f"'{address}'" if address else f"({request.lat}, {request.lon})"
        print(f"Computing {request.mode} zones for {where}...")
        result, origin_label = compute_zones(request, address, chosen)
    except CommuteZonesError as e:
        print(f"Error: {e.message}")
        error = e.message

    html = render_page(result, origin_label, mode=selected_mode, error=error)
    path = write_page(html, output_path)
    print(f"Page written: {path}")

    return {
        "output": str(path),
        "zones": len(result.zones) if result else 0,
        "strategy": str(result.strategy) if result else None,
        "error": error,
    }


if __name__ == "__main__":
    summary = build_zone_map()
    print(f"Flow complete: {summary}")
