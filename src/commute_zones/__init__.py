"""Commute Zones - 15/30/45 minute reachability maps.

Architecture::

    geometry/      Pure math: haversine, radial sampling, convex hull
    estimation/    Strategies: routing engine, journey sampling, constant speed
    datasources/   External APIs (Nominatim, OpenRouteService, Navitia)
    isochrones.py  Assembler: strategy output → layered zones
    session.py     Per-user map state, request sequencing (stale results dropped)
    service.py     Entry points: search, click, change mode
    renderers/     Pure data → HTML (Leaflet page)
    flows/         Prefect orchestration (compute zones, write page)
    services/      Shared utilities (HTTP client with retry)

Data flow: origin → sampled points → timed points → per-threshold hulls → zones → page

Extension points (see each package's docstring for step-by-step guides):
  - New data source:   datasources/__init__.py
  - New strategy:      estimation/__init__.py
  - New page renderer: renderers/__init__.py
"""

__version__ = "0.1.0"
__author__ = "Michael Howden"

from commute_zones.config import Settings
from commute_zones.service import CommuteMap

__all__ = ["CommuteMap", "Settings", "__version__"]
