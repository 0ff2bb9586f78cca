"""Prefect flows.

- zones.py  build_zone_map: origin → zones → static Leaflet page
"""

from commute_zones.flows.zones import build_zone_map

__all__ = ["build_zone_map"]
