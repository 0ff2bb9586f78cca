"""Nominatim (OpenStreetMap) geocoding constants.

API docs: https://nominatim.org/release-docs/latest/api/Search/
Usage policy: max 1 req/s, identifying User-Agent required.
"""

NOMINATIM_API = "https://nominatim.openstreetmap.org"
SEARCH_ENDPOINT = "search"
SERVICE_NAME = "Nominatim"
