"""OpenRouteService API constants.

API docs: https://openrouteservice.org/dev/#/api-docs/v2/isochrones
Free tier: 500 isochrone requests/day, 20/min.
Requires API key: ORS_API_KEY env var.
"""

ORS_API = "https://api.openrouteservice.org"
ISOCHRONES_ENDPOINT = "v2/isochrones/{profile}"
SERVICE_NAME = "OpenRouteService"
