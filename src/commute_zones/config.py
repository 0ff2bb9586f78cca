"""
Application settings.

Loaded from environment variables (``COMMUTE_ZONES_*``) and an optional
``.env`` file. Service credentials keep their conventional unprefixed
names (``ORS_API_KEY``, ``NAVITIA_API_TOKEN``).
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Value shipped in example config files; treated as "no key".
PLACEHOLDER_API_KEY = "YOUR_API_KEY_HERE"


class Settings(BaseSettings):
    """Runtime configuration for the commute-zones app."""

    model_config = SettingsConfigDict(
        env_prefix="COMMUTE_ZONES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    app_name: str = "commute-zones"
    app_env: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    # Default map center: Paris
    lat: float = 48.8566
    lon: float = 2.3522
    api_port: int = 8000
    site_dir: str = "site"

    # Geocoding (Nominatim)
    nominatim_url: str = "https://nominatim.openstreetmap.org"

    # Routing isochrones (OpenRouteService)
    ors_api_url: str = "https://api.openrouteservice.org"
    ors_api_key: str = Field(
        "",
        validation_alias=AliasChoices("ORS_API_KEY", "COMMUTE_ZONES_ORS_API_KEY"),
        description="OpenRouteService API key",
    )

    # Transit journeys (Navitia)
    navitia_api_url: str = "https://api.navitia.io/v1"
    navitia_coverage: str = "fr-idf"
    navitia_token: str = Field(
        "",
        validation_alias=AliasChoices("NAVITIA_API_TOKEN", "COMMUTE_ZONES_NAVITIA_TOKEN"),
        description="Navitia API token",
    )

    # Journey sampling
    sample_directions: int = Field(12, ge=1)
    transit_batch_size: int = Field(5, ge=1)
    transit_batch_pause_s: float = Field(0.5, ge=0)
    transit_fallback_speed_kmh: float = Field(8.0, gt=0)

    @property
    def has_ors_key(self) -> bool:
        return bool(self.ors_api_key) and self.ors_api_key != PLACEHOLDER_API_KEY

    @property
    def has_navitia_token(self) -> bool:
        return bool(self.navitia_token) and self.navitia_token != PLACEHOLDER_API_KEY


@lru_cache
def get_settings() -> Settings:
    """Process-wide settings, read once."""
    return Settings()
