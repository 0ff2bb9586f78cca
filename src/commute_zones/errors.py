"""
Exception taxonomy.

Every error that reaches the user carries a ready-to-display ``message``.
Per-point journey failures never appear here: they are absorbed by the
fallback estimate in ``estimation.journey_sampling``.
"""

from __future__ import annotations

from typing import Any


class CommuteZonesError(Exception):
    """Base class for errors surfaced to the user."""

    def __init__(self, message: str, payload: dict[str, Any] | None = None) -> None:
        self.message = message
        self.payload = payload or {}
        super().__init__(message)


class InputError(CommuteZonesError):
    """Empty or invalid address/origin, or an address that could not be found."""


class ConfigurationError(CommuteZonesError):
    """A strategy was requested whose service credentials are not configured."""


class UpstreamUnavailable(CommuteZonesError):
    """Geocoding or routing service answered non-2xx or could not be reached."""

    def __init__(self, message: str, status_code: int | None = None, original_error: str = "") -> None:
        super().__init__(
            message,
            payload={"status_code": status_code, "original_error": str(original_error)},
        )
        self.status_code = status_code


class AuthenticationFailed(UpstreamUnavailable):
    """Service rejected the API key (HTTP 401/403)."""


class RateLimited(UpstreamUnavailable):
    """Service rate limit exceeded (HTTP 429)."""
