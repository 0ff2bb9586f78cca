"""Map upstream HTTP failures onto the user-facing error taxonomy."""

from __future__ import annotations

from typing import TYPE_CHECKING

from commute_zones.errors import AuthenticationFailed, RateLimited, UpstreamUnavailable

if TYPE_CHECKING:
    import requests


def raise_for_upstream_status(resp: requests.Response, service: str) -> None:
    """Raise the matching ``UpstreamUnavailable`` subclass for a non-2xx response."""
    if resp.ok:
        return

    status = resp.status_code
    if status in (401, 403):
        raise AuthenticationFailed(
            f"Invalid API key. Please check your {service} API key.",
            status_code=status,
            original_error=resp.text[:200],
        )
    if status == 429:
        raise RateLimited(
            "API rate limit exceeded. Please try again later.",
            status_code=status,
            original_error=resp.text[:200],
        )
    raise UpstreamUnavailable(
        f"{service} API error: {status}",
        status_code=status,
        original_error=resp.text[:200],
    )
