"""
Shared HTTP client with automatic retry and backoff.

Provides a pre-configured ``requests.Session`` that retries on transient
network errors (timeouts, connection resets, 429/502/503/504) with
exponential backoff. Datasource modules use this instead of bare
``requests.get``.

Usage::

    from commute_zones.services.http import session

    resp = session.get("https://nominatim.openstreetmap.org/search", params={...})
    resp.raise_for_status()
"""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

#: Default retry strategy for idempotent requests.
DEFAULT_RETRY = Retry(
    total=3,
    backoff_factor=1,  # 0s, 1s, 2s between retries
    status_forcelist=[429, 502, 503, 504],
    allowed_methods=["GET", "HEAD", "OPTIONS"],
    raise_on_status=False,  # let callers map the final status to an error
)

#: No HTTP-level retries; for callers that run their own retry policy.
NO_RETRY = Retry(total=0, raise_on_status=False)

DEFAULT_TIMEOUT = 30  # seconds

USER_AGENT = "commute-zones/0.1 (+https://github.com/mihow/commute-zones)"


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> requests.Session:
    """
    Build a ``requests.Session`` with retry adapter mounted.

    Args:
        retry: Custom retry strategy (defaults to ``DEFAULT_RETRY``).
        timeout: Default timeout applied to every request.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry if retry is not None else DEFAULT_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    # Nominatim's usage policy requires an identifying User-Agent.
    s.headers["User-Agent"] = USER_AGENT

    # Inject a default timeout so callers don't need to pass ``timeout=``.
    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        kwargs.setdefault("timeout", timeout)
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s


#: Module-level session: import and use directly.
session: requests.Session = create_session()
