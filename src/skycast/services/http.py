"""
Shared HTTP client with transient-error retry and a default timeout.

Provides a pre-configured ``requests.Session`` that retries idempotent
requests on gateway errors (502/503/504) with a short backoff. 429 is not
retried: rate limiting is reported to the caller straight away.  All
datasource modules should use this instead of bare ``requests.get``.

Usage::

    from skycast.services.http import session

    resp = session.get("https://api.open-meteo.com/v1/forecast", params={...})
    resp.raise_for_status()
"""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from skycast import __version__
from skycast.config import get_settings

#: Default retry strategy for flaky upstream gateways.
DEFAULT_RETRY = Retry(
    total=2,
    backoff_factor=0.5,  # 0s, 1s between retries
    status_forcelist=[502, 503, 504],
    allowed_methods=["GET", "HEAD", "OPTIONS"],
    raise_on_status=False,  # let resp.raise_for_status() handle it
)

DEFAULT_TIMEOUT = 10  # seconds

USER_AGENT = f"skycast/{__version__}"


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
    user_agent: str = USER_AGENT,
) -> requests.Session:
    """
    Build a ``requests.Session`` with retry adapter mounted.

    Args:
        retry: Custom retry strategy (defaults to ``DEFAULT_RETRY``).
        timeout: Default timeout applied to every request.
        user_agent: ``User-Agent`` header; Nominatim rejects anonymous clients.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or DEFAULT_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = user_agent

    # Wrap send to inject a default timeout so callers don't need to
    # remember to pass ``timeout=`` every time.
    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        if kwargs.get("timeout") is None:
            kwargs["timeout"] = timeout
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s


def session_from_settings() -> requests.Session:
    """Build a session using the timeout and User-Agent from ``Settings``."""
    settings = get_settings()
    return create_session(timeout=settings.http_timeout, user_agent=settings.user_agent)


#: Module-level session; import and use directly.
session: requests.Session = session_from_settings()
