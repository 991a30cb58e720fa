"""
Shared HTTP client factory.

One `httpx.AsyncClient` is opened per CLI run and injected into both the
random-user fetcher and the Parse client, so timeouts and headers are
configured in one place and tests can swap in an `httpx.MockTransport`.
"""

from __future__ import annotations

from typing import Optional

import httpx

from parse_seed import __version__
from parse_seed.config import Settings, get_settings

USER_AGENT = f"parse-seed/{__version__}"


def build_async_client(
    settings: Optional[Settings] = None,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    """
    Create an `httpx.AsyncClient` bounded by the configured timeout.

    Parameters
    ----------
    settings : Settings, optional
        Source of `http_timeout_seconds`; defaults to the cached settings.
    transport : httpx.AsyncBaseTransport, optional
        Transport override, mainly for tests.
    """
    settings = settings or get_settings()
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
        transport=transport,
    )


__all__ = ["USER_AGENT", "build_async_client"]
