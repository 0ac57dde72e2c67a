"""HTTP client factories for Relay Auth SDK.

The auth clients accept any ``httpx.Client``/``httpx.AsyncClient``; these
helpers build the default one from configuration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

from .telemetry import SDK_NAME, SDK_VERSION

if TYPE_CHECKING:
    from .config import AuthClientConfig


def _timeout(config: AuthClientConfig) -> httpx.Timeout:
    return httpx.Timeout(
        connect=config.connect_timeout,
        read=config.timeout,
        write=config.timeout,
        pool=config.timeout,
    )


def _default_headers() -> dict[str, str]:
    return {
        "User-Agent": f"{SDK_NAME}/{SDK_VERSION} Python",
        "Accept": "application/json",
    }


def create_http_client(config: AuthClientConfig) -> httpx.Client:
    """Create configured sync HTTP client.

    Args:
        config: SDK configuration.

    Returns:
        Configured httpx.Client.
    """
    return httpx.Client(
        timeout=_timeout(config),
        headers=_default_headers(),
        follow_redirects=False,
    )


def create_async_http_client(config: AuthClientConfig) -> httpx.AsyncClient:
    """Create configured async HTTP client.

    Args:
        config: SDK configuration.

    Returns:
        Configured httpx.AsyncClient.
    """
    return httpx.AsyncClient(
        timeout=_timeout(config),
        headers=_default_headers(),
        follow_redirects=False,
    )
