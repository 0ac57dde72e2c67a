"""
Shared test fixtures for Relay Auth SDK tests.

Provides a recording fake transport, configuration,
and canned backend payloads.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import httpx
import pytest

from relay_auth_sdk.config import AuthClientConfig

HOSTNAME = "jest.relay.com"
BASE_URL = "https://auth.relay.test/api/v1"


class RecordingTransport(httpx.MockTransport):
    """MockTransport that answers with a canned response and keeps every request."""

    def __init__(
        self,
        status_code: int = 200,
        *,
        json_body: Any = None,
        content: bytes | None = None,
        error: Exception | None = None,
    ) -> None:
        self.requests: list[httpx.Request] = []
        self._status_code = status_code
        self._json_body = json_body
        self._content = content
        self._error = error
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._error is not None:
            raise self._error
        if self._content is not None:
            return httpx.Response(self._status_code, content=self._content)
        if self._json_body is None:
            return httpx.Response(self._status_code)
        return httpx.Response(self._status_code, json=self._json_body)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_body(self) -> bytes:
        return self.last_request.read()


@pytest.fixture
def base_config() -> AuthClientConfig:
    """Provide a basic SDK configuration for testing."""
    return AuthClientConfig(base_url=BASE_URL, hostname=HOSTNAME)


@pytest.fixture
def error_response() -> dict[str, Any]:
    """Provide the backend's structured failure body."""
    return {"errors": [{"detail": "Unauthorized", "code": "401"}]}


@pytest.fixture
def make_transport() -> Callable[..., RecordingTransport]:
    """Factory for recording transports."""
    return RecordingTransport


@pytest.fixture
def hostname() -> str:
    return HOSTNAME


@pytest.fixture
def base_url() -> str:
    return BASE_URL
