"""Async Relay Auth SDK client.

Obtains, refreshes and invalidates the session JWT used by the calling SDK.
The client is a stateless translator: it never stores the token, and any
operation may be called at any time. Callers own the session lifecycle.
"""

from __future__ import annotations

from typing import Any, Self

import httpx

from .client import BaseAuthClient
from .config import AuthClientConfig
from .core.http_executor import AsyncRequestExecutor, parse_payload
from .errors import AuthError
from .http import create_async_http_client
from .models import AuthRequest, BootstrapResponse, TokenResponse
from .telemetry import trace_operation


class AuthClient(BaseAuthClient):
    """Asynchronous Relay auth client."""

    def __init__(
        self,
        config: AuthClientConfig | None = None,
        *,
        hostname: str | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize async client.

        Args:
            config: SDK configuration.
            hostname: Tenant hostname; resolved from the environment if omitted.
            http_client: Transport to use. Not closed by this client.
        """
        super().__init__(config, hostname=hostname)
        self._owns_http = http_client is None
        self._http = http_client or create_async_http_client(self.config)
        self._executor = AsyncRequestExecutor(self._http)

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_http:
            await self._http.aclose()

    async def bootstrap(self) -> BootstrapResponse:
        """Fetch the deployment configuration for the current hostname.

        Returns:
            Configuration object (``project_id`` and any other keys).

        Raises:
            ApiError: Backend rejected the request.
            MalformedResponseError: Response body could not be decoded.
        """
        hostname = self.hostname
        with trace_operation("bootstrap", hostname=hostname):
            payload = await self._execute(self._builder.bootstrap(hostname))
            return parse_payload(BootstrapResponse, payload)

    async def login(self, username: str, project_id: str) -> TokenResponse:
        """Log in and obtain a JWT.

        Args:
            username: User to authenticate.
            project_id: Project the session belongs to.

        Returns:
            Token payload containing ``jwt_token``.

        Raises:
            ApiError: Backend rejected the credentials.
            MalformedResponseError: Response body could not be decoded.
        """
        with trace_operation("login"):
            payload = await self._execute(self._builder.login(username, project_id))
            return parse_payload(TokenResponse, payload)

    async def refresh(self) -> TokenResponse:
        """Exchange the current session for a fresh JWT.

        The session is identified by the cookies held by the transport.
        """
        with trace_operation("refresh"):
            payload = await self._execute(self._builder.refresh())
            return parse_payload(TokenResponse, payload)

    async def logout(self) -> None:
        """End the current session."""
        with trace_operation("logout"):
            await self._execute(self._builder.logout())

    async def _execute(self, request: AuthRequest) -> Any:
        try:
            return await self._executor.execute(request)
        except AuthError as e:
            self._log_failure(e)
            raise
