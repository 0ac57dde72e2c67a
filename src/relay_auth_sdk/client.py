"""Relay Auth SDK sync client and shared client state."""

from __future__ import annotations

from typing import Any, Self

import httpx

from .config import AuthClientConfig
from .core.http_executor import SyncRequestExecutor, parse_payload
from .core.request_builder import RequestBuilder
from .errors import AuthError, InvalidConfigError
from .http import create_http_client
from .models import AuthRequest, BootstrapResponse, TokenResponse
from .telemetry import get_logger, trace_operation


class BaseAuthClient:
    """Hostname and API root handling shared by sync and async clients.

    ``base_url`` is fixed when the client is built. ``hostname`` may be
    reassigned at any time and is read whenever a request is built.
    """

    def __init__(
        self,
        config: AuthClientConfig | None = None,
        *,
        hostname: str | None = None,
    ) -> None:
        self.config = config or AuthClientConfig()
        self._base_url = self.config.base_url_str
        # empty or blank means "not supplied"
        if hostname is None or not hostname.strip():
            hostname = self.config.resolved_hostname()
        self.hostname = hostname
        self._builder = RequestBuilder(self._base_url)

    @property
    def base_url(self) -> str:
        """API root all requests are sent to."""
        return self._base_url

    @property
    def hostname(self) -> str:
        """Tenant hostname sent with ``bootstrap``."""
        return self._hostname

    @hostname.setter
    def hostname(self, value: str) -> None:
        if not isinstance(value, str) or not value.strip():
            raise InvalidConfigError("hostname must be a non-empty string", field="hostname")
        self._hostname = value

    def _log_failure(self, error: AuthError) -> None:
        # operation and hostname come from the bound log context
        get_logger().warning("Auth operation failed", **error.to_dict())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(base_url={self._base_url!r}, hostname={self._hostname!r})"


class SyncAuthClient(BaseAuthClient):
    """Synchronous Relay auth client."""

    def __init__(
        self,
        config: AuthClientConfig | None = None,
        *,
        hostname: str | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        """Initialize sync client.

        Args:
            config: SDK configuration.
            hostname: Tenant hostname; resolved from the environment if omitted.
            http_client: Transport to use. Not closed by this client.
        """
        super().__init__(config, hostname=hostname)
        self._owns_http = http_client is None
        self._http = http_client or create_http_client(self.config)
        self._executor = SyncRequestExecutor(self._http)

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_http:
            self._http.close()

    def bootstrap(self) -> BootstrapResponse:
        """Fetch the deployment configuration for the current hostname."""
        hostname = self.hostname
        with trace_operation("bootstrap", hostname=hostname):
            payload = self._execute(self._builder.bootstrap(hostname))
            return parse_payload(BootstrapResponse, payload)

    def login(self, username: str, project_id: str) -> TokenResponse:
        """Log in and obtain a JWT."""
        with trace_operation("login"):
            payload = self._execute(self._builder.login(username, project_id))
            return parse_payload(TokenResponse, payload)

    def refresh(self) -> TokenResponse:
        """Exchange the current session for a fresh JWT."""
        with trace_operation("refresh"):
            payload = self._execute(self._builder.refresh())
            return parse_payload(TokenResponse, payload)

    def logout(self) -> None:
        """End the current session."""
        with trace_operation("logout"):
            self._execute(self._builder.logout())

    def _execute(self, request: AuthRequest) -> Any:
        try:
            return self._executor.execute(request)
        except AuthError as e:
            self._log_failure(e)
            raise
