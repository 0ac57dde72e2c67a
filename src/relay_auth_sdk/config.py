"""Configuration for Relay Auth SDK.

Uses Pydantic v2 for validation. The API root is fixed per environment and
chosen once at construction; the tenant hostname may be left unset and is
then resolved from the executing environment.
"""

from __future__ import annotations

import os
import socket
from typing import Annotated, Any, Self

from pydantic import BaseModel, ConfigDict, Field, HttpUrl, field_validator

from .errors import InvalidConfigError

DEFAULT_BASE_URL = "https://cantina-backend.signalwire.com/api/v1"
DEFAULT_HOSTNAME = "localhost"
HOSTNAME_ENV_VAR = "RELAY_AUTH_HOSTNAME"


def resolve_default_hostname() -> str:
    """Return the current host identifier, or ``localhost`` if none resolves."""
    from_env = os.environ.get(HOSTNAME_ENV_VAR, "").strip()
    if from_env:
        return from_env

    try:
        host = socket.gethostname()
    except OSError:
        return DEFAULT_HOSTNAME
    return host or DEFAULT_HOSTNAME


class TelemetryConfig(BaseModel):
    """Logging and tracing configuration."""

    model_config = ConfigDict(frozen=True)

    enabled: bool = True
    service_name: str = "relay-auth-sdk"
    log_level: str = "INFO"


class AuthClientConfig(BaseModel):
    """Main configuration for Relay Auth SDK."""

    model_config = ConfigDict(frozen=True, validate_default=True)

    base_url: HttpUrl = DEFAULT_BASE_URL  # type: ignore[assignment]
    hostname: str | None = None

    # HTTP settings
    timeout: Annotated[float, Field(gt=0, le=300)] = 30.0
    connect_timeout: Annotated[float, Field(gt=0, le=60)] = 10.0

    telemetry: TelemetryConfig = Field(default_factory=TelemetryConfig)

    @field_validator("hostname")
    @classmethod
    def validate_hostname(cls, v: str | None) -> str | None:
        """Treat a blank hostname as unset so it resolves from the environment."""
        if v is not None and not v.strip():
            return None
        return v

    @property
    def base_url_str(self) -> str:
        """Get base URL as string without trailing slash."""
        return str(self.base_url).rstrip("/")

    def resolved_hostname(self) -> str:
        """Configured hostname, falling back to the environment's host."""
        return self.hostname if self.hostname is not None else resolve_default_hostname()

    def with_overrides(self, **kwargs: Any) -> Self:
        """Create new config with overridden values."""
        data = self.model_dump()
        data.update(kwargs)
        return self.__class__(**data)

    @classmethod
    def from_env(cls, prefix: str = "RELAY_AUTH_") -> Self:
        """Create config from environment variables."""

        def get_env(key: str, default: Any = None) -> Any:
            return os.environ.get(f"{prefix}{key}", default)

        data: dict[str, Any] = {}

        base_url = get_env("BASE_URL")
        if base_url:
            data["base_url"] = base_url

        hostname = get_env("HOSTNAME")
        if hostname:
            data["hostname"] = hostname

        timeout = get_env("TIMEOUT")
        if timeout:
            try:
                data["timeout"] = float(timeout)
            except ValueError as e:
                msg = f"{prefix}TIMEOUT must be a number, got {timeout!r}"
                raise InvalidConfigError(msg, field="timeout") from e

        return cls(**data)
