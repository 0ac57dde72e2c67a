"""Relay Auth Python SDK."""

from .async_client import AuthClient
from .client import SyncAuthClient
from .config import AuthClientConfig, TelemetryConfig
from .errors import (
    ApiError,
    AuthError,
    ErrorCode,
    InvalidConfigError,
    MalformedResponseError,
)
from .models import BootstrapResponse, ErrorEntry, TokenResponse
from .telemetry import configure_telemetry

__all__ = [
    "AuthClient",
    "SyncAuthClient",
    "AuthClientConfig",
    "TelemetryConfig",
    "AuthError",
    "ApiError",
    "MalformedResponseError",
    "InvalidConfigError",
    "ErrorCode",
    "BootstrapResponse",
    "ErrorEntry",
    "TokenResponse",
    "configure_telemetry",
]

__version__ = "0.1.0"
