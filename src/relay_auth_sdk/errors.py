"""Error classes for Relay Auth SDK.

Every failed auth call surfaces as an ``AuthError`` subclass carrying an
error code, the HTTP status and a correlation ID. Transport failures raised
by httpx are not wrapped and reach the caller unchanged.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .models import ErrorEntry


class ErrorCode(StrEnum):
    """Standardized error codes for Relay Auth SDK."""

    # Response errors (1xxx)
    API_ERROR = "AUTH_1001"
    MALFORMED_RESPONSE = "AUTH_1002"

    # Configuration errors (2xxx)
    INVALID_CONFIG = "VAL_2001"


class AuthError(Exception):
    """Base error for Relay Auth SDK with structured error information."""

    def __init__(
        self,
        message: str,
        code: ErrorCode | str,
        *,
        status_code: int | None = None,
        correlation_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code.value if isinstance(code, ErrorCode) else code
        self.status_code = status_code
        self.correlation_id = correlation_id
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        return {
            "error": self.message,
            "code": self.code,
            "status_code": self.status_code,
            "correlation_id": self.correlation_id,
            "details": self.details,
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class ApiError(AuthError):
    """The backend answered with a failure status and an ``errors`` list."""

    def __init__(
        self,
        errors: list[ErrorEntry],
        *,
        status_code: int,
        correlation_id: str | None = None,
    ) -> None:
        message = errors[0].detail if errors else f"Request failed with status {status_code}"
        super().__init__(
            message,
            ErrorCode.API_ERROR,
            status_code=status_code,
            correlation_id=correlation_id,
            details={"errors": [entry.model_dump() for entry in errors]},
        )
        self.errors = list(errors)


class MalformedResponseError(AuthError):
    """Response body could not be decoded into the expected shape."""

    def __init__(
        self,
        message: str = "Malformed response from auth backend",
        *,
        status_code: int | None = None,
        correlation_id: str | None = None,
    ) -> None:
        super().__init__(
            message,
            ErrorCode.MALFORMED_RESPONSE,
            status_code=status_code,
            correlation_id=correlation_id,
        )


class InvalidConfigError(AuthError):
    """Invalid SDK configuration."""

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
    ) -> None:
        super().__init__(
            message,
            ErrorCode.INVALID_CONFIG,
            details={"field": field} if field else None,
        )
