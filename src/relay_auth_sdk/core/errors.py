"""Centralized error factory for Relay Auth SDK.

Turns a failed HTTP response into one of the SDK's typed errors so callers
branch on a single taxonomy.
"""

from __future__ import annotations

import uuid

import httpx

from ..errors import ApiError, AuthError, MalformedResponseError
from ..models import ErrorResponse


class ErrorFactory:
    """Centralized error creation with consistent structure.

    All errors created through this factory include:
    - Standardized error codes
    - The HTTP status of the failed response
    - A correlation ID for tracing
    """

    @staticmethod
    def generate_correlation_id() -> str:
        """Generate a unique correlation ID."""
        return str(uuid.uuid4())

    @staticmethod
    def from_response(
        response: httpx.Response,
        *,
        correlation_id: str | None = None,
    ) -> AuthError:
        """Create SDK error from a non-2xx HTTP response.

        Args:
            response: HTTP response object.
            correlation_id: Optional correlation ID for tracing.

        Returns:
            ``ApiError`` when the body holds an ``errors`` array,
            ``MalformedResponseError`` otherwise.
        """
        status = response.status_code
        correlation_id = correlation_id or ErrorFactory.generate_correlation_id()

        try:
            body = ErrorResponse.model_validate_json(response.content)
        except ValueError:
            # pydantic ValidationError included
            return MalformedResponseError(
                f"Request failed with status {status}",
                status_code=status,
                correlation_id=correlation_id,
            )

        return ApiError(
            body.errors,
            status_code=status,
            correlation_id=correlation_id,
        )

    @staticmethod
    def malformed_success(
        response: httpx.Response,
        *,
        correlation_id: str | None = None,
    ) -> MalformedResponseError:
        """Create error for a 2xx response whose body is not valid JSON."""
        return MalformedResponseError(
            f"Response with status {response.status_code} is not valid JSON",
            status_code=response.status_code,
            correlation_id=correlation_id or ErrorFactory.generate_correlation_id(),
        )
