"""Centralized request executors for Relay Auth SDK.

Each executor sends exactly one request per call and branches on the
response status: decoded JSON on 2xx, a typed ``AuthError`` otherwise.
Transport failures raised by httpx propagate unchanged. There is no retry.
"""

from __future__ import annotations

from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from ..errors import MalformedResponseError
from ..models import AuthRequest
from ..telemetry import get_logger, get_tracer
from .errors import ErrorFactory

ModelT = TypeVar("ModelT", bound=BaseModel)


def build_httpx_request(
    client: httpx.Client | httpx.AsyncClient,
    request: AuthRequest,
) -> httpx.Request:
    """Translate an ``AuthRequest`` into an ``httpx.Request``.

    With ``credentials="include"`` the request is built through the client
    so its cookie jar is attached. ``"omit"`` builds a bare request that
    still carries the client's default headers and timeout but no cookies.
    """
    if request.credentials == "include":
        return client.build_request(
            request.method,
            request.url,
            headers=request.headers,
            content=request.body,
        )

    headers = httpx.Headers(client.headers)
    headers.update(request.headers)
    return httpx.Request(
        request.method,
        request.url,
        headers=headers,
        content=request.body,
        extensions={"timeout": client.timeout.as_dict()},
    )


def decode_response(response: httpx.Response) -> Any:
    """Decode a response or raise the matching ``AuthError``.

    Args:
        response: Response received from the transport.

    Returns:
        Decoded JSON body, or ``None`` when a 2xx body is empty.

    Raises:
        ApiError: Non-2xx with an ``errors`` array.
        MalformedResponseError: Non-2xx without one, or undecodable 2xx body.
    """
    if not response.is_success:
        raise ErrorFactory.from_response(response)

    if not response.content.strip():
        return None

    try:
        return response.json()
    except ValueError as e:
        raise ErrorFactory.malformed_success(response) from e


def _log_response(request: AuthRequest, response: httpx.Response) -> None:
    get_logger().debug(
        "Auth request completed",
        method=request.method,
        url=request.url,
        status_code=response.status_code,
    )


class SyncRequestExecutor:
    """Synchronous single-shot request executor."""

    def __init__(self, client: httpx.Client) -> None:
        """Initialize sync request executor.

        Args:
            client: HTTP client used as transport.
        """
        self._client = client

    def execute(self, request: AuthRequest) -> Any:
        """Send request and decode the response.

        Args:
            request: Request descriptor.

        Returns:
            Decoded JSON body (``None`` for an empty body).

        Raises:
            AuthError: Failure status or malformed body.
            httpx.HTTPError: Transport failure, unwrapped.
        """
        with get_tracer().start_as_current_span(
            "relay_auth.http_request",
            attributes={"http.method": request.method, "http.url": request.url},
        ) as span:
            response = self._client.send(build_httpx_request(self._client, request))
            span.set_attribute("http.status_code", response.status_code)
            _log_response(request, response)
            return decode_response(response)


class AsyncRequestExecutor:
    """Asynchronous single-shot request executor."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        """Initialize async request executor.

        Args:
            client: Async HTTP client used as transport.
        """
        self._client = client

    async def execute(self, request: AuthRequest) -> Any:
        """Send request and decode the response.

        Args:
            request: Request descriptor.

        Returns:
            Decoded JSON body (``None`` for an empty body).

        Raises:
            AuthError: Failure status or malformed body.
            httpx.HTTPError: Transport failure, unwrapped.
        """
        with get_tracer().start_as_current_span(
            "relay_auth.http_request",
            attributes={"http.method": request.method, "http.url": request.url},
        ) as span:
            response = await self._client.send(
                build_httpx_request(self._client, request)
            )
            span.set_attribute("http.status_code", response.status_code)
            _log_response(request, response)
            return decode_response(response)


def parse_payload(model: type[ModelT], payload: Any) -> ModelT:
    """Validate a decoded success body against the operation's model.

    Raises:
        MalformedResponseError: Body does not have the expected shape.
    """
    try:
        return model.model_validate(payload if payload is not None else {})
    except ValidationError as e:
        raise MalformedResponseError(
            f"Unexpected {model.__name__} payload: {e.error_count()} validation error(s)",
            correlation_id=ErrorFactory.generate_correlation_id(),
        ) from e
