"""Core components for Relay Auth SDK.

Request building, dispatch and error translation shared between the sync
and async clients.
"""

from __future__ import annotations

from .errors import ErrorFactory
from .http_executor import AsyncRequestExecutor, SyncRequestExecutor
from .request_builder import RequestBuilder

__all__ = [
    "ErrorFactory",
    "RequestBuilder",
    "SyncRequestExecutor",
    "AsyncRequestExecutor",
]
