"""Tracing and structured logging for auth calls.

Each client operation runs inside ``trace_operation``: one OpenTelemetry
span named ``relay_auth.<operation>`` and a matching set of structlog
context variables, so log lines emitted further down (by the request
executor) carry the operation and its context without passing them along.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import structlog
from opentelemetry import trace

from .config import TelemetryConfig

SDK_NAME = "relay-auth-sdk"
SDK_VERSION = "0.1.0"

_config = TelemetryConfig()


def get_tracer() -> trace.Tracer:
    """Tracer for the configured service, or a no-op one when disabled."""
    if not _config.enabled:
        return trace.NoOpTracer()
    return trace.get_tracer(_config.service_name, SDK_VERSION)


def get_logger() -> Any:
    """Logger for the configured service.

    Looked up on every call so a later ``configure_telemetry`` applies to
    clients that already exist.
    """
    return structlog.get_logger(_config.service_name)


def configure_telemetry(config: TelemetryConfig) -> None:
    """Apply telemetry settings.

    With telemetry enabled, structlog renders JSON filtered at
    ``config.log_level``. Disabling only switches tracing off; the host
    application's structlog setup is left alone.
    """
    global _config
    _config = config

    if not config.enabled:
        return

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            _log_level_to_int(config.log_level)
        ),
        cache_logger_on_first_use=False,
    )


def _log_level_to_int(level: str) -> int:
    return logging.getLevelNamesMapping().get(level.upper(), logging.INFO)


@contextmanager
def trace_operation(operation: str, **context: Any) -> Iterator[trace.Span]:
    """Run one auth operation inside its span and log context.

    Args:
        operation: Operation name, e.g. ``"bootstrap"``.
        **context: Extra values bound to log lines and set as
            ``relay_auth.<key>`` span attributes.

    Yields:
        The operation's span.
    """
    attributes = {f"relay_auth.{key}": value for key, value in context.items()}
    with structlog.contextvars.bound_contextvars(operation=operation, **context):
        # exceptions are recorded on the span and re-raised by OpenTelemetry
        with get_tracer().start_as_current_span(
            f"relay_auth.{operation}",
            attributes=attributes,
        ) as span:
            yield span
