"""Unit tests for telemetry helpers."""

import asyncio
from collections.abc import Iterator

import httpx
import pytest
import structlog
from opentelemetry import trace
from structlog.testing import LogCapture

from relay_auth_sdk import telemetry
from relay_auth_sdk.async_client import AuthClient
from relay_auth_sdk.config import TelemetryConfig
from relay_auth_sdk.errors import ApiError


@pytest.fixture(autouse=True)
def reset_telemetry(monkeypatch) -> Iterator[None]:
    monkeypatch.setattr(telemetry, "_config", TelemetryConfig())
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def log_capture() -> LogCapture:
    """Route structlog output through the context merger into a capture."""
    capture = LogCapture()
    structlog.configure(processors=[structlog.contextvars.merge_contextvars, capture])
    return capture


class TestTelemetry:
    """Tests for tracer/logger setup."""

    def test_disabled_uses_noop_tracer(self) -> None:
        telemetry.configure_telemetry(TelemetryConfig(enabled=False))

        assert isinstance(telemetry.get_tracer(), trace.NoOpTracer)

    def test_get_logger_follows_reconfiguration(self, monkeypatch) -> None:
        """Logger name tracks the current service name, not the first lookup."""
        monkeypatch.setattr(structlog, "get_logger", lambda *args: args)

        before = telemetry.get_logger()
        telemetry.configure_telemetry(TelemetryConfig(enabled=False, service_name="billing"))

        assert before == ("relay-auth-sdk",)
        assert telemetry.get_logger() == ("billing",)

    @pytest.mark.parametrize(
        ("level", "expected"),
        [("debug", 10), ("INFO", 20), ("warning", 30), ("nonsense", 20)],
    )
    def test_log_level_to_int(self, level: str, expected: int) -> None:
        assert telemetry._log_level_to_int(level) == expected


class TestTraceOperation:
    """Tests for the per-operation span and log context."""

    def test_binds_operation_context(self) -> None:
        with telemetry.trace_operation("bootstrap", hostname="jest.relay.com"):
            bound = structlog.contextvars.get_contextvars()

        assert bound == {"operation": "bootstrap", "hostname": "jest.relay.com"}
        assert structlog.contextvars.get_contextvars() == {}

    def test_reraises_and_unbinds(self) -> None:
        with pytest.raises(RuntimeError, match="boom"):
            with telemetry.trace_operation("login"):
                raise RuntimeError("boom")

        assert structlog.contextvars.get_contextvars() == {}

    def test_yields_span(self) -> None:
        telemetry.configure_telemetry(TelemetryConfig(enabled=False))

        with telemetry.trace_operation("refresh") as span:
            assert isinstance(span, trace.Span)

    def test_failure_log_carries_operation_context(
        self, base_config, error_response, make_transport, log_capture
    ) -> None:
        """Logs emitted during a call include the bound operation and hostname."""
        client = AuthClient(
            base_config,
            http_client=httpx.AsyncClient(transport=make_transport(422, json_body=error_response)),
        )

        with pytest.raises(ApiError):
            asyncio.run(client.bootstrap())

        failure = next(entry for entry in log_capture.entries if entry["event"] == "Auth operation failed")
        assert failure["operation"] == "bootstrap"
        assert failure["hostname"] == "jest.relay.com"
        assert failure["code"] == "AUTH_1001"
        assert failure["status_code"] == 422

    def test_request_log_is_emitted(self, base_config, make_transport, log_capture) -> None:
        client = AuthClient(
            base_config,
            http_client=httpx.AsyncClient(transport=make_transport(json_body={"jwt_token": "t"})),
        )

        asyncio.run(client.refresh())

        completed = [entry for entry in log_capture.entries if entry["event"] == "Auth request completed"]
        assert len(completed) == 1
        assert completed[0]["operation"] == "refresh"
        assert completed[0]["method"] == "PUT"
        assert completed[0]["status_code"] == 200
