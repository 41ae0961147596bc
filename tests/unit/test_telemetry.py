"""Span exporter selection and the traced decorator."""

import pytest
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.trace.export import ConsoleSpanExporter

from app.shared.telemetry import TelemetryConfig, traced
from app.shared.telemetry.telemetry import build_span_exporter


def test_exporter_none_disables_export() -> None:
    assert build_span_exporter("none", None) is None


def test_otlp_without_endpoint_falls_back_to_console() -> None:
    assert isinstance(build_span_exporter("otlp", None), ConsoleSpanExporter)


def test_otlp_with_endpoint() -> None:
    exporter = build_span_exporter("otlp", "http://localhost:4317")
    assert isinstance(exporter, OTLPSpanExporter)


def test_unknown_exporter_falls_back_to_console() -> None:
    assert isinstance(build_span_exporter("zipkin", None), ConsoleSpanExporter)


def test_disabled_config_creates_no_provider() -> None:
    telemetry = TelemetryConfig("skillsnap", "1.0.0", enabled=False)
    assert telemetry.setup_telemetry() is None
    assert not telemetry.active
    telemetry.instrument_redis()
    telemetry.shutdown()


async def test_traced_async_returns_result_and_propagates_errors() -> None:
    @traced("test.async")
    async def double(value: int) -> int:
        if value < 0:
            raise ValueError("negative")
        return value * 2

    assert await double(value=4) == 8
    with pytest.raises(ValueError):
        await double(value=-1)


def test_traced_sync() -> None:
    @traced()
    def add(a: int, b: int) -> int:
        return a + b

    assert add(1, b=2) == 3
