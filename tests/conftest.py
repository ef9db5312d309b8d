"""Pytest configuration and fixtures for logfire_otel.

Spans are captured with the SDK's InMemorySpanExporter behind a
SimpleSpanProcessor, so finished spans are visible as soon as they end.
"""

import pytest
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

from logfire_otel.core.config import get_settings
from logfire_otel.telemetry.client import Logfire, clear_default

_LOGFIRE_ENV_VARS = (
    "LOGFIRE_TOKEN",
    "LOGFIRE_SERVICE_NAME",
    "LOGFIRE_ENDPOINT",
    "LOGFIRE_SERVICE_VERSION",
    "LOGFIRE_BATCH_TIMEOUT_SECONDS",
    "LOGFIRE_REGISTER_GLOBAL",
    "LOGFIRE_DEBUG",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Isolate each test from LOGFIRE_* env vars, any local .env and the default client.

    Global provider registration is disabled so tests never touch the
    process-wide OpenTelemetry tracer provider.
    """
    for name in _LOGFIRE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("LOGFIRE_REGISTER_GLOBAL", "false")
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    clear_default()
    yield
    clear_default()
    get_settings.cache_clear()


@pytest.fixture
def exporter() -> InMemorySpanExporter:
    """In-memory exporter collecting finished spans."""
    return InMemorySpanExporter()


@pytest.fixture
def client(exporter: InMemorySpanExporter) -> Logfire:
    """Logfire client exporting synchronously into the in-memory exporter."""
    provider = TracerProvider(resource=Resource(attributes={SERVICE_NAME: "svc-test"}))
    provider.add_span_processor(SimpleSpanProcessor(exporter))
    logfire = Logfire(provider, "svc-test")
    yield logfire
    logfire.shutdown()
