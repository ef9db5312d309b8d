"""Telemetry: OpenTelemetry pipeline, Logfire client and span-scoped loggers."""

from logfire_otel.telemetry.client import (
    Logfire,
    clear_default,
    get_default,
    initialize,
    set_default,
)
from logfire_otel.telemetry.handler import LogfireHandler
from logfire_otel.telemetry.logging import setup_logging
from logfire_otel.telemetry.provider import (
    create_exporter,
    create_resource,
    create_tracer_provider,
)
from logfire_otel.telemetry.severity import Severity
from logfire_otel.telemetry.span_logger import SpanLogger, emit_log

__all__ = [
    "setup_logging",
    "Logfire",
    "initialize",
    "get_default",
    "set_default",
    "clear_default",
    "create_exporter",
    "create_resource",
    "create_tracer_provider",
    "Severity",
    "SpanLogger",
    "emit_log",
    "LogfireHandler",
]
