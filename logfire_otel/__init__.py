"""Send leveled log messages to Logfire as OpenTelemetry spans.

Usage:

    import logfire_otel

    client = logfire_otel.initialize(service_name="my-service")
    logfire_otel.info("started")
    with client.span_logger("work") as scope:
        scope.warn("inside the span")
    client.shutdown()

Not affiliated with Pydantic.
"""

from logfire_otel.core.config import SERVICE_VERSION, LogfireSettings, get_settings
from logfire_otel.core.exceptions import (
    ConfigurationException,
    LogfireException,
    NotInitializedException,
    ScopeClosedException,
    SetupException,
)
from logfire_otel.telemetry.client import (
    Logfire,
    clear_default,
    debug,
    error,
    fatal,
    from_context,
    get_default,
    info,
    initialize,
    log,
    new_span_logger,
    service_name,
    set_default,
    tracer,
    warn,
    warning,
)
from logfire_otel.telemetry.client import trace_ as trace
from logfire_otel.telemetry.handler import LogfireHandler
from logfire_otel.telemetry.severity import Severity
from logfire_otel.telemetry.span_logger import SpanLogger

__version__ = SERVICE_VERSION

__all__ = [
    "LogfireSettings",
    "get_settings",
    "LogfireException",
    "ConfigurationException",
    "SetupException",
    "NotInitializedException",
    "ScopeClosedException",
    "Logfire",
    "initialize",
    "get_default",
    "set_default",
    "clear_default",
    "service_name",
    "tracer",
    "new_span_logger",
    "from_context",
    "log",
    "trace",
    "debug",
    "info",
    "warn",
    "warning",
    "error",
    "fatal",
    "Severity",
    "SpanLogger",
    "LogfireHandler",
]
