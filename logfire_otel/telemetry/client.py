"""Logfire client: initialization, flat logging and span-scoped loggers.

initialize() returns an explicit Logfire handle. It also installs that
handle as the process default so the module-level helpers (info(), warn(),
new_span_logger(), ...) keep working without threading the client around.
"""

import logging
import threading

from opentelemetry import context as otel_context
from opentelemetry import trace
from opentelemetry.context import Context
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SpanExporter
from pydantic import ValidationError

from logfire_otel.core.config import LOGFIRE_TRACER_NAME, LogfireSettings, get_settings
from logfire_otel.core.exceptions import (
    ConfigurationException,
    NotInitializedException,
)
from logfire_otel.telemetry.logging import setup_logging
from logfire_otel.telemetry.provider import create_tracer_provider
from logfire_otel.telemetry.severity import Severity
from logfire_otel.telemetry.span_logger import SpanLogger, emit_log

logger = logging.getLogger(__name__)


class Logfire:
    """Handle to one configured tracer provider.

    Read-only after construction and safe to share between threads. Use
    shutdown() (or a with-block) at process exit to flush pending spans.
    """

    def __init__(self, tracer_provider: TracerProvider, service_name: str = "") -> None:
        """Initialize the client.

        Args:
            tracer_provider: Provider whose processors export the spans.
            service_name: Configured service name (also on the resource).
        """
        self.tracer_provider = tracer_provider
        self.service_name = service_name
        self.tracer = tracer_provider.get_tracer(LOGFIRE_TRACER_NAME)
        self._shutdown = False
        self._lock = threading.Lock()

    def log(self, severity: Severity, msg: str) -> None:
        """Emit msg under the current context (a new trace when no span is active)."""
        emit_log(self.tracer, msg, severity)

    def trace(self, msg: str) -> None:
        self.log(Severity.TRACE, msg)

    def debug(self, msg: str) -> None:
        self.log(Severity.DEBUG, msg)

    def info(self, msg: str) -> None:
        self.log(Severity.INFO, msg)

    def warn(self, msg: str) -> None:
        self.log(Severity.WARN, msg)

    warning = warn

    def error(self, msg: str) -> None:
        self.log(Severity.ERROR, msg)

    def fatal(self, msg: str) -> None:
        self.log(Severity.FATAL, msg)

    def span_logger(self, span_name: str, parent: Context | None = None) -> SpanLogger:
        """Start a new span and return a logger scoped to it.

        Args:
            span_name: Name of the new span.
            parent: Context of the parent scope (e.g. other.context). None uses
                the current context; Context() forces a new root span.
        """
        return SpanLogger.start(self.tracer, span_name, parent)

    def from_context(self, context: Context | None = None) -> SpanLogger:
        """Wrap the span already active in context (default: current context).

        Typical use is inside an instrumented request handler to log into the
        request span. Closing the result ends that span.
        """
        if context is None:
            context = otel_context.get_current()
        return SpanLogger.wrap(self.tracer, context)

    def force_flush(self, timeout_millis: int = 30000) -> bool:
        """Export queued spans now without shutting down."""
        return self.tracer_provider.force_flush(timeout_millis)

    def shutdown(self) -> None:
        """Flush and shut down the tracer provider. Errors are logged, not raised."""
        with self._lock:
            if self._shutdown:
                return
            self._shutdown = True
        try:
            self.tracer_provider.shutdown()
            logger.info("Telemetry shutdown complete")
        except Exception as e:
            logger.warning("Error shutting down tracer provider: %s", e)

    def __enter__(self) -> "Logfire":
        return self

    def __exit__(
        self, exc_type: type | None, exc_val: BaseException | None, exc_tb: object
    ) -> None:
        self.shutdown()


def initialize(
    service_name: str | None = None,
    endpoint: str | None = None,
    api_token: str | None = None,
    *,
    settings: LogfireSettings | None = None,
    span_exporter: SpanExporter | None = None,
    register_default: bool = True,
) -> Logfire:
    """Configure the OTLP pipeline and return a Logfire client.

    Explicit arguments override settings, which default to the environment
    (LOGFIRE_TOKEN, LOGFIRE_SERVICE_NAME, LOGFIRE_ENDPOINT, ...).

    Args:
        service_name: Service name for the resource.
        endpoint: Logfire base URL; spans are sent to <endpoint>/traces.
        api_token: Write token; falls back to LOGFIRE_TOKEN.
        settings: Base settings; read from the environment when omitted.
        span_exporter: Exporter override; the OTLP/HTTP exporter when omitted.
        register_default: Install the client as the module default.

    Returns:
        Ready-to-use Logfire client.

    Raises:
        ConfigurationException: No token, or invalid settings.
        SetupException: Exporter, resource or provider construction failed.
    """
    overrides = {
        key: value
        for key, value in (
            ("service_name", service_name),
            ("endpoint", endpoint),
            ("token", api_token),
        )
        if value is not None
    }
    try:
        if settings is None and not overrides:
            settings = get_settings()
        elif settings is None:
            settings = LogfireSettings(**overrides)
        elif overrides:
            settings = LogfireSettings(**{**settings.model_dump(), **overrides})
    except ValidationError as e:
        raise ConfigurationException(f"Invalid Logfire settings: {e}") from e

    if settings.debug:
        setup_logging(settings)

    if not settings.has_token:
        raise ConfigurationException(
            "A Logfire write token is required. Set LOGFIRE_TOKEN or pass api_token.",
            field="token",
        )

    provider = create_tracer_provider(settings, exporter=span_exporter)
    client = Logfire(provider, settings.service_name)
    if register_default:
        set_default(client)
    return client


_default: Logfire | None = None
_default_lock = threading.RLock()


def get_default() -> Logfire:
    """Return the default client installed by initialize().

    Raises:
        NotInitializedException: initialize() has not been called.
    """
    with _default_lock:
        if _default is None:
            raise NotInitializedException()
        return _default


def set_default(client: Logfire) -> None:
    """Set the default client used by the module-level helpers."""
    global _default
    with _default_lock:
        _default = client


def clear_default() -> None:
    """Forget the default client (does not shut it down)."""
    global _default
    with _default_lock:
        _default = None


def service_name() -> str:
    """Return the default client's service name."""
    return get_default().service_name


def tracer() -> trace.Tracer:
    """Return the default client's tracer for other OpenTelemetry integrations."""
    return get_default().tracer


def new_span_logger(span_name: str, parent: Context | None = None) -> SpanLogger:
    """Start a span-scoped logger on the default client."""
    return get_default().span_logger(span_name, parent)


def from_context(context: Context | None = None) -> SpanLogger:
    """Wrap the span in context using the default client."""
    return get_default().from_context(context)


def log(severity: Severity, msg: str) -> None:
    get_default().log(severity, msg)


def trace_(msg: str) -> None:
    get_default().trace(msg)


def debug(msg: str) -> None:
    get_default().debug(msg)


def info(msg: str) -> None:
    get_default().info(msg)


def warn(msg: str) -> None:
    get_default().warn(msg)


warning = warn


def error(msg: str) -> None:
    get_default().error(msg)


def fatal(msg: str) -> None:
    get_default().fatal(msg)
