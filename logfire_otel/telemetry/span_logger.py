"""Span-scoped logger and the log-record emitter shared with the flat API.

Every log call becomes one short-lived span carrying the fixed logfire.*
attributes. A SpanLogger wraps one open span and parents its log records
(and any nested scopes) on that span's context.
"""

import threading

from opentelemetry import trace
from opentelemetry.context import Context
from opentelemetry.trace import Status, StatusCode

from logfire_otel.core.exceptions import ScopeClosedException
from logfire_otel.telemetry.severity import Severity

SPAN_TYPE_LOG = "log"
MSG_TEMPLATE = "log message template"

ATTR_SPAN_TYPE = "logfire.span_type"
ATTR_MSG_TEMPLATE = "logfire.msg_template"
ATTR_MSG = "logfire.msg"
ATTR_LEVEL_NUM = "logfire.level_num"


def emit_log(
    tracer: trace.Tracer,
    msg: str,
    severity: Severity,
    context: Context | None = None,
) -> None:
    """Send one log record as a span named after the message.

    Args:
        tracer: Tracer that owns the record.
        msg: Log message; also used as the span name.
        severity: Level forwarded as logfire.level_num.
        context: Parent context; None uses the current context.
    """
    span = tracer.start_span(msg, context=context)
    try:
        span.set_attributes(
            {
                ATTR_SPAN_TYPE: SPAN_TYPE_LOG,
                ATTR_MSG_TEMPLATE: MSG_TEMPLATE,
                ATTR_MSG: msg,
                ATTR_LEVEL_NUM: int(severity),
            }
        )
    finally:
        span.end()


class SpanLogger:
    """Logger bound to one span; log calls and child scopes nest under it.

    Open until close() (or the end of a with-block). Every operation on a
    closed logger raises ScopeClosedException.
    """

    def __init__(
        self,
        tracer: trace.Tracer,
        span: trace.Span,
        context: Context,
        span_name: str | None = None,
    ) -> None:
        self._tracer = tracer
        self._span = span
        self._context = context
        self._span_name = span_name
        self._closed = False
        self._lock = threading.Lock()

    @classmethod
    def start(
        cls,
        tracer: trace.Tracer,
        span_name: str,
        parent: Context | None = None,
    ) -> "SpanLogger":
        """Start a new span under parent and wrap it.

        Args:
            tracer: Tracer that owns the span.
            span_name: Name of the new span.
            parent: Context carrying the parent span; None uses the current
                context, an empty Context() starts a new trace.
        """
        span = tracer.start_span(span_name, context=parent)
        return cls(tracer, span, trace.set_span_in_context(span, parent), span_name)

    @classmethod
    def wrap(cls, tracer: trace.Tracer, context: Context) -> "SpanLogger":
        """Wrap the span already carried by context without starting a new one.

        Closing the returned logger ends that span even though this logger
        did not start it.
        """
        span = trace.get_current_span(context)
        return cls(tracer, span, context, getattr(span, "name", None))

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def span_name(self) -> str | None:
        return self._span_name

    @property
    def context(self) -> Context:
        """Context of this scope; pass it as parent to nest further work."""
        self._ensure_open()
        return self._context

    @property
    def span(self) -> trace.Span:
        self._ensure_open()
        return self._span

    def _ensure_open(self) -> None:
        if self._closed:
            raise ScopeClosedException(self._span_name)

    def log(self, severity: Severity, msg: str) -> None:
        """Emit msg with the given severity as a child of this scope."""
        self._ensure_open()
        emit_log(self._tracer, msg, severity, self._context)

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

    def child(self, span_name: str) -> "SpanLogger":
        """Open a nested scope under this one."""
        self._ensure_open()
        return SpanLogger.start(self._tracer, span_name, self._context)

    def close(self) -> None:
        """End the span. Raises ScopeClosedException if already closed."""
        with self._lock:
            self._ensure_open()
            self._closed = True
        self._span.end()

    def __enter__(self) -> "SpanLogger":
        self._ensure_open()
        return self

    def __exit__(
        self, exc_type: type | None, exc_val: BaseException | None, exc_tb: object
    ) -> None:
        # Closed inside the block: the span is already ended, leave it alone.
        with self._lock:
            if self._closed:
                return
            self._closed = True
        if exc_val is not None:
            self._span.set_status(Status(StatusCode.ERROR, str(exc_val)))
            self._span.record_exception(exc_val)
        else:
            self._span.set_status(Status(StatusCode.OK))
        self._span.end()

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"<SpanLogger {self._span_name!r} {state}>"
