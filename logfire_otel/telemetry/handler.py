"""Bridge from stdlib logging to Logfire log spans."""

import logging

from logfire_otel.telemetry.client import Logfire, get_default
from logfire_otel.telemetry.severity import Severity


class LogfireHandler(logging.Handler):
    """logging.Handler that sends each record as a Logfire log span.

    The record level is mapped with Severity.from_logging_level. Records
    emitted from inside an active span nest under it.

    Note: do not attach this handler to the logfire_otel or opentelemetry
    loggers; their own diagnostics would be fed back into the exporter.
    """

    def __init__(self, client: Logfire | None = None, level: int = logging.NOTSET) -> None:
        """Initialize the handler.

        Args:
            client: Client to emit through; None resolves the default client
                on every record.
            level: Minimum stdlib level handled.
        """
        super().__init__(level)
        self.client = client

    def emit(self, record: logging.LogRecord) -> None:
        try:
            client = self.client or get_default()
            client.log(Severity.from_logging_level(record.levelno), self.format(record))
        except Exception:
            self.handleError(record)
