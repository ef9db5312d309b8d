"""Diagnostic logging for the facade itself (setup, export and shutdown messages).

Only the logfire_otel logger tree is configured; the root logger and the
application's handlers are left untouched.
"""

import logging
import sys

from logfire_otel.core.config import LogfireSettings, get_settings

PACKAGE_LOGGER_NAME = "logfire_otel"
DIAGNOSTICS_HANDLER_NAME = "logfire_otel.diagnostics"


def setup_logging(settings: LogfireSettings | None = None) -> logging.Logger:
    """Send logfire_otel diagnostics to stdout.

    Level is DEBUG when settings.debug is True, otherwise INFO. Calling it
    again only updates the level; the stdout handler is added once.

    Args:
        settings: Settings to read debug from; get_settings() when omitted.

    Returns:
        The configured logfire_otel package logger.
    """
    settings = settings or get_settings()
    log_level = logging.DEBUG if settings.debug else logging.INFO
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(log_level)

    if not any(h.get_name() == DIAGNOSTICS_HANDLER_NAME for h in package_logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.set_name(DIAGNOSTICS_HANDLER_NAME)
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        package_logger.addHandler(handler)
    return package_logger
