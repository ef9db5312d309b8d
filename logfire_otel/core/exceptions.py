"""Exceptions raised by the Logfire facade.

Configuration and setup problems are raised to the caller instead of
terminating the process, so the application decides whether to abort,
retry or run without telemetry.
"""

from typing import Any


class LogfireException(Exception):
    """Base exception for all facade errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context.
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationException(LogfireException):
    """Raised when settings are missing or invalid (e.g. no write token)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional setting name.

        Args:
            message: Description of the configuration problem.
            field: Optional setting that caused it.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "CONFIGURATION_ERROR", details)


class SetupException(LogfireException):
    """Raised when the exporter, resource or tracer provider cannot be built."""

    def __init__(self, component: str, reason: str) -> None:
        """Initialize with the failing component and the underlying reason.

        Args:
            component: What was being built (e.g. "exporter", "resource").
            reason: String form of the original error.
        """
        super().__init__(
            f"Failed to create {component}: {reason}",
            "SETUP_ERROR",
            {"component": component},
        )


class NotInitializedException(LogfireException):
    """Raised when a module-level helper is used before initialize()."""

    def __init__(self) -> None:
        super().__init__(
            "No default Logfire client; did you forget to call initialize()?",
            "NOT_INITIALIZED",
        )


class ScopeClosedException(LogfireException):
    """Raised when a SpanLogger is used after it was closed."""

    def __init__(self, span_name: str | None = None) -> None:
        """Initialize with the name of the closed scope.

        Args:
            span_name: Name of the span the closed logger wrapped, if known.
        """
        details = {"span_name": span_name} if span_name else {}
        super().__init__("Span scope already closed", "SCOPE_CLOSED", details)
