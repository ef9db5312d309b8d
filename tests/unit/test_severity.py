"""Tests for Severity ordinals and stdlib level mapping."""

import logging

import pytest

from logfire_otel.telemetry.severity import Severity


def test_ordinals() -> None:
    """Values are the OpenTelemetry log severity numbers."""
    assert [int(s) for s in Severity] == [1, 5, 9, 13, 17, 21]


def test_ordering() -> None:
    assert Severity.TRACE < Severity.DEBUG < Severity.INFO < Severity.WARN < Severity.ERROR < Severity.FATAL


@pytest.mark.parametrize(
    ("level", "expected"),
    [
        (5, Severity.TRACE),
        (logging.DEBUG, Severity.DEBUG),
        (logging.INFO, Severity.INFO),
        (25, Severity.INFO),
        (logging.WARNING, Severity.WARN),
        (logging.ERROR, Severity.ERROR),
        (logging.CRITICAL, Severity.FATAL),
        (100, Severity.FATAL),
    ],
)
def test_from_logging_level(level: int, expected: Severity) -> None:
    assert Severity.from_logging_level(level) is expected
