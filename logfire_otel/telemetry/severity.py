"""Log severity levels sent as logfire.level_num.

Values follow the OpenTelemetry log data model severity numbers. Severity is
metadata only: nothing in the facade filters or routes on it.
"""

import logging
from enum import IntEnum


class Severity(IntEnum):
    """Ordinal log severity."""

    TRACE = 1
    DEBUG = 5
    INFO = 9
    WARN = 13
    ERROR = 17
    FATAL = 21

    @classmethod
    def from_logging_level(cls, level: int) -> "Severity":
        """Map a stdlib logging level to the closest severity at or below it.

        Levels below DEBUG map to TRACE; CRITICAL and above map to FATAL.
        """
        if level >= logging.CRITICAL:
            return cls.FATAL
        if level >= logging.ERROR:
            return cls.ERROR
        if level >= logging.WARNING:
            return cls.WARN
        if level >= logging.INFO:
            return cls.INFO
        if level >= logging.DEBUG:
            return cls.DEBUG
        return cls.TRACE
