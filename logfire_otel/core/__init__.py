"""Core: settings and exceptions.

Single place for configuration and the facade's error types.
"""

from logfire_otel.core.config import LogfireSettings, get_settings
from logfire_otel.core.exceptions import (
    ConfigurationException,
    LogfireException,
    NotInitializedException,
    ScopeClosedException,
    SetupException,
)

__all__ = [
    "LogfireSettings",
    "get_settings",
    "LogfireException",
    "ConfigurationException",
    "SetupException",
    "NotInitializedException",
    "ScopeClosedException",
]
