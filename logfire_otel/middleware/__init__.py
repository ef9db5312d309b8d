"""Web framework integrations."""

from logfire_otel.middleware.fastapi import instrument_app

__all__ = ["instrument_app"]
