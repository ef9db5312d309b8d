"""FastAPI integration: one server span per request, sent to Logfire.

Handlers log into the request span with from_context() and nest work with
span_logger(); both pick up the span started by the instrumentation.
"""

import logging

from fastapi import FastAPI
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor

from logfire_otel.telemetry.client import Logfire, get_default

logger = logging.getLogger(__name__)


def instrument_app(
    app: FastAPI,
    client: Logfire | None = None,
    excluded_urls: str | None = None,
) -> None:
    """Instrument a FastAPI app with the client's tracer provider.

    Args:
        app: Application to instrument.
        client: Logfire client; the default client when omitted.
        excluded_urls: Comma-separated URL patterns to skip (e.g. "/health").
    """
    client = client or get_default()
    FastAPIInstrumentor.instrument_app(
        app,
        tracer_provider=client.tracer_provider,
        excluded_urls=excluded_urls,
    )
    logger.info("FastAPI instrumentation enabled for service=%s", client.service_name)
