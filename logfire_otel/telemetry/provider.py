"""OpenTelemetry tracer provider construction for the Logfire backend.

Uses the OTLP/HTTP span exporter pointed at <endpoint>/traces with a
bearer token. Each builder raises SetupException instead of returning
None so callers never get a half-built pipeline.
"""

import logging

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import SERVICE_NAME, SERVICE_VERSION, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, SpanExporter

from logfire_otel.core.config import LogfireSettings
from logfire_otel.core.exceptions import SetupException

logger = logging.getLogger(__name__)


def create_exporter(settings: LogfireSettings) -> SpanExporter:
    """Build the OTLP/HTTP exporter for the configured endpoint and token."""
    try:
        exporter = OTLPSpanExporter(
            endpoint=settings.traces_endpoint,
            headers=settings.auth_headers(),
        )
    except Exception as e:
        logger.exception("Failed to create exporter: %s", e)
        raise SetupException("exporter", str(e)) from e
    logger.info("Using OTLP/HTTP span exporter: %s", settings.traces_endpoint)
    return exporter


def create_resource(settings: LogfireSettings) -> Resource:
    """Build the resource descriptor (service.name, service.version)."""
    try:
        return Resource(
            attributes={
                SERVICE_NAME: settings.service_name,
                SERVICE_VERSION: settings.service_version,
            }
        )
    except Exception as e:
        logger.exception("Failed to create resource: %s", e)
        raise SetupException("resource", str(e)) from e


def create_tracer_provider(
    settings: LogfireSettings,
    exporter: SpanExporter | None = None,
) -> TracerProvider:
    """Build a TracerProvider that batches finished spans into the exporter.

    Args:
        settings: Resolved settings (token already checked by the caller).
        exporter: Optional exporter override (tests pass an in-memory one).

    Returns:
        Configured TracerProvider, registered globally when
        settings.register_global is set.
    """
    if exporter is None:
        exporter = create_exporter(settings)
    resource = create_resource(settings)
    try:
        provider = TracerProvider(resource=resource)
        provider.add_span_processor(
            BatchSpanProcessor(
                exporter,
                schedule_delay_millis=settings.batch_timeout_seconds * 1000,
            )
        )
    except Exception as e:
        logger.exception("Failed to create tracer provider: %s", e)
        raise SetupException("tracer provider", str(e)) from e

    if settings.register_global:
        trace.set_tracer_provider(provider)
    logger.info(
        "OpenTelemetry initialized: service=%s, version=%s",
        settings.service_name,
        settings.service_version,
    )
    return provider
