"""Tests for the FastAPI integration: request spans and handler logs."""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter
from opentelemetry.trace import SpanKind

import logfire_otel
from logfire_otel.core.exceptions import NotInitializedException
from logfire_otel.middleware import instrument_app
from logfire_otel.telemetry.client import Logfire


def _create_app(client: Logfire) -> FastAPI:
    app = FastAPI()

    @app.get("/hello")
    async def hello() -> dict[str, str]:
        client.from_context().info("hello from handler")
        with client.span_logger("child work") as scope:
            scope.info("inside child")
        return {"message": "Hello, World!"}

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app


@pytest.fixture
async def http_client(client: Logfire) -> AsyncClient:
    app = _create_app(client)
    instrument_app(app, client, excluded_urls="/health")
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


def _server_spans(exporter: InMemorySpanExporter) -> list:
    return [s for s in exporter.get_finished_spans() if s.kind == SpanKind.SERVER]


async def test_request_gets_server_span(http_client: AsyncClient, exporter: InMemorySpanExporter) -> None:
    response = await http_client.get("/hello")
    assert response.status_code == 200
    assert response.json() == {"message": "Hello, World!"}

    server_spans = _server_spans(exporter)
    assert len(server_spans) == 1
    assert server_spans[0].resource.attributes["service.name"] == "svc-test"


async def test_handler_logs_nest_under_request(
    http_client: AsyncClient, exporter: InMemorySpanExporter
) -> None:
    await http_client.get("/hello")

    (server_span,) = _server_spans(exporter)
    spans = {s.name: s for s in exporter.get_finished_spans()}
    request_id = server_span.context.span_id
    assert spans["hello from handler"].parent.span_id == request_id
    assert spans["child work"].parent.span_id == request_id
    assert spans["inside child"].parent.span_id == spans["child work"].context.span_id


async def test_excluded_urls_are_not_traced(
    http_client: AsyncClient, exporter: InMemorySpanExporter
) -> None:
    response = await http_client.get("/health")
    assert response.status_code == 200
    assert _server_spans(exporter) == []


def test_instrument_app_requires_client_or_default() -> None:
    with pytest.raises(NotInitializedException):
        instrument_app(FastAPI())


async def test_instrument_app_uses_default_client(client: Logfire, exporter: InMemorySpanExporter) -> None:
    logfire_otel.set_default(client)
    app = _create_app(client)
    instrument_app(app)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        await ac.get("/hello")
    assert len(_server_spans(exporter)) == 1
