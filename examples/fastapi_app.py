"""FastAPI app whose requests and handler logs go to Logfire.

Run with LOGFIRE_TOKEN set: uvicorn examples.fastapi_app:app --port 8080
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

import logfire_otel
from logfire_otel.middleware import instrument_app

client = logfire_otel.initialize(service_name="fastapi-service")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    yield
    client.shutdown()


app = FastAPI(lifespan=lifespan)
instrument_app(app, client)


@app.get("/hello")
async def hello() -> dict[str, str]:
    client.from_context().info("hellooo logfire!!")

    with client.span_logger("span logger") as scope:
        scope.info("I am a child span!")

    return {"message": "Hello, World!"}
