from __future__ import annotations

import time
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from opentelemetry import trace
from starlette.responses import Response

from fib_proxy.api.routes_payments import router as payments_router
from fib_proxy.core.config import get_settings
from fib_proxy.core.error_handlers import register_error_handlers
from fib_proxy.core.metrics import error_counter, latency_histogram, request_counter
from fib_proxy.gateway.factory import GatewayClientFactory
from shared.constants import supported_environments
from shared.logging import (
    ENVIRONMENT,
    UPSTREAM_URL,
    CorrelationMiddleware,
    configure_logging,
    get_logger,
)
from shared.observability import configure_otel, current_trace_id
from shared.utils import apply_security_headers

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    configure_logging(settings.log_level)
    configure_otel(settings.service_name, settings.gateway_environment.value)

    gateway_config = settings.gateway_config()
    http_client = GatewayClientFactory(gateway_config).create()
    app.state.settings = settings
    app.state.gateway_config = gateway_config
    app.state.http_client = http_client

    if not settings.gateway_environment_recognized:
        logger.warning(
            "gateway_environment_unrecognized",
            extra={
                "extra_fields": {
                    "requested": settings.fib_gateway_environment,
                    "supported": list(supported_environments()),
                    ENVIRONMENT: gateway_config.environment.value,
                }
            },
        )
    logger.info(
        "gateway_environment_selected",
        extra={
            "extra_fields": {
                ENVIRONMENT: gateway_config.environment.value,
                UPSTREAM_URL: gateway_config.base_url,
            }
        },
    )
    if not gateway_config.has_credentials:
        logger.warning("gateway_credentials_missing")

    yield

    await http_client.aclose()


startup_settings = get_settings()

app = FastAPI(title="fib-proxy", version="0.1.0", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=startup_settings.cors_allowed_origins,
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "X-Request-Id"],
)
app.add_middleware(CorrelationMiddleware)
register_error_handlers(app)
app.include_router(payments_router)


@app.middleware("http")
async def telemetry_middleware(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    tracer = trace.get_tracer("fib-proxy")
    start = time.perf_counter()
    request_counter.add(1, {"path": request.url.path, "method": request.method})

    with tracer.start_as_current_span(f"{request.method} {request.url.path}"):
        response = await call_next(request)
        trace_id = current_trace_id()

    duration_ms = (time.perf_counter() - start) * 1000
    latency_histogram.record(duration_ms, {"path": request.url.path, "method": request.method})
    if response.status_code >= 400:
        error_counter.add(
            1,
            {
                "path": request.url.path,
                "method": request.method,
                "status_code": response.status_code,
            },
        )

    response.headers["X-Trace-Id"] = trace_id
    apply_security_headers(response)
    return response


@app.get("/health")
async def health(request: Request) -> dict[str, str]:
    return {"status": "ok", "environment": request.app.state.gateway_config.environment.value}
