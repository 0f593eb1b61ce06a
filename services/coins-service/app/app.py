"""
Coins Service - Main FastAPI Application.

Serves the power set of the four US coin denominations over HTTP:
every combination with its value, a single random combination, and
the valuation of caller-supplied coins.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import settings
from .domain.exceptions import (
    CoinsServiceException,
    InvalidCombinationIndexException,
    UnknownCoinException,
)
from .logging_config import get_logger, get_request_id, setup_logging
from .metrics import metrics_endpoint, track_request_metrics
from .middleware import (
    PerformanceMonitoringMiddleware,
    PrometheusMiddleware,
    RequestLoggingMiddleware,
)
from .models import ErrorResponse
from .routers import combinations_router, health_router
from .tracing import configure_opentelemetry, instrument_fastapi

setup_logging(
    log_level=settings.LOG_LEVEL,
    service_name=settings.SERVICE_NAME,
    use_json=settings.LOG_JSON,
)
logger = get_logger(__name__)

# Status codes and error codes for domain exceptions
ERROR_MAPPING = {
    UnknownCoinException: (422, "unknown_coin"),
    InvalidCombinationIndexException: (404, "combination_not_found"),
}


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Handles startup and shutdown logging for the application.
    """
    logger.info(
        "service_starting",
        service=settings.SERVICE_NAME,
        version=settings.VERSION,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL,
        tracing=settings.ENABLE_TRACING,
    )

    yield

    logger.info("service_stopping", service=settings.SERVICE_NAME)


def _error_response(
    request: Request,
    status_code: int,
    error: str,
    message: str,
    details: dict,
) -> JSONResponse:
    request_id = (
        get_request_id()
        or getattr(request.state, "request_id", None)
        or request.headers.get("X-Request-ID")
    )
    body = ErrorResponse(
        error=error,
        message=message,
        details=details,
        request_id=request_id,
    )
    headers = {"X-Request-ID": request_id} if request_id else None
    return JSONResponse(
        status_code=status_code, content=body.model_dump(), headers=headers
    )


async def coins_exception_handler(
    request: Request, exc: CoinsServiceException
) -> JSONResponse:
    """Translate domain exceptions into JSON error responses."""
    status_code, error = ERROR_MAPPING.get(type(exc), (400, "bad_request"))

    logger.warning(
        "request_rejected",
        path=request.url.path,
        method=request.method,
        error=error,
        reason=exc.message,
    )

    return _error_response(request, status_code, error, exc.message, exc.details)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Wrap request validation failures in the standard error envelope."""
    errors = jsonable_encoder(exc.errors())

    logger.warning(
        "request_rejected",
        path=request.url.path,
        method=request.method,
        error="validation_error",
        error_count=len(errors),
    )

    return _error_response(
        request,
        422,
        "validation_error",
        "Request validation failed",
        {"errors": errors},
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all unhandled exceptions."""
    logger.error(
        "unhandled_exception",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        exc_info=True,
    )

    return _error_response(
        request,
        500,
        "internal_server_error",
        "An unexpected error occurred",
        {},
    )


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    tracing_enabled = configure_opentelemetry(
        service_name=settings.SERVICE_NAME,
        service_version=settings.VERSION,
        otlp_endpoint=settings.OTEL_EXPORTER_OTLP_ENDPOINT,
        enable_tracing=settings.ENABLE_TRACING,
    )

    app = FastAPI(
        title=settings.APP_NAME,
        description="Power set of the US coin denominations with values in cents",
        version=settings.VERSION,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        lifespan=lifespan,
    )

    # Add middleware (order matters - first added is last executed)
    app.add_middleware(
        PerformanceMonitoringMiddleware,
        slow_request_threshold_ms=settings.SLOW_REQUEST_THRESHOLD_MS,
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(PrometheusMiddleware, track_func=track_request_metrics)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(CoinsServiceException, coins_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    app.include_router(health_router.router)
    app.include_router(combinations_router.router)
    app.add_api_route("/metrics", metrics_endpoint, include_in_schema=False)

    if tracing_enabled:
        instrument_fastapi(app, excluded_urls="/health,/metrics")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level="info")
