"""
Middleware components for request handling and logging.

Provides middleware for request tracing, logging, performance monitoring
and Prometheus request tracking in the coins service.
"""

import time
from typing import Callable, Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from .logging_config import bind_request_id, clear_request_id, get_logger

logger = get_logger(__name__)

UNMATCHED_ENDPOINT = "unmatched"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware for request and response logging.

    Binds a request ID (taken from the X-Request-ID header or freshly
    generated) to the logging context and echoes it on the response.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """
        Process request and log details.

        Args:
            request: Incoming HTTP request
            call_next: Next middleware or route handler

        Returns:
            HTTP response
        """
        request_id = bind_request_id(request.headers.get("X-Request-ID"))
        request.state.request_id = request_id
        start_time = time.perf_counter()

        logger.info(
            "request_started",
            method=request.method,
            path=request.url.path,
            query_params=str(request.query_params),
            client_host=request.client.host if request.client else None,
        )

        try:
            response = await call_next(request)

            duration_ms = (time.perf_counter() - start_time) * 1000
            response.headers["X-Request-ID"] = request_id

            logger.info(
                "request_completed",
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
                duration_ms=round(duration_ms, 2),
            )

            return response
        except Exception as exc:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.error(
                "request_failed",
                method=request.method,
                path=request.url.path,
                duration_ms=round(duration_ms, 2),
                error=str(exc),
            )
            raise
        finally:
            clear_request_id()


class PerformanceMonitoringMiddleware(BaseHTTPMiddleware):
    """
    Middleware for monitoring request performance.

    Logs warnings for requests exceeding the configured threshold.
    """

    def __init__(
        self,
        app: ASGIApp,
        slow_request_threshold_ms: float = 500.0,
    ) -> None:
        """
        Initialize performance monitoring middleware.

        Args:
            app: ASGI application instance
            slow_request_threshold_ms: Threshold in milliseconds for slow requests
        """
        super().__init__(app)
        self.slow_request_threshold_ms = slow_request_threshold_ms

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        if duration_ms > self.slow_request_threshold_ms:
            logger.warning(
                "slow_request",
                method=request.method,
                path=request.url.path,
                duration_ms=round(duration_ms, 2),
                threshold_ms=self.slow_request_threshold_ms,
            )

        return response


class PrometheusMiddleware(BaseHTTPMiddleware):
    """
    Middleware feeding request counts and latencies to Prometheus.

    Requests are labelled with the matched route template rather than the
    raw path, so /all/5 and /all/7 share the /all/{index} series. Requests
    that match no route share the "unmatched" label. Handler errors are
    recorded as 500 before being re-raised to the error handler.
    """

    def __init__(
        self,
        app: ASGIApp,
        track_func: Callable[[str, str, int, float], None],
        excluded_paths: Optional[set] = None,
    ) -> None:
        super().__init__(app)
        self.track_func = track_func
        self.excluded_paths = excluded_paths or {"/metrics"}

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if request.url.path in self.excluded_paths:
            return await call_next(request)

        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            self.track_func(
                request.method,
                self._endpoint_label(request),
                500,
                time.perf_counter() - start_time,
            )
            raise

        duration = time.perf_counter() - start_time
        self.track_func(
            request.method, self._endpoint_label(request), response.status_code, duration
        )

        return response

    @staticmethod
    def _endpoint_label(request: Request) -> str:
        route = request.scope.get("route")
        return getattr(route, "path", UNMATCHED_ENDPOINT)
