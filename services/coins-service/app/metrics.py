"""
Prometheus metrics for Coins Service.

Tracks HTTP traffic, combination generation and the values handed out.
"""

from fastapi import Response
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

# Request metrics
http_requests_total = Counter(
    "coins_http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status"],
)

http_request_duration_seconds = Histogram(
    "coins_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=(0.001, 0.0025, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0),
)

# Combination metrics
combinations_generated_total = Counter(
    "coins_combinations_generated_total",
    "Total combinations produced by operation",
    ["operation"],
)

combination_value_cents = Histogram(
    "coins_combination_value_cents",
    "Value in cents of combinations returned to callers",
    buckets=(0, 1, 5, 10, 15, 20, 25, 30, 35, 41),
)


def track_request_metrics(
    method: str, endpoint: str, status_code: int, duration: float
):
    """Track HTTP request metrics."""
    http_requests_total.labels(
        method=method, endpoint=endpoint, status=status_code
    ).inc()
    http_request_duration_seconds.labels(method=method, endpoint=endpoint).observe(
        duration
    )


def track_combinations(operation: str, count: int = 1):
    """Track combinations produced by an operation (all, random, index)."""
    combinations_generated_total.labels(operation=operation).inc(count)


def track_combination_value(value: int):
    """Track the value of a combination returned to a caller."""
    combination_value_cents.observe(value)


async def metrics_endpoint():
    """
    Prometheus metrics endpoint.

    Returns:
        Response with Prometheus metrics in text format
    """
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
