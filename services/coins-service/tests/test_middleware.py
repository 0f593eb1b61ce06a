"""
Tests for request middleware.

Exercises the middleware on a minimal FastAPI application so behaviour
is checked independently of the coins routes.
"""

import asyncio
import logging
from typing import List, Tuple

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from app.middleware import (
    UNMATCHED_ENDPOINT,
    PerformanceMonitoringMiddleware,
    PrometheusMiddleware,
)


def _tracked_app(calls: List[Tuple[str, str, int, float]]) -> FastAPI:
    """Minimal app whose Prometheus middleware records into calls."""
    test_app = FastAPI()

    @test_app.get("/items/{item_id}")
    async def get_item(item_id: int):
        return {"item_id": item_id}

    @test_app.get("/boom")
    async def boom():
        raise RuntimeError("handler failed")

    def track(method: str, endpoint: str, status_code: int, duration: float) -> None:
        calls.append((method, endpoint, status_code, duration))

    test_app.add_middleware(PrometheusMiddleware, track_func=track)
    return test_app


@pytest.mark.asyncio
async def test_requests_labelled_by_route_template() -> None:
    """Test different path parameters share one endpoint label."""
    calls: List[Tuple[str, str, int, float]] = []
    transport = ASGITransport(app=_tracked_app(calls))
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        await client.get("/items/5")
        await client.get("/items/7")

    assert [(c[0], c[1], c[2]) for c in calls] == [
        ("GET", "/items/{item_id}", 200),
        ("GET", "/items/{item_id}", 200),
    ]


@pytest.mark.asyncio
async def test_unmatched_paths_share_one_label() -> None:
    """Test unknown paths do not create a label per path."""
    calls: List[Tuple[str, str, int, float]] = []
    transport = ASGITransport(app=_tracked_app(calls))
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        for n in range(10):
            await client.get(f"/nope-{n}")

    assert {c[1] for c in calls} == {UNMATCHED_ENDPOINT}
    assert {c[2] for c in calls} == {404}


@pytest.mark.asyncio
async def test_handler_error_recorded_as_500() -> None:
    """Test a raising handler is still counted, with status 500."""
    calls: List[Tuple[str, str, int, float]] = []
    transport = ASGITransport(app=_tracked_app(calls), raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/boom")

    assert response.status_code == 500
    assert [(c[0], c[1], c[2]) for c in calls] == [("GET", "/boom", 500)]


@pytest.mark.asyncio
async def test_slow_request_logged(caplog: pytest.LogCaptureFixture) -> None:
    """Test requests over the threshold emit a slow_request warning."""
    test_app = FastAPI()

    @test_app.get("/slow")
    async def slow():
        await asyncio.sleep(0.01)
        return {"ok": True}

    test_app.add_middleware(
        PerformanceMonitoringMiddleware, slow_request_threshold_ms=0.001
    )

    transport = ASGITransport(app=test_app)
    with caplog.at_level(logging.WARNING):
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/slow")

    assert response.status_code == 200
    assert "slow_request" in caplog.text
    assert "/slow" in caplog.text


@pytest.mark.asyncio
async def test_fast_request_not_logged(caplog: pytest.LogCaptureFixture) -> None:
    """Test requests under the threshold stay quiet."""
    test_app = FastAPI()

    @test_app.get("/fast")
    async def fast():
        return {"ok": True}

    test_app.add_middleware(
        PerformanceMonitoringMiddleware, slow_request_threshold_ms=60_000.0
    )

    transport = ASGITransport(app=test_app)
    with caplog.at_level(logging.WARNING):
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            await client.get("/fast")

    assert "slow_request" not in caplog.text
