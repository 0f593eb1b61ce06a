"""
Coins Service Tests - Test Configuration.

Provides pytest fixtures and configuration for testing the coins service.
Environment variables are pinned before the application modules are imported
so settings are consistent regardless of the host environment.
"""

import os
from typing import Any, AsyncGenerator, List

os.environ.setdefault("LOG_LEVEL", "DEBUG")
os.environ.setdefault("ENABLE_TRACING", "false")
os.environ.setdefault("DEBUG", "false")

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from app.domain.entities import Coin  # noqa: E402


@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """
    In-process HTTP client bound to the FastAPI application.

    Yields:
        AsyncClient routed through ASGITransport
    """
    from app.app import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http_client:
        yield http_client


@pytest.fixture
def full_combination() -> List[Coin]:
    """All four coins in canonical order."""
    return [Coin.PENNY, Coin.NICKEL, Coin.DIME, Coin.QUARTER]


def pytest_configure(config: Any) -> None:
    """
    Configure pytest with custom markers.

    Args:
        config: Pytest configuration object
    """
    config.addinivalue_line(
        "markers",
        "unit: mark test as unit test",
    )
