"""Integration test fixtures for the HTTP API."""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from salary_engine.api.app import create_app
from salary_engine.config import get_rate_table, get_settings


@pytest.fixture(autouse=True)
def default_rates(monkeypatch):
    """Run every API test against the statutory rate table."""
    monkeypatch.setattr("salary_engine.config.load_dotenv", lambda: None)
    monkeypatch.delenv("RATE_TABLE_PATH", raising=False)
    get_settings.cache_clear()
    get_rate_table.cache_clear()
    yield
    get_settings.cache_clear()
    get_rate_table.cache_clear()


@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Create async HTTP client for API testing."""
    app = create_app()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
