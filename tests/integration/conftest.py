"""
Fixtures for integration tests.

Provides an HTTP client for the FastAPI app with the SipsClient
dependency replaced by one driving a fake runner.
"""

from typing import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from sips_gateway.core.dependencies import get_sips_client
from sips_gateway.main import app


@pytest_asyncio.fixture
async def api_client(sips_client) -> AsyncGenerator[AsyncClient, None]:
    app.dependency_overrides[get_sips_client] = lambda: sips_client

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client

    app.dependency_overrides.clear()
