"""Service test fixtures — FastAPI test client over ASGI transport.

Invariants:
    - No network: requests go straight into the ASGI app
"""

import pytest
from httpx import ASGITransport, AsyncClient

from topoguard.main import app


@pytest.fixture
async def client():
    """FastAPI test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
