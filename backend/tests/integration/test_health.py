"""Tests for the public health endpoint."""

import pytest
from httpx import ASGITransport, AsyncClient

from host_manager.main import app


@pytest.mark.asyncio
async def test_health_check_needs_no_token():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/api/v1/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["storage"] in {"database", "json"}
    assert "version" in data
    assert "environment" in data
