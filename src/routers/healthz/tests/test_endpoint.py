import pytest

from src.config.settings import settings


@pytest.mark.asyncio
async def test_health_check(client):
    """Test the health check endpoint returns healthy status."""
    response = await client.get("/healthz/")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["version"] == "0.1.0"
    assert data["blob_store_configured"] is bool(settings.BLOB_READ_WRITE_TOKEN)


@pytest.mark.asyncio
async def test_rsvp_api_info(client):
    """Test GET on the submit URL explains how to use it."""
    response = await client.get("/rsvp")

    assert response.status_code == 200
    assert "Use POST" in response.json()["message"]
