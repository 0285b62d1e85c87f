"""Tests for the health endpoint."""

from httpx import ASGITransport, AsyncClient


async def _health():
    from blogfront.main import app

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as client:
        return await client.get("/api/blog/health")


async def test_health_ok_when_configured(mock_settings):
    resp = await _health()

    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "ok"
    assert data["service"] == "blogfront"
    assert data["checks"] == {"wordpress_api": "ok", "contact_form": "ok"}


async def test_health_degraded_without_contact_form(mock_settings):
    mock_settings.wpform_id = ""

    resp = await _health()

    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "degraded"
    assert data["checks"]["contact_form"] == "fail"
    assert data["checks"]["wordpress_api"] == "ok"


async def test_health_degraded_without_api_url(mock_settings):
    mock_settings.wordpress_api_url = ""

    data = (await _health()).json()

    assert data["status"] == "degraded"
    assert data["checks"]["wordpress_api"] == "fail"
