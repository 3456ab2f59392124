import pytest
from httpx import ASGITransport, AsyncClient
from fastapi import status
from app.main import app

@pytest.mark.asyncio
async def test_health_ok() -> None:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        resp = await ac.get("/health")
    assert resp.status_code == status.HTTP_200_OK
    data = resp.json()
    assert data == {"status": "ok"}


@pytest.mark.asyncio
async def test_root_reports_app_name() -> None:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        resp = await ac.get("/")
    assert resp.status_code == status.HTTP_200_OK
    assert set(resp.json()) == {"app", "version"}
