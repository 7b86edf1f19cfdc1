"""SPA Static Files — built front end served with index.html fallback."""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from hardball.api.static_files import SPAStaticFiles


@pytest.fixture
async def spa_client(tmp_path):
    (tmp_path / "index.html").write_text("<app-root></app-root>")
    (tmp_path / "main.js").write_text("console.log('hi')")
    spa = FastAPI()
    spa.mount("/", SPAStaticFiles(directory=tmp_path, html=True), name="static")
    async with AsyncClient(
        transport=ASGITransport(app=spa), base_url="http://test",
    ) as c:
        yield c


async def test_serves_existing_file(spa_client):
    res = await spa_client.get("/main.js")
    assert res.status_code == 200
    assert "console.log" in res.text


async def test_root_serves_index(spa_client):
    res = await spa_client.get("/")
    assert res.status_code == 200
    assert "<app-root>" in res.text


async def test_unknown_route_falls_back_to_index(spa_client):
    res = await spa_client.get("/news/2026/10")
    assert res.status_code == 200
    assert "<app-root>" in res.text
