"""HTTP tests for the /article endpoints through the SQLAlchemy store (in-memory SQLite)."""

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from articles_api.infrastructure.dependencies import get_article_service
from articles_api.main import app

HUGE_ID = 99999999999999999999


@pytest.mark.asyncio
async def test_create_get_list_delete(store_client):
    created = await store_client.post("/article", json={"title": "T", "body": "B"})
    assert created.status_code == 200
    record = created.json()
    assert record["created_at"] == record["updated_at"]

    fetched = await store_client.get(f"/article/{record['id']}")
    assert fetched.status_code == 200
    view = fetched.json()["data"]
    assert view["id"] == record["id"]
    assert view["title"] == "T"
    assert view["body"] == "B"
    assert view["published"].endswith("ago")

    listed = await store_client.get("/article")
    assert [item["id"] for item in listed.json()["data"]] == [record["id"]]

    deleted = await store_client.delete(f"/article/{record['id']}")
    assert deleted.status_code == 204
    assert (await store_client.get(f"/article/{record['id']}")).status_code == 404
    assert (await store_client.get("/article")).json() == {"data": []}


@pytest.mark.asyncio
async def test_rejected_create_stores_nothing(store_client):
    response = await store_client.post("/article", json={"title": "", "body": "x"})

    assert response.status_code == 400
    assert (await store_client.get("/article")).json() == {"data": []}


@pytest.mark.asyncio
async def test_id_beyond_column_range_is_not_found(store_client):
    await store_client.post("/article", json={"title": "T", "body": "B"})

    fetched = await store_client.get(f"/article/{HUGE_ID}")
    deleted = await store_client.delete(f"/article/{HUGE_ID}")

    assert fetched.status_code == 404
    assert fetched.json() == {"error": "Record was not found"}
    assert deleted.status_code == 404
    assert deleted.json() == {"error": "Record was not found"}


@pytest.mark.asyncio
async def test_store_failure_returns_opaque_500(store_client, monkeypatch):
    async def broken_execute(*args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("database is locked"))

    monkeypatch.setattr(AsyncSession, "execute", broken_execute)

    response = await store_client.get("/article")

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}


@pytest.mark.asyncio
async def test_unwrapped_sqlalchemy_error_returns_opaque_500(store_client):
    async def failing_service():
        raise OperationalError("COMMIT", {}, Exception("connection reset"))

    app.dependency_overrides[get_article_service] = failing_service
    try:
        response = await store_client.get("/article")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}
