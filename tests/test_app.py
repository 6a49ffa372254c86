"""Tests for app startup, seeding and the process-level error boundary."""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from folio.core.db import Database
from folio.core.dependencies import get_storage
from folio.main import create_app
from folio.storage import MemoryStorage
from folio.storage.postgres import PostgresStorage
from folio.storage.seed import seed_if_empty


class BrokenStorage(MemoryStorage):
    async def list_projects(self):
        raise RuntimeError("connection refused")


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_startup_seeds_empty_store():
    storage = MemoryStorage()
    with TestClient(create_app(storage, seed=True)) as client:
        profile = client.get("/api/profile")
        publications = client.get("/api/publications").json()
        projects = client.get("/api/projects").json()
        news = client.get("/api/news").json()

    assert profile.status_code == 200
    assert profile.json()["name"] == "Alex Researcher"
    assert [pub["year"] for pub in publications] == [2024, 2023]
    assert all(pub["isSelected"] for pub in publications)
    assert [project["title"] for project in projects] == ["OpenGen"]
    assert [item["date"] for item in news] == ["2024-01-15"]


def test_startup_skips_seed_when_profile_exists(profile_payload):
    storage = MemoryStorage()
    with TestClient(create_app(storage, seed=False)) as client:
        client.post("/api/profile", json=profile_payload)

    with TestClient(create_app(storage, seed=True)) as client:
        assert client.get("/api/profile").json()["name"] == "Ada Lovelace"
        assert client.get("/api/publications").json() == []


def test_storage_selected_from_environment(monkeypatch):
    monkeypatch.setenv("FOLIO_STORAGE", "memory")
    monkeypatch.setenv("FOLIO_SEED", "false")

    with TestClient(create_app()) as client:
        assert client.get("/api/profile").status_code == 404
        assert isinstance(client.app.state.storage, MemoryStorage)


def test_dependency_override(publication_payload):
    override = MemoryStorage()
    app = create_app(MemoryStorage(), seed=False)
    app.dependency_overrides[get_storage] = lambda: override

    with TestClient(app) as client:
        client.post("/api/publications", json=publication_payload)

    assert len(override._publications.rows()) == 1


def test_unexpected_store_failure_is_500():
    app = create_app(BrokenStorage(), seed=False)
    with TestClient(app, raise_server_exceptions=False) as client:
        resp = client.get("/api/projects")

    assert resp.status_code == 500
    assert resp.json() == {"message": "Internal Server Error"}


def test_postgres_backend_out_of_range_id_is_404():
    db = AsyncMock(spec=Database)
    app = create_app(PostgresStorage(db), seed=False)
    with TestClient(app, raise_server_exceptions=False) as client:
        deleted = client.delete("/api/news/3000000000")
        updated = client.put("/api/projects/3000000000", json={"title": "x"})

    assert deleted.status_code == 404
    assert deleted.json() == {"message": "News item not found"}
    assert updated.status_code == 404
    db.fetch_one.assert_not_awaited()


def test_unknown_route_is_404_with_message(client):
    resp = client.get("/api/unknown")
    assert resp.status_code == 404
    assert resp.json() == {"message": "Not Found"}


@pytest.mark.asyncio
async def test_seed_is_idempotent():
    storage = MemoryStorage()

    assert await seed_if_empty(storage) is True
    assert await seed_if_empty(storage) is False

    assert len(await storage.list_publications()) == 2
    assert len(await storage.list_projects()) == 1
    assert len(await storage.list_news()) == 1
