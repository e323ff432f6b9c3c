import pytest
from fastapi.testclient import TestClient

from site_service import main
from site_service.api import deps
from site_service.core.config import Settings
from site_service.data.repository import InMemorySiteRepository
from site_service.db import database

OWNER = "55555555-5555-5555-5555-555555555555"


@pytest.fixture
def lifecycle(monkeypatch):
    calls = []

    async def fake_create_tables(engine=None):
        calls.append(("create", str(engine.url)))

    async def fake_dispose_engine():
        calls.append(("dispose", None))

    monkeypatch.setattr(main, "create_tables", fake_create_tables)
    monkeypatch.setattr(main, "dispose_engine", fake_dispose_engine)
    monkeypatch.setattr(database, "_engine", None)
    monkeypatch.setattr(database, "_session_factory", None)
    return calls


def test_memory_app_skips_tables(lifecycle, monkeypatch, config_json):
    monkeypatch.setattr(deps, "_memory_repository", InMemorySiteRepository())
    app = main.create_app(Settings(repository_backend="memory", enable_metrics=False, graphql_enabled=False))

    with TestClient(app) as client:
        response = client.post(
            "/api/sites",
            json={"name": "Memory Shop", "currency": "usd", "language": "en", "config": config_json},
            headers={"X-Owner-Id": OWNER},
        )
        assert response.status_code == 201

        health = client.get("/health").json()
        assert health["backend"] == "memory"
        assert health["total_sites"] == 1

    assert lifecycle == []


def test_sql_app_uses_its_own_database_url(lifecycle):
    url = "sqlite+aiosqlite:///:memory:"
    app = main.create_app(Settings(repository_backend="sql", database_url=url, enable_metrics=False))

    with TestClient(app) as client:
        assert client.get("/health").json()["backend"] == "sql"

    assert lifecycle == [("create", url), ("dispose", None)]


def test_custom_api_prefix():
    app = main.create_app(Settings(api_prefix="/v2", enable_metrics=False, graphql_enabled=False))
    paths = {route.path for route in app.routes}

    assert "/v2/sites" in paths
    assert "/graphql" not in paths
