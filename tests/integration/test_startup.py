"""Application lifespan: store initialisation on startup."""

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from src.app.core.config import get_settings
from src.app.main import create_app
from tests.helpers import make_project_payload

pytestmark = pytest.mark.integration


@pytest.fixture
def client() -> Generator[TestClient]:
    with TestClient(create_app()) as c:
        yield c


def test_lifespan_creates_table(client: TestClient):
    response = client.post("/api/projects", json=make_project_payload())

    assert response.status_code == 201
    assert len(client.get("/api/projects").json()) == 1


def test_lifespan_can_apply_migrations(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("RUN_MIGRATIONS_ON_STARTUP", "true")
    get_settings.cache_clear()

    with TestClient(create_app()) as client:
        response = client.get("/api/projects")

    assert response.status_code == 200


def test_unusable_store_aborts_startup(tmp_path, monkeypatch: pytest.MonkeyPatch):
    # Parent directory does not exist, so SQLite cannot open the file
    missing = tmp_path / "missing" / "dir" / "projects.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{missing}")
    get_settings.cache_clear()

    with pytest.raises(OperationalError), TestClient(create_app()):
        pass


def test_error_responses_include_request_id(client: TestClient):
    response = client.get("/api/not-a-route")

    assert response.status_code == 404
    body = response.json()
    assert body["error"] == "Not Found"
    assert body["request_id"] == response.headers["X-Request-ID"]
