"""Root test fixtures shared across all test types.

Every test gets its own SQLite database file under tmp_path; nothing
external is required.
"""

import os

# Set APP_ENV to testing before any app imports
os.environ.setdefault("APP_ENV", "testing")

# ruff: noqa: E402 - Imports must be after env var setup
from collections.abc import AsyncGenerator, Iterator
from pathlib import Path

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import NullPool

from src.app.core.config import get_settings
from src.app.core.db import get_session, init_db
from src.app.repositories import ProjectRepository
from src.app.services.project_service import ProjectService


def sqlite_url(path: Path) -> str:
    return f"sqlite+aiosqlite:///{path}"


@pytest.fixture(autouse=True)
def _isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Point DATABASE_URL at a per-test SQLite file and reset cached settings."""
    monkeypatch.setenv("DATABASE_URL", sqlite_url(tmp_path / "test.db"))
    monkeypatch.setenv("RUN_MIGRATIONS_ON_STARTUP", "false")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
async def engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine]:
    """Test engine with the projects table created."""
    test_engine = create_async_engine(sqlite_url(tmp_path / "service.db"), poolclass=NullPool)
    await init_db(test_engine)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Provide an async session for database operations."""
    async with get_session(engine) as session:
        yield session


@pytest.fixture
def project_service(db_session: AsyncSession) -> ProjectService:
    return ProjectService(ProjectRepository(db_session), db_session)
