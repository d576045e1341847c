"""Integration fixtures: the app over an in-process transport.

The app's global engine points at the per-test SQLite file set up by the
root conftest, so every test starts from an empty projects table.
"""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from src.app.client import ProjectCache, ProjectsClient
from src.app.core.db import dispose_engine, init_db
from src.app.main import create_app


@pytest.fixture
async def app_transport() -> AsyncGenerator[ASGITransport]:
    """ASGI transport to a fresh app with the projects table created.

    ASGITransport does not run the lifespan, so the store is initialised here.
    """
    await dispose_engine()
    await init_db()
    yield ASGITransport(app=create_app())
    await dispose_engine()


@pytest.fixture
async def client(app_transport: ASGITransport) -> AsyncGenerator[AsyncClient]:
    async with AsyncClient(transport=app_transport, base_url="http://test") as c:
        yield c


@pytest.fixture
async def api_client(app_transport: ASGITransport) -> AsyncGenerator[ProjectsClient]:
    async with ProjectsClient(base_url="http://test", transport=app_transport) as c:
        yield c


@pytest.fixture
async def cache(api_client: ProjectsClient) -> ProjectCache:
    project_cache = ProjectCache(api_client)
    await project_cache.load()
    return project_cache
