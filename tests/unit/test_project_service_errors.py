"""Unit tests for ProjectService failure paths, with the store mocked out."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from src.app.core.exceptions import PersistenceError, ProjectNotFoundError
from src.app.services.project_service import ProjectService
from tests.factories import ProjectFactory
from tests.helpers import make_project_create

pytestmark = pytest.mark.unit


def _store_down() -> OperationalError:
    return OperationalError("COMMIT", {}, Exception("disk I/O error"))


@pytest.fixture
def repo() -> MagicMock:
    repo = MagicMock()
    repo.get_by_id = AsyncMock(return_value=None)
    repo.list_all = AsyncMock(return_value=[])
    repo.delete = AsyncMock()
    return repo


@pytest.fixture
def session() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def service(repo, session) -> ProjectService:
    return ProjectService(repo, session)


async def test_create_commit_failure_rolls_back(service, session):
    session.commit.side_effect = _store_down()

    with pytest.raises(PersistenceError):
        await service.create_project(make_project_create())

    session.rollback.assert_awaited_once()


async def test_update_commit_failure_raises_persistence_error(service, repo, session):
    repo.get_by_id.return_value = ProjectFactory.build()
    session.commit.side_effect = _store_down()

    with pytest.raises(PersistenceError):
        await service.update_project("any", make_project_create())

    session.rollback.assert_awaited_once()


async def test_delete_commit_failure_raises_persistence_error(service, repo, session):
    repo.get_by_id.return_value = ProjectFactory.build()
    session.commit.side_effect = _store_down()

    with pytest.raises(PersistenceError):
        await service.delete_project("any")

    session.rollback.assert_awaited_once()


async def test_list_read_failure_raises_persistence_error(service, repo):
    repo.list_all.side_effect = _store_down()

    with pytest.raises(PersistenceError):
        await service.list_projects()


@pytest.mark.parametrize("method", ["get_project", "delete_project"])
async def test_missing_id_raises_not_found(service, session, method):
    with pytest.raises(ProjectNotFoundError) as exc_info:
        await getattr(service, method)("missing-id")

    assert exc_info.value.project_id == "missing-id"
    session.commit.assert_not_awaited()


async def test_update_missing_id_raises_not_found(service, session):
    with pytest.raises(ProjectNotFoundError):
        await service.update_project("missing-id", make_project_create())

    session.commit.assert_not_awaited()
