"""Project record service - the only writer of persisted project state."""

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.app.core.exceptions import PersistenceError, ProjectNotFoundError
from src.app.core.logging import get_logger, project_log_context
from src.app.models import Project, new_project_id
from src.app.models.base import utc_now
from src.app.repositories import ProjectRepository
from src.app.schemas.project import ProjectCreate, ProjectUpdate

logger = get_logger(__name__)


class ProjectService:
    """Typed CRUD over the projects table.

    Assigns ids and timestamps and keeps employees_total equal to
    employees_male + employees_female. Each write is committed before
    the method returns.
    """

    def __init__(self, project_repo: ProjectRepository, session: AsyncSession):
        self.project_repo = project_repo
        self.session = session

    async def list_projects(self) -> list[Project]:
        """All projects, newest created_at first."""
        try:
            return await self.project_repo.list_all()
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to fetch projects: {e}") from e

    async def get_project(self, project_id: str) -> Project:
        try:
            project = await self.project_repo.get_by_id(project_id)
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to fetch project {project_id}: {e}") from e
        if project is None:
            raise ProjectNotFoundError(project_id)
        return project

    async def create_project(self, data: ProjectCreate) -> Project:
        """Persist a new project with a fresh id and created_at == updated_at."""
        now = utc_now()
        project = Project(
            id=new_project_id(),
            **data.model_dump(),
            employees_total=data.employees_male + data.employees_female,
            created_at=now,
            updated_at=now,
        )
        with project_log_context(project.id):
            self.project_repo.add(project)
            await self._commit(project, "create")
            logger.info("Project created", company_name=project.company_name)
        return project

    async def update_project(self, project_id: str, data: ProjectUpdate) -> Project:
        """Overwrite every field except id and created_at.

        Returns the record as read back from the store.
        """
        project = await self.get_project(project_id)

        for field, value in data.model_dump().items():
            setattr(project, field, value)
        project.employees_total = data.employees_male + data.employees_female
        # updated_at never precedes created_at, even if the clock steps back
        project.updated_at = max(utc_now(), project.created_at)

        with project_log_context(project_id):
            await self._commit(project, "update")
            logger.info("Project updated")
        return project

    async def delete_project(self, project_id: str) -> None:
        """Remove the project permanently."""
        project = await self.get_project(project_id)
        await self.project_repo.delete(project)

        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise PersistenceError(f"Failed to delete project {project_id}: {e}") from e

        logger.info("Project deleted", project_id=project_id)

    async def _commit(self, project: Project, action: str) -> None:
        # Rollback expires the instance, so read the id up front
        project_id = project.id
        try:
            await self.session.commit()
            await self.session.refresh(project)
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise PersistenceError(f"Failed to {action} project {project_id}: {e}") from e
