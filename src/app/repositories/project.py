"""Repository for Project entity."""

from sqlmodel import col, select

from src.app.models import Project
from src.app.repositories.base import BaseRepository


class ProjectRepository(BaseRepository[Project]):
    """Repository for the projects table."""

    model = Project

    async def list_all(self) -> list[Project]:
        """List every project, newest first.

        The whole table is returned; there is no filtering or pagination
        at the store level.
        """
        query = select(Project).order_by(col(Project.created_at).desc())
        result = await self.session.execute(query)
        return list(result.scalars().all())
