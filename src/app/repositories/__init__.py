"""Repository layer - data access abstraction."""

from src.app.repositories.base import BaseRepository
from src.app.repositories.project import ProjectRepository

__all__ = [
    "BaseRepository",
    "ProjectRepository",
]
