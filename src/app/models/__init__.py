"""Model exports.

Import from here: `from src.app.models import Project`
"""

from src.app.models.enums import ProjectStatus, Sector
from src.app.models.project import Project, new_project_id

__all__ = [
    # Enums
    "ProjectStatus",
    "Sector",
    # Tables
    "Project",
    "new_project_id",
]
