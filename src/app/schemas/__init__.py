from src.app.schemas.project import (
    DeleteResponse,
    ProjectCreate,
    ProjectDraft,
    ProjectRead,
    ProjectUpdate,
    ValidationReport,
)
from src.app.schemas.stats import (
    DashboardStats,
    RegionBreakdown,
    SectorBreakdown,
    StatusBreakdown,
)

__all__ = [
    # Project
    "DeleteResponse",
    "ProjectCreate",
    "ProjectDraft",
    "ProjectRead",
    "ProjectUpdate",
    "ValidationReport",
    # Stats
    "DashboardStats",
    "RegionBreakdown",
    "SectorBreakdown",
    "StatusBreakdown",
]
