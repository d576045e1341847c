"""Dashboard statistics endpoint."""

from fastapi import APIRouter

from src.app.api.dependencies import ProjectServiceDep
from src.app.core.metadata import get_metadata
from src.app.schemas.stats import DashboardStats
from src.app.services.aggregation import compute_dashboard_stats

router = APIRouter(tags=["stats"])


@router.get(
    "/stats",
    response_model=DashboardStats,
    summary="Dashboard statistics",
    description="Totals and per-sector/status/region breakdowns over all projects.",
)
async def read_stats(project_service: ProjectServiceDep) -> DashboardStats:
    projects = await project_service.list_projects()
    return compute_dashboard_stats(projects, get_metadata())
