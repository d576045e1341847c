"""Dashboard statistics computed from the full record set.

Recomputed from scratch on every call; nothing is cached or updated
incrementally. Works on any objects with the Project attribute names.
"""

from collections import Counter
from collections.abc import Iterable
from typing import Any

from src.app.core.metadata import Metadata, get_metadata
from src.app.models.enums import ProjectStatus
from src.app.schemas.stats import (
    DashboardStats,
    RegionBreakdown,
    SectorBreakdown,
    StatusBreakdown,
)


def percentage(part: int, whole: int) -> float:
    """part / whole as a percentage rounded to one decimal; 0.0 when whole is 0."""
    if whole == 0:
        return 0.0
    return round(part / whole * 100, 1)


def compute_dashboard_stats(
    projects: Iterable[Any],
    metadata: Metadata | None = None,
) -> DashboardStats:
    """Aggregate totals and per-sector/status/region breakdowns.

    Breakdowns follow metadata order and include zero buckets. Records whose
    sector, status or region is not in the metadata still count towards the
    totals.
    """
    if metadata is None:
        metadata = get_metadata()
    projects = list(projects)

    male = sum(p.employees_male for p in projects)
    female = sum(p.employees_female for p in projects)
    total = sum(p.employees_total for p in projects)

    sector_counts: Counter[str] = Counter()
    sector_employees: Counter[str] = Counter()
    region_counts: Counter[str] = Counter()
    region_employees: Counter[str] = Counter()
    status_counts: Counter[str] = Counter()
    for p in projects:
        sector_counts[p.sector] += 1
        sector_employees[p.sector] += p.employees_total
        region_counts[p.region] += 1
        region_employees[p.region] += p.employees_total
        status_counts[p.project_status] += 1

    return DashboardStats(
        total_projects=len(projects),
        total_employees=total,
        male_employees=male,
        female_employees=female,
        completed_projects=status_counts[ProjectStatus.COMPLETED.value],
        in_progress_projects=status_counts[ProjectStatus.IN_PROGRESS.value],
        male_percentage=percentage(male, total),
        female_percentage=percentage(female, total),
        sectors=[
            SectorBreakdown(
                name=sector,
                projects=sector_counts[sector],
                employees=sector_employees[sector],
            )
            for sector in metadata.sectors
        ],
        statuses=[
            StatusBreakdown(name=status, projects=status_counts[status])
            for status in metadata.project_statuses
        ],
        regions=[
            RegionBreakdown(
                name=region,
                projects=region_counts[region],
                employees=region_employees[region],
            )
            for region in metadata.regions
        ],
    )
