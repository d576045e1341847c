"""Dashboard statistics schemas."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SectorBreakdown(_CamelModel):
    name: str
    projects: int
    employees: int


class StatusBreakdown(_CamelModel):
    name: str
    projects: int


class RegionBreakdown(_CamelModel):
    name: str
    projects: int
    employees: int


class DashboardStats(_CamelModel):
    """Aggregates over the full record set.

    Percentages are 0.0 when there are no employees at all.
    """

    total_projects: int
    total_employees: int
    male_employees: int
    female_employees: int
    completed_projects: int
    in_progress_projects: int
    male_percentage: float
    female_percentage: float
    sectors: list[SectorBreakdown]
    statuses: list[StatusBreakdown]
    regions: list[RegionBreakdown]
