"""Search, filter and sort over the cached record set."""

from collections.abc import Iterable
from datetime import date
from enum import Enum
from typing import Any


class SortField(str, Enum):
    COMPANY_NAME = "company_name"
    EMPLOYEES_TOTAL = "employees_total"
    APPROVAL_DATE = "approval_date"
    REGION = "region"
    SECTOR = "sector"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


SEARCHABLE_FIELDS = ("company_name", "owner", "region", "contact_person")


def filter_projects[T](
    projects: Iterable[T],
    search: str = "",
    sector: str | None = None,
    status: str | None = None,
    region: str | None = None,
    sub_sector: str | None = None,
) -> list[T]:
    """Keep projects matching the search term and every non-empty filter.

    The search term is a case-insensitive substring match against company
    name, owner, region and contact person.
    """
    term = search.lower()
    matched = []
    for p in projects:
        if term and not any(term in (getattr(p, f) or "").lower() for f in SEARCHABLE_FIELDS):
            continue
        if sector and p.sector != sector:
            continue
        if status and p.project_status != status:
            continue
        if region and p.region != region:
            continue
        if sub_sector and p.sub_sector != sub_sector:
            continue
        matched.append(p)
    return matched


def _sort_key(field: SortField):
    def key(p: Any) -> Any:
        value = getattr(p, field.value)
        if field is SortField.EMPLOYEES_TOTAL:
            return value
        if field is SortField.APPROVAL_DATE:
            return value if isinstance(value, date) else date.fromisoformat(value)
        return value.lower()

    return key


def sort_projects[T](
    projects: Iterable[T],
    field: SortField = SortField.COMPANY_NAME,
    direction: SortDirection = SortDirection.ASC,
) -> list[T]:
    """Stable sort; text fields compare case-insensitively."""
    return sorted(
        projects,
        key=_sort_key(SortField(field)),
        reverse=SortDirection(direction) is SortDirection.DESC,
    )


def filter_options(projects: Iterable[Any]) -> dict[str, list[str]]:
    """Distinct values present in the record set, in order of first appearance."""
    projects = list(projects)
    return {
        "sectors": list(dict.fromkeys(p.sector for p in projects)),
        "statuses": list(dict.fromkeys(p.project_status for p in projects)),
        "regions": list(dict.fromkeys(p.region for p in projects)),
        "sub_sectors": list(dict.fromkeys(p.sub_sector for p in projects)),
    }
