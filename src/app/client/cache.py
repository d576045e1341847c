"""In-memory cache of the full project set, as held by a client session.

The cache is loaded once, validated against before every submission and
patched with the canonical record the server returns: create appends,
update replaces by id, delete removes by id. There is no invalidation
channel, so another client's writes show up only after the next load().
"""

import asyncio
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ValidationError
from pydantic.alias_generators import to_snake

from src.app.client.api import ProjectsClient
from src.app.core.exceptions import DuplicateBlockedError, ProjectValidationError
from src.app.core.metadata import Metadata, get_metadata
from src.app.schemas.project import ProjectCreate, ProjectRead, ProjectUpdate, ProjectWrite
from src.app.schemas.stats import DashboardStats
from src.app.services.aggregation import compute_dashboard_stats
from src.app.services.listing import (
    SortDirection,
    SortField,
    filter_options,
    filter_projects,
    sort_projects,
)
from src.app.services.validation import ValidationResult, resolve_sub_sector, validate_project


def normalize_form(candidate: Mapping[str, Any] | BaseModel) -> dict[str, Any]:
    """snake_case copy of a form. An "Other" sub-sector is left unresolved."""
    if isinstance(candidate, BaseModel):
        return candidate.model_dump()
    return {to_snake(key): value for key, value in candidate.items()}


def _schema_errors(exc: ValidationError) -> ValidationResult:
    """Field errors from a rejected request schema, keyed like form errors."""
    errors: dict[str, str] = {}
    for error in exc.errors():
        name = str(error["loc"][0]) if error["loc"] else "form"
        errors.setdefault(name, error["msg"])
    return ValidationResult(errors=errors)

class ProjectCache:
    """Client-side record set with validation, aggregation and list views."""

    def __init__(self, client: ProjectsClient):
        self.client = client
        self.projects: list[ProjectRead] = []
        self.metadata: Metadata | None = None

    async def load(self) -> None:
        """Replace the cached set and metadata with a fresh fetch."""
        projects, metadata = await asyncio.gather(
            self.client.fetch_projects(),
            self.client.fetch_metadata(),
        )
        self.projects = projects
        self.metadata = metadata

    def get(self, project_id: str) -> ProjectRead | None:
        return next((p for p in self.projects if p.id == project_id), None)

    def check(
        self,
        candidate: Mapping[str, Any] | BaseModel,
        editing_id: str | None = None,
    ) -> ValidationResult:
        """Validate a form against the cached set without submitting it."""
        return validate_project(normalize_form(candidate), self.projects, editing_id=editing_id)

    async def create(self, candidate: Mapping[str, Any] | BaseModel) -> ProjectRead:
        payload = self._validated(candidate, ProjectCreate)
        project = await self.client.create_project(payload)
        self.projects.append(project)
        return project

    async def update(
        self,
        project_id: str,
        candidate: Mapping[str, Any] | BaseModel,
    ) -> ProjectRead:
        payload = self._validated(candidate, ProjectUpdate, editing_id=project_id)
        project = await self.client.update_project(project_id, payload)
        self.projects = [project if p.id == project_id else p for p in self.projects]
        return project

    async def delete(self, project_id: str) -> None:
        await self.client.delete_project(project_id)
        self.projects = [p for p in self.projects if p.id != project_id]

    def stats(self) -> DashboardStats:
        return compute_dashboard_stats(self.projects, self.metadata or get_metadata())

    def view(
        self,
        search: str = "",
        sector: str | None = None,
        status: str | None = None,
        region: str | None = None,
        sub_sector: str | None = None,
        sort_by: SortField = SortField.COMPANY_NAME,
        direction: SortDirection = SortDirection.ASC,
    ) -> list[ProjectRead]:
        """Filtered and sorted slice of the cache for a list view."""
        matched = filter_projects(
            self.projects,
            search=search,
            sector=sector,
            status=status,
            region=region,
            sub_sector=sub_sector,
        )
        return sort_projects(matched, sort_by, direction)

    def filter_options(self) -> dict[str, list[str]]:
        return filter_options(self.projects)

    def _validated[W: ProjectWrite](
        self,
        candidate: Mapping[str, Any] | BaseModel,
        schema: type[W],
        editing_id: str | None = None,
    ) -> W:
        data = normalize_form(candidate)
        result = validate_project(data, self.projects, editing_id=editing_id)
        if result.is_duplicate_blocked:
            raise DuplicateBlockedError(result)
        if not result.is_valid:
            raise ProjectValidationError(result)

        other_text = data.pop("sub_sector_other", None)
        data["sub_sector"] = resolve_sub_sector(data["sub_sector"], other_text)
        try:
            return schema.model_validate(data)
        except ValidationError as e:
            raise ProjectValidationError(_schema_errors(e)) from e
