"""Project endpoints - CRUD over the full record set.

List responses always carry every record; there is no pagination.
"""

from typing import Annotated

from fastapi import APIRouter, Query, status

from src.app.api.dependencies import ProjectServiceDep
from src.app.schemas.project import (
    DeleteResponse,
    ProjectCreate,
    ProjectDraft,
    ProjectRead,
    ProjectUpdate,
    ValidationReport,
)
from src.app.services.validation import validate_project

router = APIRouter(prefix="/projects", tags=["projects"])

NOT_FOUND = {404: {"description": "Project not found"}}


@router.get(
    "",
    response_model=list[ProjectRead],
    summary="List projects",
    description="List every project, newest first.",
)
async def list_projects(project_service: ProjectServiceDep) -> list[ProjectRead]:
    projects = await project_service.list_projects()
    return [ProjectRead.model_validate(p) for p in projects]


@router.post(
    "",
    response_model=ProjectRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create project",
    description="Create a project. The server assigns id, createdAt and updatedAt.",
    responses={201: {"description": "Project created"}},
)
async def create_project(
    request: ProjectCreate,
    project_service: ProjectServiceDep,
) -> ProjectRead:
    project = await project_service.create_project(request)
    return ProjectRead.model_validate(project)


@router.post(
    "/validate",
    response_model=ValidationReport,
    summary="Validate a draft project",
    description=(
        "Run form validation and duplicate detection against the stored projects. "
        "Advisory only: nothing is written and create/update never consult it."
    ),
)
async def validate_draft(
    draft: ProjectDraft,
    project_service: ProjectServiceDep,
    editing_id: Annotated[
        str | None,
        Query(alias="editingId", description="Id of the project being edited"),
    ] = None,
) -> ValidationReport:
    existing = await project_service.list_projects()
    result = validate_project(draft.model_dump(), existing, editing_id=editing_id)
    return ValidationReport(
        valid=result.is_valid,
        errors=result.errors,
        duplicate_warning=result.duplicate_warning,
        duplicate_blocked=result.is_duplicate_blocked,
        duplicate_id=result.duplicate_id,
    )


@router.get(
    "/{project_id}",
    response_model=ProjectRead,
    summary="Get project",
    responses=NOT_FOUND,
)
async def get_project(project_id: str, project_service: ProjectServiceDep) -> ProjectRead:
    project = await project_service.get_project(project_id)
    return ProjectRead.model_validate(project)


@router.put(
    "/{project_id}",
    response_model=ProjectRead,
    summary="Replace project",
    description="Overwrite every field of a project. Partial updates are not supported.",
    responses=NOT_FOUND,
)
async def update_project(
    project_id: str,
    request: ProjectUpdate,
    project_service: ProjectServiceDep,
) -> ProjectRead:
    project = await project_service.update_project(project_id, request)
    return ProjectRead.model_validate(project)


@router.delete(
    "/{project_id}",
    response_model=DeleteResponse,
    summary="Delete project",
    responses=NOT_FOUND,
)
async def delete_project(project_id: str, project_service: ProjectServiceDep) -> DeleteResponse:
    await project_service.delete_project(project_id)
    return DeleteResponse()
