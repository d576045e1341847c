"""Async HTTP client for the project API."""

from types import TracebackType
from typing import Any, Self

import httpx

from src.app.core.config import get_settings
from src.app.core.exceptions import APIError, ProjectNotFoundError
from src.app.core.logging import get_logger
from src.app.core.metadata import Metadata
from src.app.schemas.project import ProjectCreate, ProjectRead, ProjectUpdate
from src.app.schemas.stats import DashboardStats

logger = get_logger(__name__)


class ProjectsClient:
    """Thin typed wrapper over httpx.AsyncClient.

    Use as an async context manager, or call aclose() when done. Pass
    `transport` (e.g. httpx.ASGITransport) to talk to an in-process app.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        settings = get_settings()
        self._http = httpx.AsyncClient(
            base_url=base_url or settings.api_base_url,
            timeout=timeout if timeout is not None else settings.api_timeout_seconds,
            transport=transport,
        )

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def fetch_projects(self) -> list[ProjectRead]:
        response = await self._request("GET", "/api/projects")
        return [ProjectRead.model_validate(item) for item in response.json()]

    async def fetch_project(self, project_id: str) -> ProjectRead:
        response = await self._request("GET", f"/api/projects/{project_id}", project_id)
        return ProjectRead.model_validate(response.json())

    async def fetch_metadata(self) -> Metadata:
        response = await self._request("GET", "/api/metadata")
        return Metadata.model_validate(response.json())

    async def fetch_stats(self) -> DashboardStats:
        response = await self._request("GET", "/api/stats")
        return DashboardStats.model_validate(response.json())

    async def create_project(self, data: ProjectCreate) -> ProjectRead:
        response = await self._request(
            "POST", "/api/projects", json=data.model_dump(mode="json", by_alias=True)
        )
        return ProjectRead.model_validate(response.json())

    async def update_project(self, project_id: str, data: ProjectUpdate) -> ProjectRead:
        response = await self._request(
            "PUT",
            f"/api/projects/{project_id}",
            project_id,
            json=data.model_dump(mode="json", by_alias=True),
        )
        return ProjectRead.model_validate(response.json())

    async def delete_project(self, project_id: str) -> None:
        await self._request("DELETE", f"/api/projects/{project_id}", project_id)

    async def _request(
        self,
        method: str,
        path: str,
        project_id: str | None = None,
        json: Any = None,
    ) -> httpx.Response:
        response = await self._http.request(method, path, json=json)
        if response.is_success:
            return response

        try:
            body = response.json()
        except ValueError:
            body = {}
        message = body.get("error") or response.text
        request_id = body.get("request_id") or response.headers.get("X-Request-ID")

        if response.status_code == 404 and project_id is not None:
            raise ProjectNotFoundError(project_id)

        logger.warning(
            "API request failed",
            method=method,
            path=path,
            status_code=response.status_code,
            request_id=request_id,
        )
        raise APIError(response.status_code, str(message), request_id)
