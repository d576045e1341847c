"""Domain errors and exception handlers with request_id in responses.

Error bodies have the shape {"error": str, "request_id": str}; request
validation failures add the pydantic "errors" list.
"""

from typing import TYPE_CHECKING, Any

from asgi_correlation_id import correlation_id
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.app.core.logging import get_logger

if TYPE_CHECKING:
    from src.app.services.validation import ValidationResult

logger = get_logger(__name__)


class ProjectNotFoundError(Exception):
    """Raised when an operation targets a project id that does not exist."""

    def __init__(self, project_id: str):
        self.project_id = project_id
        super().__init__(f"Project {project_id} not found")


class PersistenceError(Exception):
    """Raised when the store fails to read or write.

    The message is for internal logging only; the client receives a
    generic 500. Operations are never retried.
    """


class ProjectValidationError(Exception):
    """Raised client-side when a candidate record fails form validation."""

    def __init__(self, result: "ValidationResult"):
        self.result = result
        super().__init__("; ".join(f"{k}: {v}" for k, v in result.errors.items()))


class DuplicateBlockedError(ProjectValidationError):
    """Raised client-side when the (company, sector, region) triple already exists."""


class APIError(Exception):
    """Raised by the API client for unexpected non-2xx responses."""

    def __init__(self, status_code: int, message: str, request_id: str | None = None):
        self.status_code = status_code
        self.request_id = request_id
        super().__init__(f"{status_code}: {message}")


def _error_body(message: Any, **extra: Any) -> dict[str, Any]:
    return {"error": message, "request_id": correlation_id.get(), **extra}


def setup_exception_handlers(app: FastAPI) -> None:
    """Configure exception handlers that include request_id in responses."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content=_error_body(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content=_error_body("Validation failed", errors=jsonable_encoder(exc.errors())),
        )

    @app.exception_handler(ProjectNotFoundError)
    async def not_found_handler(request: Request, exc: ProjectNotFoundError) -> JSONResponse:
        logger.info("Project not found", project_id=exc.project_id, path=request.url.path)
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=_error_body(str(exc)))

    @app.exception_handler(PersistenceError)
    async def persistence_error_handler(request: Request, exc: PersistenceError) -> JSONResponse:
        logger.error("Persistence failure", error=str(exc), path=request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_error_body("Failed to persist project data"),
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(
            "Unhandled exception",
            exc_info=exc,
            request_id=correlation_id.get(),
            path=request.url.path,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_error_body("Internal server error"),
        )
