"""Reference data endpoint."""

from fastapi import APIRouter

from src.app.core.metadata import Metadata, get_metadata

router = APIRouter(tags=["metadata"])


@router.get(
    "/metadata",
    response_model=Metadata,
    summary="Get metadata",
    description="Regions, sectors, sub-sectors and project statuses.",
)
async def read_metadata() -> Metadata:
    return get_metadata()
