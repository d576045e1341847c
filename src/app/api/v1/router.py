from fastapi import APIRouter

from src.app.api.v1 import metadata, projects, stats

api_router = APIRouter(prefix="/api")
api_router.include_router(projects.router)
api_router.include_router(metadata.router)
api_router.include_router(stats.router)
