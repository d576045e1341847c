"""Store initialisation run once at startup."""

import asyncio

from sqlalchemy.ext.asyncio import AsyncEngine
from sqlmodel import SQLModel

from src.app.core.config import get_settings
from src.app.core.db.engine import get_engine
from src.app.core.db.migrations import run_migrations_sync
from src.app.core.logging import get_logger

# Register tables on SQLModel.metadata
from src.app.models import Project  # noqa: F401

logger = get_logger(__name__)


async def init_db(engine: AsyncEngine | None = None) -> None:
    """Create the projects table if it does not exist.

    With RUN_MIGRATIONS_ON_STARTUP the Alembic migrations are applied instead.
    Errors propagate: a store that cannot be initialised must abort startup.
    """
    settings = get_settings()
    if settings.run_migrations_on_startup:
        logger.info("Applying database migrations")
        await asyncio.to_thread(run_migrations_sync)
        return

    if engine is None:
        engine = get_engine()

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    logger.info("Database initialized")
