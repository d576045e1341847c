"""Database utilities - engine, session, migrations."""

from src.app.core.db.engine import dispose_engine, get_engine
from src.app.core.db.init import init_db
from src.app.core.db.migrations import downgrade_sync, run_migrations_sync
from src.app.core.db.session import get_session

__all__ = [
    # Engine
    "dispose_engine",
    "get_engine",
    # Session
    "get_session",
    # Startup
    "init_db",
    # Migrations
    "downgrade_sync",
    "run_migrations_sync",
]
