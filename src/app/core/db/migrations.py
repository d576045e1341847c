"""Reusable migration runner for both production and tests."""

from pathlib import Path

from alembic.config import Config

from alembic import command

# Repository root holds alembic.ini
ALEMBIC_INI = Path(__file__).resolve().parents[4] / "alembic.ini"


def run_migrations_sync(revision: str = "head") -> None:
    """Run Alembic migrations synchronously up to `revision`."""
    alembic_cfg = Config(str(ALEMBIC_INI))
    command.upgrade(alembic_cfg, revision)


def downgrade_sync(revision: str = "base") -> None:
    """Roll Alembic migrations back down to `revision`."""
    alembic_cfg = Config(str(ALEMBIC_INI))
    command.downgrade(alembic_cfg, revision)
