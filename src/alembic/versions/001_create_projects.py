"""Create projects table

Revision ID: 001
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa
import sqlmodel

from alembic import op

revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "projects",
        sa.Column("id", sqlmodel.sql.sqltypes.AutoString(length=36), nullable=False),
        sa.Column("company_name", sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column("sector", sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column("sub_sector", sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column("region", sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column("zone", sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column("woreda", sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column("approval_date", sa.Date(), nullable=False),
        sa.Column("owner", sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column("advisor_company", sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
        sa.Column("evaluator", sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
        sa.Column("granted_by", sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
        sa.Column("contact_person", sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column("owner_phone", sqlmodel.sql.sqltypes.AutoString(length=50), nullable=False),
        sa.Column("company_email", sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column("company_website", sqlmodel.sql.sqltypes.AutoString(length=500), nullable=True),
        sa.Column("project_status", sqlmodel.sql.sqltypes.AutoString(length=50), nullable=False),
        sa.Column("employees_male", sa.Integer(), nullable=False),
        sa.Column("employees_female", sa.Integer(), nullable=False),
        sa.Column("employees_total", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_projects_created_at", "projects", ["created_at"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_projects_created_at", table_name="projects")
    op.drop_table("projects")
