"""Project model - the single persisted entity."""

from datetime import date, datetime
from uuid import uuid4

from sqlmodel import Field, SQLModel

from src.app.models.base import utc_now


def new_project_id() -> str:
    """Return a fresh opaque project identifier (UUID4 text)."""
    return str(uuid4())


class Project(SQLModel, table=True):
    """Project record.

    employees_total is derived from the male and female counts and is only
    ever written by ProjectService.
    """

    __tablename__ = "projects"

    id: str = Field(default_factory=new_project_id, primary_key=True, max_length=36)
    company_name: str = Field(max_length=255)
    sector: str = Field(max_length=100)
    sub_sector: str = Field(max_length=255)
    region: str = Field(max_length=100)
    zone: str = Field(max_length=255)
    woreda: str = Field(max_length=255)
    approval_date: date
    owner: str = Field(max_length=255)
    advisor_company: str | None = Field(default=None, max_length=255)
    evaluator: str | None = Field(default=None, max_length=255)
    granted_by: str | None = Field(default=None, max_length=255)
    contact_person: str = Field(max_length=255)
    owner_phone: str = Field(max_length=50)
    company_email: str = Field(max_length=255)
    company_website: str | None = Field(default=None, max_length=500)
    project_status: str = Field(max_length=50)
    employees_male: int = Field(default=0, ge=0)
    employees_female: int = Field(default=0, ge=0)
    employees_total: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=utc_now, index=True)
    updated_at: datetime = Field(default_factory=utc_now)

    def __repr__(self) -> str:
        return f"<Project id={self.id:.8} company_name={self.company_name!r}>"
