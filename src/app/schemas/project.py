"""Project schemas for API request/response.

JSON bodies use camelCase field names; Python code uses snake_case.
"""

from datetime import UTC, date, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from src.app.core.metadata import get_metadata
from src.app.core.validators import validate_choice, validate_email_format

CAMEL_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    str_strip_whitespace=True,
)


class ProjectWrite(BaseModel):
    """Fields a client supplies when writing a project.

    employeesTotal is not accepted; it is always derived from the male and
    female counts. Any extra keys in the body are ignored.
    """

    model_config = CAMEL_CONFIG

    company_name: str = Field(min_length=1, max_length=255)
    sector: str
    sub_sector: str = Field(min_length=1, max_length=255)
    region: str
    zone: str = Field(min_length=1, max_length=255)
    woreda: str = Field(min_length=1, max_length=255)
    approval_date: date
    owner: str = Field(min_length=1, max_length=255)
    advisor_company: str | None = Field(default=None, max_length=255)
    evaluator: str | None = Field(default=None, max_length=255)
    granted_by: str | None = Field(default=None, max_length=255)
    contact_person: str = Field(min_length=1, max_length=255)
    owner_phone: str = Field(min_length=1, max_length=50)
    company_email: str = Field(min_length=1, max_length=255)
    company_website: str | None = Field(default=None, max_length=500)
    project_status: str
    employees_male: int = Field(default=0, ge=0)
    employees_female: int = Field(default=0, ge=0)

    @field_validator("sector")
    @classmethod
    def validate_sector(cls, v: str) -> str:
        return validate_choice(v, get_metadata().sectors, "sector")

    @field_validator("region")
    @classmethod
    def validate_region(cls, v: str) -> str:
        return validate_choice(v, get_metadata().regions, "region")

    @field_validator("project_status")
    @classmethod
    def validate_project_status(cls, v: str) -> str:
        return validate_choice(v, get_metadata().project_statuses, "project status")

    @field_validator("company_email")
    @classmethod
    def validate_company_email(cls, v: str) -> str:
        return validate_email_format(v)

    @field_validator("advisor_company", "evaluator", "granted_by", "company_website")
    @classmethod
    def blank_to_none(cls, v: str | None) -> str | None:
        if v is not None and not v:
            return None
        return v


class ProjectCreate(ProjectWrite):
    """Schema for creating a project. id and timestamps are server-assigned."""


class ProjectUpdate(ProjectWrite):
    """Schema for updating a project.

    Updates replace the whole record: every field must be resupplied.
    Omitted optional fields are reset to null and omitted employee counts to 0.
    """


class ProjectRead(BaseModel):
    """Schema for reading a project.

    createdAt and updatedAt are UTC and always carry an offset.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    id: str
    company_name: str
    sector: str
    sub_sector: str
    region: str
    zone: str
    woreda: str
    approval_date: date
    owner: str
    advisor_company: str | None = None
    evaluator: str | None = None
    granted_by: str | None = None
    contact_person: str
    owner_phone: str
    company_email: str
    company_website: str | None = None
    project_status: str
    employees_male: int
    employees_female: int
    employees_total: int
    created_at: datetime
    updated_at: datetime

    @field_validator("created_at", "updated_at")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        """Stored timestamps are naive UTC; serialise them with an explicit offset."""
        if v.tzinfo is None:
            return v.replace(tzinfo=UTC)
        return v


class ProjectDraft(BaseModel):
    """Partially filled form submitted for advisory validation.

    Nothing is required here; missing fields come back as validation errors
    instead of a 422.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    company_name: str | None = None
    sector: str | None = None
    sub_sector: str | None = None
    sub_sector_other: str | None = None
    region: str | None = None
    zone: str | None = None
    woreda: str | None = None
    approval_date: str | None = None
    owner: str | None = None
    advisor_company: str | None = None
    evaluator: str | None = None
    granted_by: str | None = None
    contact_person: str | None = None
    owner_phone: str | None = None
    company_email: str | None = None
    company_website: str | None = None
    project_status: str | None = None
    employees_male: int = 0
    employees_female: int = 0


class ValidationReport(BaseModel):
    """Result of advisory validation, as returned by the API."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    valid: bool
    errors: dict[str, str]
    duplicate_warning: str | None = None
    duplicate_blocked: bool = False
    duplicate_id: str | None = None


class DeleteResponse(BaseModel):
    message: str = "Project deleted successfully"
