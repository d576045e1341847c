"""Test helper functions for common data creation patterns."""

from typing import Any

from src.app.schemas.project import ProjectCreate


def make_project_payload(**overrides: Any) -> dict[str, Any]:
    """A complete, valid camelCase request body for POST/PUT /api/projects."""
    payload: dict[str, Any] = {
        "companyName": "Acme",
        "sector": "Health",
        "subSector": "Agroprocessing",
        "region": "Afar",
        "zone": "Zone 1",
        "woreda": "Woreda 3",
        "approvalDate": "2024-03-15",
        "owner": "Abebe Kebede",
        "advisorCompany": "Advisors PLC",
        "evaluator": "Hanna Tesfaye",
        "grantedBy": "Investment Commission",
        "contactPerson": "Sara Alemu",
        "ownerPhone": "+251911000000",
        "companyEmail": "info@acme.et",
        "companyWebsite": "https://acme.et",
        "projectStatus": "Planning",
        "employeesMale": 0,
        "employeesFemale": 0,
    }
    payload.update(overrides)
    return payload


def make_project_create(**overrides: Any) -> ProjectCreate:
    return ProjectCreate.model_validate(make_project_payload(**overrides))
