"""Form validation and duplicate detection for project records.

Runs against the cached record set before a create or update is submitted.
The duplicate rule is advisory: the store accepts duplicate triples, the
form just refuses to submit them.

Candidates can be mappings (snake_case or camelCase keys, as posted by a
form) or objects with snake_case attributes (Project, ProjectRead).
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, Final

from pydantic.alias_generators import to_camel

from src.app.core.metadata import OTHER_SUB_SECTOR
from src.app.core.validators import is_blank, is_valid_email

REQUIRED_FIELDS: Final[tuple[str, ...]] = (
    "company_name",
    "sector",
    "sub_sector",
    "region",
    "zone",
    "woreda",
    "approval_date",
    "owner",
    "project_status",
    "contact_person",
    "owner_phone",
    "company_email",
)

REQUIRED_MESSAGE: Final[str] = "This field is required"
INVALID_EMAIL_MESSAGE: Final[str] = "Invalid email format"
DUPLICATE_ERROR_KEY: Final[str] = "duplicate"
DUPLICATE_MESSAGE: Final[str] = (
    "Cannot create duplicate project. Please modify the company name, sector, or region."
)


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one candidate record.

    Attributes:
        errors: Field name (camelCase, as shown on the form) to message.
            A blocked duplicate also adds an entry under "duplicate".
        duplicate_warning: Human readable description of the clash, if any
        is_duplicate_blocked: True when another record has the same triple
        duplicate_id: Id of the clashing record
    """

    errors: dict[str, str] = field(default_factory=dict)
    duplicate_warning: str | None = None
    is_duplicate_blocked: bool = False
    duplicate_id: str | None = None

    @property
    def is_valid(self) -> bool:
        return not self.errors and not self.is_duplicate_blocked


def _get(record: Any, name: str) -> Any:
    if isinstance(record, Mapping):
        if name in record:
            return record[name]
        return record.get(to_camel(name))
    return getattr(record, name, None)


def duplicate_key(company_name: str, sector: str, region: str) -> tuple[str, str, str]:
    """Comparison key for the soft uniqueness rule."""
    return company_name.strip().lower(), sector, region


def resolve_sub_sector(choice: str, other_text: str | None = None) -> str:
    """Map the "Other" form choice to its free-text value."""
    if choice == OTHER_SUB_SECTOR:
        return (other_text or "").strip()
    return choice


def find_duplicate(
    candidate: Any,
    existing: Iterable[Any],
    editing_id: str | None = None,
) -> Any | None:
    """Return the first existing record sharing the candidate's triple.

    The record being edited (editing_id) is never its own duplicate. Nothing
    is checked until company name, sector and region are all filled in.
    """
    company_name = _get(candidate, "company_name")
    sector = _get(candidate, "sector")
    region = _get(candidate, "region")
    if is_blank(company_name) or is_blank(sector) or is_blank(region):
        return None

    key = duplicate_key(company_name, sector, region)
    for record in existing:
        if editing_id is not None and str(_get(record, "id")) == editing_id:
            continue
        other = duplicate_key(
            _get(record, "company_name") or "",
            _get(record, "sector"),
            _get(record, "region"),
        )
        if other == key:
            return record
    return None


def validate_project(
    candidate: Any,
    existing: Iterable[Any] = (),
    editing_id: str | None = None,
) -> ValidationResult:
    """Check required fields, email format and the duplicate triple."""
    errors: dict[str, str] = {}

    for name in REQUIRED_FIELDS:
        if is_blank(_get(candidate, name)):
            errors[to_camel(name)] = REQUIRED_MESSAGE

    if _get(candidate, "sub_sector") == OTHER_SUB_SECTOR and is_blank(
        _get(candidate, "sub_sector_other")
    ):
        errors["subSectorOther"] = REQUIRED_MESSAGE

    email = _get(candidate, "company_email")
    if not is_blank(email) and not is_valid_email(str(email)):
        errors["companyEmail"] = INVALID_EMAIL_MESSAGE

    duplicate = find_duplicate(candidate, existing, editing_id)
    if duplicate is None:
        return ValidationResult(errors=errors)

    errors[DUPLICATE_ERROR_KEY] = DUPLICATE_MESSAGE
    warning = (
        f'A project with the company name "{_get(candidate, "company_name")}" already exists '
        f"in the {_get(candidate, 'sector')} sector in {_get(candidate, 'region')} region. "
        "Please verify this is not a duplicate entry."
    )
    return ValidationResult(
        errors=errors,
        duplicate_warning=warning,
        is_duplicate_blocked=True,
        duplicate_id=str(_get(duplicate, "id")),
    )
