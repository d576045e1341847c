"""Unit tests for form validation and duplicate detection."""

import pytest

from src.app.services.validation import (
    DUPLICATE_ERROR_KEY,
    INVALID_EMAIL_MESSAGE,
    REQUIRED_FIELDS,
    REQUIRED_MESSAGE,
    find_duplicate,
    resolve_sub_sector,
    validate_project,
)
from tests.factories import ProjectFactory
from tests.helpers import make_project_payload

pytestmark = pytest.mark.unit


class TestRequiredFields:
    def test_complete_form_is_valid(self):
        result = validate_project(make_project_payload())

        assert result.is_valid
        assert result.errors == {}
        assert result.duplicate_warning is None

    def test_empty_form_reports_every_required_field(self):
        result = validate_project({})

        assert not result.is_valid
        assert len(result.errors) == len(REQUIRED_FIELDS)
        assert set(result.errors.values()) == {REQUIRED_MESSAGE}
        assert "companyName" in result.errors
        assert "approvalDate" in result.errors

    @pytest.mark.parametrize("value", ["", "   ", None])
    def test_blank_company_name_is_required(self, value):
        result = validate_project(make_project_payload(companyName=value))

        assert result.errors == {"companyName": REQUIRED_MESSAGE}

    def test_optional_fields_may_be_blank(self):
        payload = make_project_payload(
            advisorCompany="", evaluator="", grantedBy="", companyWebsite=""
        )

        assert validate_project(payload).is_valid

    def test_snake_case_keys_are_accepted(self):
        payload = {
            "company_name": "Acme",
            "sector": "Health",
            "sub_sector": "Minerals",
            "region": "Afar",
            "zone": "Z",
            "woreda": "W",
            "approval_date": "2024-01-01",
            "owner": "O",
            "project_status": "Planning",
            "contact_person": "C",
            "owner_phone": "1",
            "company_email": "a@b.co",
        }

        assert validate_project(payload).is_valid

    def test_objects_are_accepted(self):
        project = ProjectFactory.build()

        assert validate_project(project).is_valid


class TestEmailFormat:
    @pytest.mark.parametrize("email", ["plainaddress", "a@b", "@example.com", "a b@c d"])
    def test_invalid_email(self, email):
        result = validate_project(make_project_payload(companyEmail=email))

        assert result.errors == {"companyEmail": INVALID_EMAIL_MESSAGE}

    def test_missing_email_is_required_not_invalid(self):
        result = validate_project(make_project_payload(companyEmail=" "))

        assert result.errors == {"companyEmail": REQUIRED_MESSAGE}


class TestOtherSubSector:
    def test_other_requires_free_text(self):
        result = validate_project(make_project_payload(subSector="Other"))

        assert result.errors == {"subSectorOther": REQUIRED_MESSAGE}

    def test_other_with_free_text_is_valid(self):
        result = validate_project(
            make_project_payload(subSector="Other", subSectorOther="Leather")
        )

        assert result.is_valid

    def test_resolve_sub_sector(self):
        assert resolve_sub_sector("Other", "  Leather ") == "Leather"
        assert resolve_sub_sector("Minerals", "ignored") == "Minerals"


class TestDuplicateDetection:
    @pytest.fixture
    def acme(self):
        return ProjectFactory.build(company_name="Acme", sector="Health", region="Afar")

    def test_same_triple_different_case_is_blocked(self, acme):
        candidate = make_project_payload(companyName="ACME", sector="Health", region="Afar")

        result = validate_project(candidate, [acme])

        assert not result.is_valid
        assert result.is_duplicate_blocked
        assert result.duplicate_id == acme.id
        assert DUPLICATE_ERROR_KEY in result.errors
        assert '"ACME"' in result.duplicate_warning
        assert "Health sector" in result.duplicate_warning
        assert "Afar region" in result.duplicate_warning

    def test_editing_record_does_not_clash_with_itself(self, acme):
        candidate = make_project_payload(companyName="Acme", sector="Health", region="Afar")

        result = validate_project(candidate, [acme], editing_id=acme.id)

        assert result.is_valid
        assert not result.is_duplicate_blocked

    def test_editing_into_another_records_triple_is_blocked(self, acme):
        other = ProjectFactory.build(company_name="Beta", sector="Health", region="Afar")
        candidate = make_project_payload(companyName="acme", sector="Health", region="Afar")

        result = validate_project(candidate, [acme, other], editing_id=other.id)

        assert result.is_duplicate_blocked
        assert result.duplicate_id == acme.id

    @pytest.mark.parametrize(
        "overrides",
        [
            {"companyName": "Acme Two"},
            {"sector": "Industry"},
            {"region": "Amhara"},
        ],
    )
    def test_any_differing_component_is_not_a_duplicate(self, acme, overrides):
        candidate = make_project_payload(
            **{"companyName": "Acme", "sector": "Health", "region": "Afar", **overrides}
        )

        assert not validate_project(candidate, [acme]).is_duplicate_blocked

    def test_incomplete_triple_is_not_checked(self, acme):
        candidate = {"companyName": "Acme", "sector": "Health"}

        assert find_duplicate(candidate, [acme]) is None

    def test_surrounding_whitespace_is_ignored(self, acme):
        candidate = make_project_payload(companyName="  acme  ", sector="Health", region="Afar")

        assert validate_project(candidate, [acme]).is_duplicate_blocked

    def test_raw_json_records_are_accepted(self):
        existing = [{"id": "1", "companyName": "Acme", "sector": "Health", "region": "Afar"}]

        result = validate_project(make_project_payload(), existing)

        assert result.duplicate_id == "1"
