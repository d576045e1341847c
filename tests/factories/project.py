"""Project factory for test data generation."""

import random
from datetime import date

from polyfactory import Use
from polyfactory.decorators import post_generated

from src.app.core.metadata import REGIONS, SUB_SECTORS
from src.app.models import Project, ProjectStatus, Sector, new_project_id
from tests.factories.base import BaseFactory, utc_now


class ProjectFactory(BaseFactory):
    """Factory for unsaved Project rows with consistent employee totals."""

    __model__ = Project

    id = Use(new_project_id)
    company_name = Use(lambda: f"Company {new_project_id()[:8]}")
    sector = Use(lambda: random.choice(list(Sector)).value)
    sub_sector = Use(random.choice, SUB_SECTORS)
    region = Use(random.choice, REGIONS)
    zone = "Zone 1"
    woreda = "Woreda 1"
    approval_date = Use(date.today)
    owner = "Owner"
    advisor_company = None
    evaluator = None
    granted_by = None
    contact_person = "Contact"
    owner_phone = "+251900000000"
    company_email = "contact@example.com"
    company_website = None
    project_status = Use(lambda: random.choice(list(ProjectStatus)).value)
    employees_male = Use(random.randint, 0, 50)
    employees_female = Use(random.randint, 0, 50)
    created_at = Use(utc_now)
    updated_at = Use(utc_now)

    @post_generated
    @classmethod
    def employees_total(cls, employees_male: int, employees_female: int) -> int:
        return employees_male + employees_female
