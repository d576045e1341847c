"""Reference enumerations for project records.

Fixed at import time and exposed as one frozen snapshot. Validation, the
aggregation engine and the `/api/metadata` route all read from here.
"""

from functools import lru_cache
from typing import Final

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from src.app.models.enums import ProjectStatus, Sector

REGIONS: Final[tuple[str, ...]] = (
    "Addis Ababa",
    "Afar",
    "Amhara",
    "Benishangul-Gumuz",
    "Dire Dawa",
    "Gambela",
    "Harari",
    "Oromia",
    "Sidama",
    "SNNP",
    "Somali",
    "Tigray",
    "Southwest",
    "Central Ethiopia",
)

SUB_SECTORS: Final[tuple[str, ...]] = (
    "Agroprocessing",
    "Food and Beverage",
    "Construction and Engineering",
    "Chemical and Detergents",
    "Textile and Garment",
    "Multi-Sectorial",
    "Minerals",
)

# Form choice that switches the sub-sector to a free-text value
OTHER_SUB_SECTOR: Final[str] = "Other"


class Metadata(BaseModel):
    """Immutable snapshot of the four enumerations."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    regions: tuple[str, ...]
    sectors: tuple[str, ...]
    sub_sectors: tuple[str, ...]
    project_statuses: tuple[str, ...]


@lru_cache
def get_metadata() -> Metadata:
    return Metadata(
        regions=REGIONS,
        sectors=tuple(s.value for s in Sector),
        sub_sectors=SUB_SECTORS,
        project_statuses=tuple(s.value for s in ProjectStatus),
    )
