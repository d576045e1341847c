"""Shared enums for models."""

from enum import Enum


class Sector(str, Enum):
    """Economic sector a project belongs to."""

    HEALTH = "Health"
    INDUSTRY = "Industry"
    AGRICULTURE = "Agriculture"


class ProjectStatus(str, Enum):
    """Project lifecycle status."""

    PLANNING = "Planning"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    ON_HOLD = "On Hold"
    CANCELLED = "Cancelled"
