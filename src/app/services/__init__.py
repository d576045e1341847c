from src.app.services.aggregation import compute_dashboard_stats
from src.app.services.project_service import ProjectService
from src.app.services.validation import ValidationResult, validate_project

__all__ = [
    "ProjectService",
    "ValidationResult",
    "compute_dashboard_stats",
    "validate_project",
]
