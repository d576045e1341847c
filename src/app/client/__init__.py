"""Python client for the project API with a local record cache."""

from src.app.client.api import ProjectsClient
from src.app.client.cache import ProjectCache, normalize_form

__all__ = ["ProjectCache", "ProjectsClient", "normalize_form"]
