"""Field validators shared by request schemas and form validation."""

import re
from collections.abc import Iterable
from typing import Final

EMAIL_REGEX: Final[str] = r"\S+@\S+\.\S+"

_EMAIL_PATTERN: Final[re.Pattern[str]] = re.compile(EMAIL_REGEX)


def is_valid_email(value: str) -> bool:
    """Loose `local@domain.tld` check; matches anywhere in the string."""
    return _EMAIL_PATTERN.search(value) is not None


def validate_email_format(value: str) -> str:
    if not is_valid_email(value):
        raise ValueError("Invalid email format")
    return value


def validate_choice(value: str, choices: Iterable[str], label: str) -> str:
    """Ensure value is one of the allowed metadata entries."""
    allowed = tuple(choices)
    if value not in allowed:
        raise ValueError(f"Unknown {label} '{value}'. Expected one of: {', '.join(allowed)}")
    return value


def is_blank(value: object) -> bool:
    """True for None and for strings that are empty after trimming."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False
