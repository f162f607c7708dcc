"""Field validation shared by the create and update paths."""
from __future__ import annotations

import re
import uuid
from typing import Any

from .errors import MalformedIdentifierError, TaskValidationError

TITLE_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 200

_TASK_ID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$",
    re.IGNORECASE,
)


def generate_task_id() -> str:
    """Generate a unique task identifier."""

    return str(uuid.uuid4())


def validate_task_id(task_id: Any) -> str:
    """Return ``task_id`` unchanged if it has the generated-identifier format."""

    if not isinstance(task_id, str) or not _TASK_ID_PATTERN.match(task_id):
        raise MalformedIdentifierError(task_id)
    return task_id


def validate_title(title: Any) -> str:
    """Trim ``title`` and enforce the 1-100 character rule."""

    if not isinstance(title, str):
        raise TaskValidationError("Title must be a string")

    cleaned = title.strip()
    if not cleaned:
        raise TaskValidationError("Title is required")
    if len(cleaned) > TITLE_MAX_LENGTH:
        raise TaskValidationError(f"Title must be between 1 and {TITLE_MAX_LENGTH} characters")
    return cleaned


def validate_description(description: Any) -> str:
    """Trim ``description``; an empty value is allowed and kept as ``""``."""

    if not isinstance(description, str):
        raise TaskValidationError("Description must be a string")

    cleaned = description.strip()
    if len(cleaned) > DESCRIPTION_MAX_LENGTH:
        raise TaskValidationError(f"Description must be at most {DESCRIPTION_MAX_LENGTH} characters")
    return cleaned


def validate_completed(completed: Any) -> bool:
    if not isinstance(completed, bool):
        raise TaskValidationError("Completed must be a boolean")
    return completed


__all__ = [
    "DESCRIPTION_MAX_LENGTH",
    "TITLE_MAX_LENGTH",
    "generate_task_id",
    "validate_completed",
    "validate_description",
    "validate_task_id",
    "validate_title",
]
