"""Task tracking core: data model, JSON store and CRUD service."""

from .errors import (
    MalformedIdentifierError,
    StorageError,
    TaskError,
    TaskNotFoundError,
    TaskValidationError,
)
from .models import Task
from .service import TaskService
from .store import TaskStore

__all__ = [
    "MalformedIdentifierError",
    "StorageError",
    "Task",
    "TaskError",
    "TaskNotFoundError",
    "TaskService",
    "TaskStore",
    "TaskValidationError",
]
