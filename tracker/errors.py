"""Exceptions raised by the task store and service."""
from __future__ import annotations


class TaskError(Exception):
    """Base class for task tracker failures."""


class TaskValidationError(TaskError):
    """Raised when supplied task fields break the validation policy."""


class MalformedIdentifierError(TaskValidationError):
    """Raised when a task identifier does not look like a generated one."""

    def __init__(self, task_id: object):
        self.task_id = task_id
        super().__init__("Invalid task ID format")


class TaskNotFoundError(TaskError):
    """Raised when no task carries the requested identifier."""

    def __init__(self, task_id: str):
        self.task_id = task_id
        super().__init__("Task not found")


class StorageError(TaskError):
    """Raised when the backing JSON file cannot be read or written."""


__all__ = [
    "MalformedIdentifierError",
    "StorageError",
    "TaskError",
    "TaskNotFoundError",
    "TaskValidationError",
]
