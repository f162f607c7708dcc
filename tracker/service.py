"""Create/read/update/delete rules for tasks on top of :class:`TaskStore`.

Every operation runs a full load-mutate-save cycle against the store while
holding the service lock, so concurrent callers sharing one service never
overwrite each other's changes.
"""
from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Dict, List, Optional

from .errors import TaskNotFoundError, TaskValidationError
from .models import Task, utc_timestamp
from .store import TaskStore
from .validation import (
    generate_task_id,
    validate_completed,
    validate_description,
    validate_task_id,
    validate_title,
)

logger = logging.getLogger(__name__)

_UPDATABLE_FIELDS: Dict[str, Callable[[Any], Any]] = {
    "title": validate_title,
    "description": validate_description,
    "completed": validate_completed,
}


class TaskService:
    """Business rules for the task collection."""

    def __init__(self, store: TaskStore):
        self.store = store
        self._lock = threading.RLock()

    def list_all(self) -> List[Task]:
        """Return all tasks, newest ``createdAt`` first."""

        with self._lock:
            tasks = self.store.load()
        # Reversing first keeps the latest-appended task ahead on equal timestamps.
        return sorted(reversed(tasks), key=lambda task: task.created, reverse=True)

    def get_by_id(self, task_id: str) -> Task:
        validate_task_id(task_id)
        with self._lock:
            tasks = self.store.load()
        return _find(tasks, task_id)

    def create(self, title: Any, description: Optional[Any] = None) -> Task:
        """Validate and persist a new task, returning it."""

        cleaned_title = validate_title(title)
        cleaned_description = validate_description(description) if description is not None else ""

        task = Task(
            id=generate_task_id(),
            title=cleaned_title,
            description=cleaned_description,
            completed=False,
            created_at=utc_timestamp(),
        )
        with self._lock:
            tasks = self.store.load()
            tasks.append(task)
            self.store.save(tasks)

        logger.info("Created task %s", task.id)
        return task

    def update(self, task_id: str, **changes: Any) -> Task:
        """Merge the supplied fields into an existing task.

        Only keys present in ``changes`` are applied; explicit ``False`` or
        ``""`` values overwrite the stored ones.
        """

        validate_task_id(task_id)
        unknown = sorted(set(changes) - set(_UPDATABLE_FIELDS))
        if unknown:
            raise TaskValidationError(f"Unknown task fields: {', '.join(unknown)}")

        cleaned = {name: _UPDATABLE_FIELDS[name](value) for name, value in changes.items()}

        with self._lock:
            tasks = self.store.load()
            task = _find(tasks, task_id)
            for name, value in cleaned.items():
                setattr(task, name, value)
            task.updated_at = utc_timestamp()
            self.store.save(tasks)

        logger.info("Updated task %s fields=%s", task_id, sorted(cleaned))
        return task

    def delete(self, task_id: str) -> None:
        validate_task_id(task_id)
        with self._lock:
            tasks = self.store.load()
            task = _find(tasks, task_id)
            tasks.remove(task)
            self.store.save(tasks)

        logger.info("Deleted task %s", task_id)


def _find(tasks: List[Task], task_id: str) -> Task:
    for task in tasks:
        if task.id == task_id:
            return task
    raise TaskNotFoundError(task_id)


__all__ = ["TaskService"]
