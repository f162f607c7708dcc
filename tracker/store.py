"""JSON file persistence for the task collection."""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Iterable, List

from .errors import StorageError
from .models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """Read and write the whole task collection as one JSON array.

    Every :meth:`save` overwrites the file completely; there is no partial
    write or transactional guarantee.
    """

    def __init__(self, path: os.PathLike | str):
        self.path = Path(path)

    def load(self) -> List[Task]:
        """Return every stored task, creating an empty file when none exists."""

        if not self.path.exists():
            logger.info("Task file %s not found, initializing empty collection", self.path)
            self.save([])
            return []

        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except OSError as exc:
            logger.error("Unable to read task file %s: %s", self.path, exc)
            raise StorageError(f"Error reading tasks: {exc}") from exc
        except json.JSONDecodeError as exc:
            logger.error("Task file %s is not valid JSON: %s", self.path, exc)
            raise StorageError(f"Task file is not valid JSON: {exc}") from exc

        if not isinstance(raw, list):
            raise StorageError("Task file must contain a JSON array")

        try:
            return [Task.from_dict(entry) for entry in raw]
        except ValueError as exc:
            raise StorageError(f"Task file holds a malformed entry: {exc}") from exc

    def save(self, tasks: Iterable[Task]) -> None:
        """Overwrite the file with ``tasks`` as a pretty-printed JSON array."""

        payload = [task.to_dict() for task in tasks]
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        except OSError as exc:
            logger.error("Unable to write task file %s: %s", self.path, exc)
            raise StorageError("Error writing to database") from exc


__all__ = ["TaskStore"]
