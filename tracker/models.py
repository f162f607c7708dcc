"""Task record and timestamp helpers."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional


def utc_timestamp(moment: Optional[datetime] = None) -> str:
    """Format ``moment`` (default: now) as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""

    moment = moment or datetime.now(timezone.utc)
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp, accepting a trailing ``Z`` for UTC."""

    text = value.strip()
    if text.endswith(("Z", "z")):
        text = f"{text[:-1]}+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


@dataclass
class Task:
    """A single tracked task as persisted in the JSON file."""

    id: str
    title: str
    created_at: str
    description: str = ""
    completed: bool = False
    updated_at: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "completed": self.completed,
            "createdAt": self.created_at,
        }
        if self.updated_at is not None:
            payload["updatedAt"] = self.updated_at
        return payload

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "Task":
        """Build a task from its JSON form, raising ``ValueError`` on bad shape."""

        if not isinstance(raw, Mapping):
            raise ValueError("task entries must be JSON objects")

        missing = [key for key in ("id", "title", "createdAt") if key not in raw]
        if missing:
            raise ValueError(f"task entry is missing fields: {', '.join(missing)}")

        task_id = raw["id"]
        title = raw["title"]
        created_at = raw["createdAt"]
        description = raw.get("description", "")
        completed = raw.get("completed", False)
        updated_at = raw.get("updatedAt")

        if not isinstance(task_id, str) or not task_id:
            raise ValueError("task id must be a non-empty string")
        if not isinstance(title, str):
            raise ValueError(f"task {task_id} has a non-string title")
        if not isinstance(created_at, str):
            raise ValueError(f"task {task_id} has a non-string createdAt")
        parse_timestamp(created_at)
        if not isinstance(description, str):
            raise ValueError(f"task {task_id} has a non-string description")
        if not isinstance(completed, bool):
            raise ValueError(f"task {task_id} has a non-boolean completed flag")
        if updated_at is not None and not isinstance(updated_at, str):
            raise ValueError(f"task {task_id} has a non-string updatedAt")

        return cls(
            id=task_id,
            title=title,
            description=description,
            completed=completed,
            created_at=created_at,
            updated_at=updated_at,
        )

    @property
    def created(self) -> datetime:
        return parse_timestamp(self.created_at)


__all__ = ["Task", "parse_timestamp", "utc_timestamp"]
