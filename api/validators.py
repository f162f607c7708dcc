"""Request validation helpers for the task routes."""
from __future__ import annotations

from typing import Any, Dict, Iterable, List

from fastapi import HTTPException, Path, status

from tracker.errors import MalformedIdentifierError
from tracker.validation import validate_task_id


def _raise_bad_request(message: str) -> None:
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=message)


def task_id_param(task_id: str = Path(..., description="Task UUID")) -> str:
    """Path dependency rejecting identifiers that were never generated by the service."""

    try:
        return validate_task_id(task_id)
    except MalformedIdentifierError as exc:
        _raise_bad_request(str(exc))


def summarize_request_errors(errors: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Reduce FastAPI/pydantic error entries to ``{"field", "message"}`` pairs."""

    summary: List[Dict[str, Any]] = []
    for error in errors:
        location = [str(part) for part in error.get("loc", ()) if part != "body"]
        summary.append(
            {
                "field": ".".join(location) or "body",
                "message": error.get("msg", "Invalid value"),
            }
        )
    return summary


__all__ = ["summarize_request_errors", "task_id_param"]
