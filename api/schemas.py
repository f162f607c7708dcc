"""Pydantic models for task request and response bodies."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr


class TaskCreate(BaseModel):
    """Request body for ``POST /api/tasks``."""

    model_config = ConfigDict(extra="ignore")

    title: StrictStr = Field(..., description="Task title, 1-100 characters once trimmed")
    description: Optional[StrictStr] = Field(None, description="Optional description, up to 200 characters")


class TaskUpdate(BaseModel):
    """Request body for ``PUT /api/tasks/{task_id}``; every field is optional."""

    model_config = ConfigDict(extra="ignore")

    title: Optional[StrictStr] = Field(None, description="New title")
    description: Optional[StrictStr] = Field(None, description="New description, may be empty")
    completed: Optional[StrictBool] = Field(None, description="New completion state")

    def supplied_changes(self) -> Dict[str, Any]:
        """Fields the client actually sent; an explicit ``null`` counts as absent."""

        return {name: value for name, value in self.model_dump(exclude_unset=True).items() if value is not None}


class TaskOut(BaseModel):
    """A task as returned by the API."""

    id: str = Field(..., description="Server-generated UUID")
    title: str
    description: str = ""
    completed: bool = False
    createdAt: str = Field(..., description="Creation time, ISO-8601 UTC")
    updatedAt: Optional[str] = Field(None, description="Time of the last update, ISO-8601 UTC")


class ErrorResponse(BaseModel):
    detail: str
    errors: Optional[List[Dict[str, Any]]] = None


__all__ = ["ErrorResponse", "TaskCreate", "TaskOut", "TaskUpdate"]
