"""Todo schemas: create input, patch value type, output and response envelopes."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class TodoIn(BaseModel):
    """Input schema for creating a todo."""

    task: str | None = Field(default=None, description="Task text; required and non-empty")
    completed: bool = Field(default=False, description="Completion flag")


class TodoPatch(BaseModel):
    """Partial update where every field is either absent or an explicit value.

    A field that is missing or null means "leave unchanged". values() yields only
    the explicit fields, so callers never have to tell null and missing apart.
    """

    task: str | None = Field(default=None, description="Replacement task text")
    completed: bool | None = Field(default=None, description="Replacement completion flag")

    def values(self) -> dict[str, Any]:
        """Return the explicitly supplied fields."""
        return self.model_dump(exclude_none=True)


class TodoOut(BaseModel):
    """Output schema for a stored todo."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    task: str
    completed: bool
    created_at: datetime


class TodoEnvelope(BaseModel):
    """Single-todo response body."""

    message: str = "success"
    data: TodoOut


class TodoListEnvelope(BaseModel):
    """Todo collection response body."""

    message: str = "success"
    data: list[TodoOut]


class TodoUpdateEnvelope(BaseModel):
    """Update response body with the refreshed row and the number of rows changed."""

    message: str = "success"
    data: TodoOut
    changes: int


class DeleteEnvelope(BaseModel):
    """Delete response body."""

    message: str = "deleted"
    changes: int


class MessageResponse(BaseModel):
    """Not-found response body."""

    message: str


class ErrorResponse(BaseModel):
    """Validation or store failure response body."""

    error: str
