"""Todo feature - single-table task tracking."""

from .manager import MissingTaskError, TodoManager, UpdateResult
from .models import Todo
from .repository import TodoRepository
from .router import TodoRouter
from .schemas import (
    DeleteEnvelope,
    ErrorResponse,
    MessageResponse,
    TodoEnvelope,
    TodoIn,
    TodoListEnvelope,
    TodoOut,
    TodoPatch,
    TodoUpdateEnvelope,
)

__all__ = [
    "Todo",
    "TodoIn",
    "TodoOut",
    "TodoPatch",
    "TodoEnvelope",
    "TodoListEnvelope",
    "TodoUpdateEnvelope",
    "DeleteEnvelope",
    "MessageResponse",
    "ErrorResponse",
    "TodoRepository",
    "TodoManager",
    "TodoRouter",
    "MissingTaskError",
    "UpdateResult",
]
