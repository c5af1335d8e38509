"""Todokit - task-tracking REST service and an MCP adapter for AI assistants."""

# Core framework
from todokit.core import Base, Database

# Todo feature
from todokit.modules.todo import (
    Todo,
    TodoIn,
    TodoManager,
    TodoOut,
    TodoPatch,
    TodoRepository,
)

__all__ = [
    # Core framework
    "Database",
    "Base",
    # Todo feature
    "Todo",
    "TodoIn",
    "TodoOut",
    "TodoPatch",
    "TodoRepository",
    "TodoManager",
]
