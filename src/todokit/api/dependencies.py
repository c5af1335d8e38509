"""Feature-specific FastAPI dependency injection for managers."""

from collections.abc import Callable, Coroutine
from typing import Annotated, Any, TypeAlias

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from todokit.core.api.dependencies import get_session
from todokit.modules.todo import TodoManager, TodoRepository

# Type alias for dependency factory functions
DependencyFactory: TypeAlias = Callable[..., Coroutine[Any, Any, Any]]


async def get_todo_manager(session: Annotated[AsyncSession, Depends(get_session)]) -> TodoManager:
    """Get a todo manager instance for dependency injection."""
    return TodoManager(TodoRepository(session))
