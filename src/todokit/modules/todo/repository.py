"""Todo repository for database access and querying."""

from __future__ import annotations

from typing import Any

from sqlalchemy import delete as sql_delete
from sqlalchemy import func, select
from sqlalchemy import update as sql_update
from sqlalchemy.ext.asyncio import AsyncSession

from .models import Todo


class TodoRepository:
    """Narrow data-access interface over the todos table."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize todo repository with database session."""
        self.s = session

    async def find_all(self) -> list[Todo]:
        """Return all todos, newest first."""
        result = await self.s.scalars(select(Todo).order_by(Todo.created_at.desc(), Todo.id.desc()))
        return list(result.all())

    async def find_by_id(self, id: int) -> Todo | None:
        """Return the todo with the given id, or None."""
        return await self.s.get(Todo, id)

    async def exists_by_id(self, id: int) -> bool:
        """Return True if a todo with the given id exists."""
        result = await self.s.scalar(select(func.count()).select_from(Todo).where(Todo.id == id))
        return bool(result)

    async def count(self) -> int:
        """Return the number of stored todos."""
        result = await self.s.scalar(select(func.count()).select_from(Todo))
        return int(result or 0)

    async def create(self, *, task: str, completed: bool = False) -> Todo:
        """Insert a todo and load its database-assigned columns."""
        todo = Todo(task=task, completed=completed)
        self.s.add(todo)
        await self.s.flush()
        await self.s.refresh(todo)
        return todo

    async def update_by_id(self, id: int, values: dict[str, Any]) -> int:
        """Apply column values to one row and return the number of rows matched."""
        if not values:
            return 1 if await self.exists_by_id(id) else 0
        result = await self.s.execute(sql_update(Todo).where(Todo.id == id).values(**values))
        return int(result.rowcount or 0)  # type: ignore[attr-defined]

    async def delete_by_id(self, id: int) -> int:
        """Delete one row and return the number of rows removed."""
        result = await self.s.execute(sql_delete(Todo).where(Todo.id == id))
        return int(result.rowcount or 0)  # type: ignore[attr-defined]

    async def commit(self) -> None:
        """Commit the current transaction."""
        await self.s.commit()
