"""Todo manager: business operations over the repository."""

from __future__ import annotations

from dataclasses import dataclass

from todokit.core.logging import get_logger

from .models import Todo
from .repository import TodoRepository
from .schemas import TodoOut, TodoPatch

logger = get_logger(__name__)


class MissingTaskError(ValueError):
    """Raised when a todo is created without task text."""

    def __init__(self) -> None:
        super().__init__("Missing 'task' field in request body.")


@dataclass(frozen=True, slots=True)
class UpdateResult:
    """Outcome of an update: rows matched and the row as it now reads."""

    changes: int
    todo: TodoOut | None


class TodoManager:
    """Manager for Todo entities; owns commits and schema conversion."""

    def __init__(self, repo: TodoRepository) -> None:
        """Initialize todo manager with repository."""
        self.repo = repo

    @staticmethod
    def _to_output_schema(todo: Todo) -> TodoOut:
        return TodoOut.model_validate(todo)

    async def find_all(self) -> list[TodoOut]:
        """Return all todos, newest first."""
        logger.debug("todo.list")
        todos = await self.repo.find_all()
        return [self._to_output_schema(todo) for todo in todos]

    async def find_by_id(self, id: int) -> TodoOut | None:
        """Return one todo, or None when it does not exist."""
        logger.debug("todo.get", todo_id=id)
        todo = await self.repo.find_by_id(id)
        return self._to_output_schema(todo) if todo is not None else None

    async def create(self, task: str | None, *, completed: bool = False) -> TodoOut:
        """Create a todo; empty or missing task text is rejected."""
        if not task:
            raise MissingTaskError()
        todo = await self.repo.create(task=task, completed=completed)
        await self.repo.commit()
        logger.info("todo.created", todo_id=todo.id, completed=completed)
        return self._to_output_schema(todo)

    async def update(self, id: int, patch: TodoPatch) -> UpdateResult:
        """Apply a partial update; changes is 0 when no row has the id."""
        values = patch.values()
        changes = await self.repo.update_by_id(id, values)
        await self.repo.commit()
        logger.info("todo.updated", todo_id=id, fields=sorted(values), changes=changes)
        if changes == 0:
            return UpdateResult(changes=0, todo=None)
        return UpdateResult(changes=changes, todo=await self.find_by_id(id))

    async def delete(self, id: int) -> int:
        """Hard-delete a todo and return the number of rows removed."""
        changes = await self.repo.delete_by_id(id)
        await self.repo.commit()
        logger.info("todo.deleted", todo_id=id, changes=changes)
        return changes
