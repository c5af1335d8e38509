"""Todo CRUD router exposing the /todos HTTP contract."""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Annotated, Any

from fastapi import Body, Depends, status
from fastapi.responses import JSONResponse

from todokit.core.api.router import Router

from .manager import MissingTaskError, TodoManager
from .schemas import (
    DeleteEnvelope,
    ErrorResponse,
    MessageResponse,
    TodoEnvelope,
    TodoIn,
    TodoListEnvelope,
    TodoPatch,
    TodoUpdateEnvelope,
)

NOT_FOUND_BY_ID = "No to-do found with that ID."

# SQLite INTEGER is a signed 64-bit value
MIN_TODO_ID = -(2**63)
MAX_TODO_ID = 2**63 - 1

_ID_PATTERN = re.compile(r"-?[0-9]+")


def _not_found(message: str) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"message": message})


def _bad_request(message: str) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


class TodoRouter(Router):
    """CRUD router for Todo entities."""

    def __init__(
        self,
        prefix: str,
        tags: Sequence[str],
        manager_factory: Any,
        **kwargs: Any,
    ) -> None:
        """Initialize todo router with manager factory."""
        self.manager_factory = manager_factory
        super().__init__(prefix=prefix, tags=tags, **kwargs)

    @staticmethod
    def _parse_id(raw: str) -> int | None:
        """Parse a path id; None unless it is a plain integer SQLite can store."""
        if not _ID_PATTERN.fullmatch(raw):
            return None
        value = int(raw)
        if not MIN_TODO_ID <= value <= MAX_TODO_ID:
            return None
        return value

    def _register_routes(self) -> None:
        """Register todo CRUD routes."""
        manager_factory = self.manager_factory
        parse_id = self._parse_id

        error_responses: dict[int | str, dict[str, Any]] = {
            status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
            status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
        }
        not_found_responses: dict[int | str, dict[str, Any]] = {
            **error_responses,
            status.HTTP_404_NOT_FOUND: {"model": MessageResponse},
        }

        @self.router.get(
            "",
            response_model=TodoListEnvelope,
            summary="List todos",
            responses=error_responses,
        )
        async def list_todos(manager: TodoManager = Depends(manager_factory)) -> TodoListEnvelope:
            return TodoListEnvelope(data=await manager.find_all())

        @self.router.get(
            "/{todo_id}",
            response_model=TodoEnvelope,
            summary="Get todo by id",
            responses=not_found_responses,
        )
        async def get_todo(todo_id: str, manager: TodoManager = Depends(manager_factory)) -> Any:
            id = parse_id(todo_id)
            if id is None:
                return _bad_request(f"Invalid to-do id '{todo_id}'")
            todo = await manager.find_by_id(id)
            if todo is None:
                return _not_found(NOT_FOUND_BY_ID)
            return TodoEnvelope(data=todo)

        @self.router.post(
            "",
            response_model=TodoEnvelope,
            status_code=status.HTTP_201_CREATED,
            summary="Create todo",
            responses=error_responses,
        )
        async def create_todo(
            payload: Annotated[TodoIn | None, Body()] = None,
            manager: TodoManager = Depends(manager_factory),
        ) -> Any:
            data = payload or TodoIn()
            try:
                todo = await manager.create(data.task, completed=data.completed)
            except MissingTaskError as e:
                return _bad_request(str(e))
            return TodoEnvelope(data=todo)

        @self.router.put(
            "/{todo_id}",
            response_model=TodoUpdateEnvelope,
            summary="Update todo",
            description="Partial update: fields that are missing or null keep their current value",
            responses=not_found_responses,
        )
        async def update_todo(
            todo_id: str,
            payload: Annotated[TodoPatch | None, Body()] = None,
            manager: TodoManager = Depends(manager_factory),
        ) -> Any:
            id = parse_id(todo_id)
            if id is None:
                return _bad_request(f"Invalid to-do id '{todo_id}'")
            result = await manager.update(id, payload or TodoPatch())
            if result.changes == 0 or result.todo is None:
                return _not_found(f"No to-do found with ID {todo_id}")
            return TodoUpdateEnvelope(data=result.todo, changes=result.changes)

        @self.router.delete(
            "/{todo_id}",
            response_model=DeleteEnvelope,
            summary="Delete todo",
            responses=not_found_responses,
        )
        async def delete_todo(todo_id: str, manager: TodoManager = Depends(manager_factory)) -> Any:
            id = parse_id(todo_id)
            if id is None:
                return _bad_request(f"Invalid to-do id '{todo_id}'")
            changes = await manager.delete(id)
            if changes == 0:
                return _not_found(f"No to-do found with ID {todo_id}")
            return DeleteEnvelope(changes=changes)
