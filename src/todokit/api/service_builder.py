"""Service builder with the todo module wired in."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Self

from fastapi import FastAPI

from todokit.config import StoreSettings
from todokit.core.api.service_builder import BaseServiceBuilder, ServiceInfo
from todokit.modules.todo import TodoRouter

from .dependencies import DependencyFactory, get_todo_manager


@dataclass(slots=True)
class _TodoOptions:
    """Internal todo options for ServiceBuilder."""

    prefix: str = "/todos"
    tags: List[str] = field(default_factory=lambda: ["Todos"])
    manager_factory: DependencyFactory = get_todo_manager


class ServiceBuilder(BaseServiceBuilder):
    """Service builder with integrated todo module support."""

    def __init__(self, **kwargs: Any) -> None:
        """Initialize service builder with module-specific state."""
        super().__init__(**kwargs)
        self._todo_options: _TodoOptions | None = None

    def with_todos(
        self,
        *,
        prefix: str = "/todos",
        tags: List[str] | None = None,
        manager_factory: DependencyFactory | None = None,
    ) -> Self:
        """Add the todo CRUD endpoints."""
        self._todo_options = _TodoOptions(
            prefix=prefix,
            tags=list(tags) if tags is not None else ["Todos"],
            manager_factory=manager_factory or get_todo_manager,
        )
        return self

    def _validate_module_configuration(self) -> None:
        if self._todo_options is not None and not self._todo_options.prefix.startswith("/"):
            raise ValueError(f"Todo prefix must start with '/', got '{self._todo_options.prefix}'")

    def _register_module_routers(self, app: FastAPI) -> None:
        if self._todo_options is None:
            return
        options = self._todo_options
        router = TodoRouter.create(
            prefix=options.prefix,
            tags=options.tags,
            manager_factory=options.manager_factory,
        )
        app.include_router(router)


DEFAULT_INFO = ServiceInfo(
    display_name="Todo Store",
    version="0.1.0",
    summary="Minimal task-tracking REST API backed by SQLite",
)


def create_store_app(settings: StoreSettings | None = None, *, info: ServiceInfo | None = None) -> FastAPI:
    """Build the todo store service from settings."""
    settings = settings or StoreSettings()
    return (
        ServiceBuilder(info=info or DEFAULT_INFO)
        .with_database(settings.database_url, echo=settings.echo_sql)
        .with_logging()
        .with_docs(settings.enable_docs)
        .with_todos()
        .build()
    )
