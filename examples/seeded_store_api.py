"""FastAPI todo store that seeds a few starter todos on first start."""

from __future__ import annotations

from fastapi import FastAPI

from todokit import TodoManager, TodoRepository
from todokit.api import ServiceBuilder, ServiceInfo
from todokit.core import Database

STARTER_TODOS = [
    ("Read the README", True),
    ("Connect the MCP adapter", False),
    ("Ask the assistant to list my todos", False),
]


async def seed_todos(app: FastAPI) -> None:
    """Insert starter todos when the store is empty."""
    database: Database | None = getattr(app.state, "database", None)
    if database is None:
        return

    async with database.session() as session:
        repo = TodoRepository(session)
        if await repo.count() > 0:
            return  # Skip seeding if todos already exist

        manager = TodoManager(repo)
        for task, completed in STARTER_TODOS:
            await manager.create(task, completed=completed)


info = ServiceInfo(
    display_name="Seeded Todo Store",
    summary="Todo store pre-filled with starter tasks",
    version="1.0.0",
)

app = (
    ServiceBuilder(info=info)
    .with_logging()
    .with_todos()
    .on_startup(seed_todos)
    .build()
)

if __name__ == "__main__":
    from todokit.api import run_app

    run_app(app, port=3000)
