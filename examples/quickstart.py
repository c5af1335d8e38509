"""Basic example: store and update todos with TodoManager, no HTTP involved."""

from __future__ import annotations

import asyncio

from todokit import TodoManager, TodoPatch, TodoRepository
from todokit.core import Database


async def main() -> None:
    """Demonstrate creating, completing and listing todos."""
    db = Database("sqlite+aiosqlite:///:memory:")
    await db.init()

    try:
        async with db.session() as session:
            manager = TodoManager(TodoRepository(session))

            milk = await manager.create("buy milk")
            await manager.create("walk dog")
            result = await manager.update(milk.id, TodoPatch(completed=True))
            if result.todo is None or not result.todo.completed:
                raise RuntimeError("Expected the todo to be completed")

            for todo in await manager.find_all():
                mark = "x" if todo.completed else " "
                print(f"[{mark}] {todo.id}: {todo.task}")

    finally:
        await db.dispose()


if __name__ == "__main__":
    asyncio.run(main())
