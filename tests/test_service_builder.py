"""Tests for ServiceBuilder configuration and lifecycle."""

from __future__ import annotations

import httpx
import pytest
from fastapi import APIRouter, FastAPI

from todokit import Database
from todokit.api import DEFAULT_INFO, ServiceBuilder, ServiceInfo, create_store_app
from todokit.config import StoreSettings
from todokit.core.api.dependencies import get_database


def test_invalid_todo_prefix_raises_error() -> None:
    """A prefix without a leading slash is rejected at build time."""
    builder = ServiceBuilder(info=ServiceInfo(display_name="Test"))

    with pytest.raises(ValueError, match="must start with '/'"):
        builder.with_todos(prefix="todos").build()


def test_service_info_rejects_unknown_fields() -> None:
    """ServiceInfo forbids extra fields."""
    with pytest.raises(ValueError):
        ServiceInfo(display_name="Test", unknown="x")  # type: ignore[call-arg]


def test_build_without_todos_has_no_todo_routes() -> None:
    """Todo routes are only mounted when requested."""
    app = ServiceBuilder(info=ServiceInfo(display_name="Bare")).build()
    paths = {getattr(route, "path", None) for route in app.routes}
    assert "/todos" not in paths


def test_docs_are_opt_in() -> None:
    """OpenAPI endpoints exist only with with_docs()."""
    plain = ServiceBuilder(info=ServiceInfo(display_name="Test")).with_todos().build()
    documented = ServiceBuilder(info=ServiceInfo(display_name="Test")).with_todos().with_docs().build()

    assert plain.openapi_url is None
    assert documented.openapi_url == "/openapi.json"
    assert "/todos" in documented.openapi()["paths"]


async def test_lifespan_manages_database_and_hooks() -> None:
    """Startup initialises the database and hooks; shutdown clears it."""
    calls: list[str] = []

    async def on_start(app: FastAPI) -> None:
        calls.append("start")
        assert app.state.database is get_database()

    async def on_stop(app: FastAPI) -> None:
        calls.append("stop")

    app = ServiceBuilder(info=ServiceInfo(display_name="Test")).on_startup(on_start).on_shutdown(on_stop).build()

    async with app.router.lifespan_context(app):
        assert isinstance(app.state.database, Database)

    assert calls == ["start", "stop"]
    assert app.state.database is None
    with pytest.raises(RuntimeError, match="Database not initialized"):
        get_database()


async def test_injected_database_is_not_disposed(database: Database) -> None:
    """A database passed with with_database_instance outlives the app."""
    app = ServiceBuilder(info=ServiceInfo(display_name="Test")).with_database_instance(database).with_todos().build()

    async with app.router.lifespan_context(app):
        async with httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test") as client:
            response = await client.post("/todos", json={"task": "shared"})
            assert response.status_code == 201

    async with database.session() as session:
        from todokit import TodoManager, TodoRepository

        todos = await TodoManager(TodoRepository(session)).find_all()
        assert [todo.task for todo in todos] == ["shared"]


async def test_custom_router_is_included() -> None:
    """include_router mounts extra routers next to the todo routes."""
    extra = APIRouter(prefix="/extra")

    @extra.get("")
    async def extra_endpoint() -> dict[str, str]:
        return {"ok": "yes"}

    app = ServiceBuilder(info=ServiceInfo(display_name="Test")).with_todos().include_router(extra).build()

    async with app.router.lifespan_context(app):
        async with httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test") as client:
            assert (await client.get("/extra")).json() == {"ok": "yes"}
            assert (await client.get("/todos")).status_code == 200


async def test_create_store_app_from_settings(tmp_path) -> None:  # type: ignore[no-untyped-def]
    """create_store_app wires the database file from settings."""
    settings = StoreSettings(database_path=tmp_path / "store.db")
    app = create_store_app(settings)

    assert app.title == DEFAULT_INFO.display_name

    async with app.router.lifespan_context(app):
        assert app.state.database.url == settings.database_url
        async with httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test") as client:
            response = await client.post("/todos", json={"task": "on disk"})
            assert response.status_code == 201
            assert "X-Request-ID" in response.headers

    assert (tmp_path / "store.db").exists()
