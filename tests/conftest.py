"""Shared fixtures: in-memory store app, HTTP clients and the MCP server wired to it."""

from __future__ import annotations

from collections.abc import AsyncGenerator, Iterator

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from todokit.adapter import TodoClient, create_server
from todokit.api import ServiceBuilder, ServiceInfo
from todokit.core import Database


def build_app() -> FastAPI:
    """Todo store backed by a fresh in-memory database."""
    return (
        ServiceBuilder(info=ServiceInfo(display_name="Test Store"))
        .with_database("sqlite+aiosqlite:///:memory:")
        .with_todos()
        .build()
    )


@pytest.fixture
async def database() -> AsyncGenerator[Database, None]:
    """Create and initialize in-memory database for testing."""
    db = Database("sqlite+aiosqlite:///:memory:")
    await db.init()
    try:
        yield db
    finally:
        await db.dispose()


@pytest.fixture
def sync_client() -> Iterator[TestClient]:
    """Synchronous client with the app lifespan running."""
    with TestClient(build_app()) as client:
        yield client


@pytest.fixture
async def app() -> AsyncGenerator[FastAPI, None]:
    """Store app with lifespan triggered on the test's event loop."""
    store_app = build_app()
    async with store_app.router.lifespan_context(store_app):
        yield store_app


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[httpx.AsyncClient, None]:
    """Create async test client."""
    async with httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
def todo_client(app: FastAPI) -> TodoClient:
    """Adapter client talking to the in-process store."""
    return TodoClient("http://test", transport=httpx.ASGITransport(app=app))


@pytest.fixture
def mcp_server(todo_client: TodoClient):  # type: ignore[no-untyped-def]
    """MCP server whose tools hit the in-process store."""
    return create_server(todo_client)
