"""Tests for seeded_store_api.py example."""

from collections.abc import AsyncGenerator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient


@pytest.fixture
async def app() -> AsyncGenerator[FastAPI, None]:
    """Load seeded_store_api.py app and trigger lifespan."""
    import sys
    from pathlib import Path

    examples_dir = Path(__file__).parent.parent / "examples"
    sys.path.insert(0, str(examples_dir))

    from seeded_store_api import app as example_app  # type: ignore[import-not-found]

    async with example_app.router.lifespan_context(example_app):
        yield example_app

    sys.path.remove(str(examples_dir))


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


async def test_starter_todos_are_seeded(client: AsyncClient) -> None:
    """The store starts with the three starter todos."""
    response = await client.get("/todos")
    assert response.status_code == 200
    tasks = {item["task"]: item["completed"] for item in response.json()["data"]}
    assert tasks == {
        "Read the README": True,
        "Connect the MCP adapter": False,
        "Ask the assistant to list my todos": False,
    }


async def test_seeded_store_accepts_new_todos(client: AsyncClient) -> None:
    """The seeded store is a regular todo store."""
    response = await client.post("/todos", json={"task": "extra"})
    assert response.status_code == 201
    assert response.json()["data"]["id"] == 4
