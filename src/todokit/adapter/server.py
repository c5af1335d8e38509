"""MCP server exposing the todo store as tools and resources over stdio.

Tools act and answer with short summaries plus resource links; resources are
passive views that return the store's JSON untouched.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Annotated, Any

from fastmcp import FastMCP
from fastmcp.exceptions import ResourceError, ToolError
from mcp.types import ResourceLink, TextContent, ToolAnnotations
from pydantic import Field

from todokit.config import AdapterSettings
from todokit.core.logging import get_logger
from todokit.modules.todo.schemas import TodoPatch

from .client import TodoClient
from .errors import StoreError
from .links import ALL_URI, ASSISTANT_ANNOTATIONS, ITEM_URI_TEMPLATE, MIME_TYPE, parse_todo_id, resource_link

logger = get_logger(__name__)

SERVER_NAME = "todo-server"
SERVER_VERSION = "0.0.1"

TodoId = Annotated[int, Field(description="Id of the todo item")]


@contextmanager
def _tool_errors(tool: str) -> Iterator[None]:
    """Surface store failures as tool errors carrying the classified message."""
    try:
        yield
    except StoreError as e:
        logger.warning("tool.failed", tool=tool, error=str(e))
        raise ToolError(str(e)) from e


@contextmanager
def _resource_errors(uri: str) -> Iterator[None]:
    """Surface store failures and bad ids as resource read errors."""
    try:
        yield
    except (StoreError, ValueError) as e:
        logger.warning("resource.failed", uri=uri, error=str(e))
        raise ResourceError(str(e)) from e


def create_server(client: TodoClient | None = None, *, settings: AdapterSettings | None = None) -> FastMCP:
    """Build the MCP server; every tool and resource makes one store round trip."""
    if client is None:
        settings = settings or AdapterSettings()
        client = TodoClient(settings.store_url, timeout=settings.timeout)

    mcp = FastMCP(name=SERVER_NAME, version=SERVER_VERSION)

    # --------------------------------------------------------------------- Tools

    @mcp.tool(
        name="list",
        title="List all the ids of todo items",
        description="Call whenever the user wishes to get a list of all their todo items",
        annotations=ToolAnnotations(readOnlyHint=True),
    )
    async def list_todos() -> list[TextContent | ResourceLink]:
        with _tool_errors("list"):
            todos = await client.list_todos()
        return [
            TextContent(type="text", text=f"Found {len(todos)} items"),
            *(resource_link(todo.id, todo.task) for todo in todos),
        ]

    @mcp.tool(
        name="get",
        title="Get todo by id",
        description="Get a single todo item by its id",
        annotations=ToolAnnotations(readOnlyHint=True),
    )
    async def get_todo(id: TodoId) -> list[TextContent | ResourceLink]:
        with _tool_errors("get"):
            todo = await client.get_todo(id)
        return [
            TextContent(type="text", text="found todo item"),
            resource_link(todo.id, todo.task),
        ]

    @mcp.tool(
        name="add",
        title="Add todo item",
        description="Call when the user wants to add a new todo item",
    )
    async def add_todo(
        task: Annotated[str, Field(min_length=1, description="Text of the new todo item")],
    ) -> list[ResourceLink]:
        with _tool_errors("add"):
            todo = await client.add_todo(task)
        logger.info("tool.add", todo_id=todo.id)
        return [resource_link(todo.id, task)]

    @mcp.tool(
        name="update",
        title="Update todo by id",
        description="Update a single todo item by its id",
        annotations=ToolAnnotations(idempotentHint=True),
    )
    async def update_todo(
        id: TodoId,
        task: Annotated[str | None, Field(description="New text; leave empty to keep the current text")] = None,
        completed: Annotated[bool | None, Field(description="New completion flag")] = None,
    ) -> dict[str, Any]:
        # An empty string means "no change", same as leaving it out
        patch = TodoPatch(task=task or None, completed=completed)
        with _tool_errors("update"):
            return await client.update_todo(id, patch)

    @mcp.tool(
        name="delete",
        title="Delete todo item by id",
        description="Call whenever the user wishes to delete an existing todo item by its id",
        annotations=ToolAnnotations(destructiveHint=True),
    )
    async def delete_todo(id: TodoId) -> list[TextContent]:
        with _tool_errors("delete"):
            await client.delete_todo(id)
        return [TextContent(type="text", text="deleted successfully", annotations=ASSISTANT_ANNOTATIONS)]

    # --------------------------------------------------------------------- Resources

    @mcp.resource(
        ALL_URI,
        name="all",
        title="All TODO items",
        description="Call whenever the user wants all todo items",
        mime_type=MIME_TYPE,
    )
    async def read_all() -> str:
        with _resource_errors(ALL_URI):
            return await client.fetch_all_raw()

    @mcp.resource(
        ITEM_URI_TEMPLATE,
        name="item",
        title="Single TODO item",
        description="Get a single todo item based on id",
        mime_type=MIME_TYPE,
    )
    async def read_item(id: str) -> str:
        with _resource_errors(ITEM_URI_TEMPLATE):
            return await client.fetch_one_raw(parse_todo_id(id))

    return mcp
