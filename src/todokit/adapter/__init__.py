"""MCP adapter translating assistant tool/resource calls into todo store requests."""

from .client import TodoClient, TodoRecord, classify_response
from .errors import (
    StoreBadRequestError,
    StoreBadResponseError,
    StoreError,
    StoreProtocolError,
    StoreStatusError,
    StoreUnavailableError,
)
from .links import ALL_URI, ITEM_URI_TEMPLATE, MIME_TYPE, item_uri, parse_todo_id, resource_link
from .server import SERVER_NAME, SERVER_VERSION, create_server

__all__ = [
    # Server
    "create_server",
    "SERVER_NAME",
    "SERVER_VERSION",
    # Client
    "TodoClient",
    "TodoRecord",
    "classify_response",
    # Errors
    "StoreError",
    "StoreUnavailableError",
    "StoreStatusError",
    "StoreBadResponseError",
    "StoreBadRequestError",
    "StoreProtocolError",
    # Addressing
    "ALL_URI",
    "ITEM_URI_TEMPLATE",
    "MIME_TYPE",
    "item_uri",
    "parse_todo_id",
    "resource_link",
]
