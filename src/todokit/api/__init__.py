"""FastAPI routers and related presentation logic."""

from todokit.core.api import BaseServiceBuilder, Router, ServiceInfo, run_app
from todokit.core.api.middleware import add_error_handlers, add_logging_middleware
from todokit.core.logging import configure_logging, get_logger
from todokit.modules.todo import TodoRouter

from .dependencies import get_todo_manager
from .service_builder import DEFAULT_INFO, ServiceBuilder, create_store_app

__all__ = [
    # Base classes
    "Router",
    "BaseServiceBuilder",
    # Routers
    "TodoRouter",
    # Dependencies
    "get_todo_manager",
    # Middleware
    "add_error_handlers",
    "add_logging_middleware",
    # Logging
    "configure_logging",
    "get_logger",
    # Builders
    "ServiceBuilder",
    "ServiceInfo",
    "DEFAULT_INFO",
    "create_store_app",
    # Utilities
    "run_app",
]
