"""Command-line entry points for the store service and the MCP adapter."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

from todokit.config import AdapterSettings, StoreSettings
from todokit.core.logging import configure_logging, get_logger

logger = get_logger(__name__)


def build_store_parser() -> argparse.ArgumentParser:
    """Argument parser for todokit-store."""
    parser = argparse.ArgumentParser(prog="todokit-store", description="Run the todo store REST service")
    parser.add_argument("--host", help="Interface to bind (default from TODOKIT_STORE_HOST or 127.0.0.1)")
    parser.add_argument("--port", type=int, help="Port to listen on (default from TODOKIT_STORE_PORT or 3000)")
    parser.add_argument("--database", type=Path, help="SQLite database file (default todos.db)")
    parser.add_argument("--docs", action="store_true", help="Serve OpenAPI docs at /docs")
    parser.add_argument("--log-level", help="Log level (default from LOG_LEVEL or INFO)")
    return parser


def build_mcp_parser() -> argparse.ArgumentParser:
    """Argument parser for todokit-mcp."""
    parser = argparse.ArgumentParser(prog="todokit-mcp", description="Run the todo MCP adapter on stdio")
    parser.add_argument("--store-url", help="Base URL of the todo store (default http://localhost:3000)")
    parser.add_argument("--timeout", type=float, help="HTTP timeout in seconds (default 5)")
    parser.add_argument("--log-level", help="Log level (default from LOG_LEVEL or INFO)")
    return parser


def store_settings_from_args(args: argparse.Namespace) -> StoreSettings:
    """Merge command-line overrides on top of environment settings."""
    overrides = {
        "host": args.host,
        "port": args.port,
        "database_path": args.database,
        "enable_docs": True if args.docs else None,
    }
    return StoreSettings(**{key: value for key, value in overrides.items() if value is not None})


def adapter_settings_from_args(args: argparse.Namespace) -> AdapterSettings:
    """Merge command-line overrides on top of environment settings."""
    overrides = {"store_url": args.store_url, "timeout": args.timeout}
    return AdapterSettings(**{key: value for key, value in overrides.items() if value is not None})


def store_main(argv: Sequence[str] | None = None) -> None:
    """Run the store service until interrupted."""
    from todokit.api import create_store_app, run_app

    args = build_store_parser().parse_args(argv)
    configure_logging(level=args.log_level)
    settings = store_settings_from_args(args)

    app = create_store_app(settings)
    logger.info("store.listening", url=f"http://{settings.host}:{settings.port}", database=str(settings.database_path))
    run_app(app, host=settings.host, port=settings.port)


def mcp_main(argv: Sequence[str] | None = None) -> None:
    """Serve the MCP adapter on stdin/stdout."""
    from todokit.adapter import create_server

    args = build_mcp_parser().parse_args(argv)
    configure_logging(level=args.log_level)
    settings = adapter_settings_from_args(args)

    server = create_server(settings=settings)
    logger.info("adapter.starting", store_url=settings.store_url)
    server.run(transport="stdio")


if __name__ == "__main__":
    store_main()
