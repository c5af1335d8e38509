"""Structured logging configuration built on structlog."""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog
from structlog.typing import Processor

_configured = False


def configure_logging(*, level: str | None = None, fmt: str | None = None, force: bool = False) -> None:
    """Configure structlog and the stdlib root logger.

    Output always goes to stderr so that stdout stays free for protocol traffic.

    Args:
        level: Log level name, falls back to the LOG_LEVEL environment variable (default INFO)
        fmt: Either "console" or "json", falls back to LOG_FORMAT (default console)
        force: Reconfigure even if logging was configured already
    """
    global _configured
    if _configured and not force:
        return

    level_name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    log_format = (fmt or os.getenv("LOG_FORMAT", "console")).lower()
    numeric_level = logging.getLevelNamesMapping().get(level_name, logging.INFO)

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]

    renderer: Processor
    if log_format == "json":
        shared_processors.append(structlog.processors.format_exc_info)
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[*shared_processors, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(numeric_level)

    # Quiet down chatty libraries
    for noisy in ("httpx", "httpcore", "aiosqlite"):
        logging.getLogger(noisy).setLevel(max(numeric_level, logging.WARNING))

    _configured = True


def get_logger(name: str | None = None) -> Any:
    """Return a structlog logger bound to the given name."""
    return structlog.get_logger(name)


def add_request_context(**kwargs: Any) -> None:
    """Bind key/value pairs to the logging context of the current task."""
    structlog.contextvars.bind_contextvars(**kwargs)


def reset_request_context(*keys: str) -> None:
    """Remove specific keys from the logging context."""
    structlog.contextvars.unbind_contextvars(*keys)


def clear_request_context() -> None:
    """Clear the whole logging context."""
    structlog.contextvars.clear_contextvars()
