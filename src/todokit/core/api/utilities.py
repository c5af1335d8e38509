"""Utilities for running FastAPI services."""

from __future__ import annotations

from typing import Any

import uvicorn
from fastapi import FastAPI


def run_app(
    app: FastAPI | str,
    *,
    host: str = "127.0.0.1",
    port: int = 3000,
    reload: bool = False,
    **uvicorn_kwargs: Any,
) -> None:
    """Serve the app with uvicorn until interrupted.

    uvicorn turns SIGINT/SIGTERM into a lifespan shutdown, which disposes the database.
    Logging is left to the app's own structlog configuration.
    """
    uvicorn_kwargs.setdefault("log_config", None)
    uvicorn.run(app, host=host, port=port, reload=reload, **uvicorn_kwargs)
