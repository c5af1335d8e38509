"""Async SQLAlchemy database connection manager."""

from __future__ import annotations

import sqlite3
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import ConnectionPoolEntry

from .logging import get_logger

logger = get_logger(__name__)


def _install_sqlite_connect_pragmas(engine: AsyncEngine) -> None:
    """Install SQLite connection pragmas for performance and reliability."""

    def on_connect(dbapi_conn: sqlite3.Connection, _conn_record: ConnectionPoolEntry) -> None:
        """Configure SQLite pragmas on connection."""
        cur = dbapi_conn.cursor()
        cur.execute("PRAGMA foreign_keys=ON;")
        cur.execute("PRAGMA synchronous=NORMAL;")
        cur.execute("PRAGMA busy_timeout=30000;")  # 30s
        cur.execute("PRAGMA temp_store=MEMORY;")
        cur.execute("PRAGMA cache_size=-64000;")  # 64 MiB (negative => KiB)
        cur.execute("PRAGMA mmap_size=134217728;")  # 128 MiB
        cur.close()

    event.listen(engine.sync_engine, "connect", on_connect)


class Database:
    """Process-wide async database handle: created at startup, disposed on shutdown."""

    def __init__(self, url: str, *, echo: bool = False) -> None:
        """Initialize database with connection URL."""
        self.url = url
        self.engine: AsyncEngine = create_async_engine(url, echo=echo, future=True)
        _install_sqlite_connect_pragmas(self.engine)
        self._session_factory: async_sessionmaker[AsyncSession] = async_sessionmaker(
            bind=self.engine, class_=AsyncSession, expire_on_commit=False
        )

    @property
    def is_memory(self) -> bool:
        """Return True for in-memory SQLite databases."""
        return ":memory:" in self.url

    async def init(self) -> None:
        """Create the schema if it does not exist yet. Safe to call more than once."""
        # Import Base and models here to avoid circular import at module level
        from todokit.core.models import Base
        from todokit.modules.todo import models as _todo_models  # noqa: F401

        if not self.is_memory:
            async with self.engine.begin() as conn:
                await conn.exec_driver_sql("PRAGMA journal_mode=WAL;")

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

        logger.info("database.ready", url=self.url, tables=sorted(Base.metadata.tables))

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Create a database session context manager."""
        async with self._session_factory() as s:
            yield s

    async def dispose(self) -> None:
        """Dispose of database engine and connection pool."""
        await self.engine.dispose()
        logger.info("database.closed", url=self.url)
