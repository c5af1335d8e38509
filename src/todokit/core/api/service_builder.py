"""Base service builder for FastAPI applications without module dependencies."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncContextManager, AsyncIterator, Awaitable, Callable, List, Self

from fastapi import APIRouter, FastAPI
from pydantic import BaseModel, ConfigDict

from todokit.core import Database
from todokit.core.logging import configure_logging, get_logger

from .dependencies import set_database
from .middleware import add_error_handlers, add_logging_middleware

logger = get_logger(__name__)


class ServiceInfo(BaseModel):
    """Service metadata for FastAPI application."""

    display_name: str
    version: str = "1.0.0"
    summary: str | None = None
    description: str | None = None

    model_config = ConfigDict(extra="forbid")


class BaseServiceBuilder:
    """Base service builder providing core FastAPI functionality without module dependencies."""

    def __init__(
        self,
        *,
        info: ServiceInfo,
        database_url: str = "sqlite+aiosqlite:///:memory:",
        echo: bool = False,
        include_error_handlers: bool = True,
        include_logging: bool = False,
    ) -> None:
        """Initialize base service builder with core options."""
        self.info = info
        self._database_url = database_url
        self._echo = echo
        self._database_instance: Database | None = None
        self._include_error_handlers = include_error_handlers
        self._include_logging = include_logging
        self._include_docs = False
        self._custom_routers: List[APIRouter] = []
        self._startup_hooks: List[Callable[[FastAPI], Awaitable[None]]] = []
        self._shutdown_hooks: List[Callable[[FastAPI], Awaitable[None]]] = []

    # --------------------------------------------------------------------- Fluent configuration

    def with_database(self, url: str, *, echo: bool = False) -> Self:
        """Configure database URL."""
        self._database_url = url
        self._echo = echo
        return self

    def with_database_instance(self, database: Database) -> Self:
        """Inject a pre-configured database instance; the caller owns its lifecycle."""
        self._database_instance = database
        return self

    def with_logging(self, enabled: bool = True) -> Self:
        """Enable structured logging with request tracing."""
        self._include_logging = enabled
        return self

    def with_docs(self, enabled: bool = True) -> Self:
        """Serve OpenAPI docs at /docs and /openapi.json."""
        self._include_docs = enabled
        return self

    def include_router(self, router: APIRouter) -> Self:
        """Include a custom router."""
        self._custom_routers.append(router)
        return self

    def on_startup(self, hook: Callable[[FastAPI], Awaitable[None]]) -> Self:
        """Register a startup hook."""
        self._startup_hooks.append(hook)
        return self

    def on_shutdown(self, hook: Callable[[FastAPI], Awaitable[None]]) -> Self:
        """Register a shutdown hook."""
        self._shutdown_hooks.append(hook)
        return self

    # --------------------------------------------------------------------- Build mechanics

    def build(self) -> FastAPI:
        """Build and configure the FastAPI application."""
        self._validate_module_configuration()

        docs = self._include_docs
        app = FastAPI(
            title=self.info.display_name,
            description=self.info.summary or self.info.description or "",
            version=self.info.version,
            lifespan=self._build_lifespan(),
            docs_url="/docs" if docs else None,
            redoc_url=None,
            openapi_url="/openapi.json" if docs else None,
        )

        if self._include_error_handlers:
            add_error_handlers(app)

        if self._include_logging:
            add_logging_middleware(app)

        # Extension point for module-specific routers
        self._register_module_routers(app)

        for router in self._custom_routers:
            app.include_router(router)

        return app

    # --------------------------------------------------------------------- Extension points

    def _validate_module_configuration(self) -> None:
        """Extension point for module-specific validation (override in subclasses)."""
        pass

    def _register_module_routers(self, app: FastAPI) -> None:
        """Extension point for registering module-specific routers (override in subclasses)."""
        pass

    # --------------------------------------------------------------------- Core helpers

    def _build_lifespan(self) -> Callable[[FastAPI], AsyncContextManager[None]]:
        """Build lifespan context manager for app startup/shutdown."""
        database_url = self._database_url
        echo = self._echo
        database_instance = self._database_instance
        include_logging = self._include_logging
        startup_hooks = list(self._startup_hooks)
        shutdown_hooks = list(self._shutdown_hooks)
        service_name = self.info.display_name

        @asynccontextmanager
        async def lifespan(app: FastAPI) -> AsyncIterator[None]:
            if include_logging:
                configure_logging()

            # Use injected database or create new one from URL
            if database_instance is not None:
                database = database_instance
                should_manage_lifecycle = False
            else:
                database = Database(database_url, echo=echo)
                should_manage_lifecycle = True

            # Always initialize database (safe to call multiple times)
            await database.init()

            set_database(database)
            app.state.database = database
            logger.info("service.started", service=service_name)

            for hook in startup_hooks:
                await hook(app)
            try:
                yield
            finally:
                for hook in shutdown_hooks:
                    await hook(app)
                app.state.database = None
                set_database(None)

                # Dispose database only if we created it
                if should_manage_lifecycle:
                    await database.dispose()
                logger.info("service.stopped", service=service_name)

        return lifespan
