"""Environment-driven settings for the store service and the MCP adapter."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StoreSettings(BaseSettings):
    """Settings for the todo store HTTP service (TODOKIT_STORE_* variables)."""

    model_config = SettingsConfigDict(env_prefix="TODOKIT_STORE_", env_file=".env", extra="ignore")

    host: str = Field(default="127.0.0.1", description="Interface to bind")
    port: int = Field(default=3000, ge=1, le=65535, description="Port to listen on")
    database_path: Path = Field(default=Path("todos.db"), description="SQLite database file")
    echo_sql: bool = Field(default=False, description="Log every SQL statement")
    enable_docs: bool = Field(default=False, description="Serve /docs and /openapi.json")

    @property
    def database_url(self) -> str:
        """SQLAlchemy URL for the configured database file."""
        if str(self.database_path) == ":memory:":
            return "sqlite+aiosqlite:///:memory:"
        return f"sqlite+aiosqlite:///{self.database_path.expanduser().resolve()}"


class AdapterSettings(BaseSettings):
    """Settings for the MCP adapter (TODOKIT_ADAPTER_* variables)."""

    model_config = SettingsConfigDict(env_prefix="TODOKIT_ADAPTER_", env_file=".env", extra="ignore")

    store_url: str = Field(default="http://localhost:3000", description="Base URL of the todo store")
    timeout: float = Field(default=5.0, gt=0, description="HTTP timeout in seconds")
