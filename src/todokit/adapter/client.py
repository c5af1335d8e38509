"""HTTP client for the todo store with uniform failure classification."""

from __future__ import annotations

from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, ValidationError

from todokit.core.logging import get_logger
from todokit.modules.todo.schemas import TodoPatch

from .errors import (
    StoreBadRequestError,
    StoreBadResponseError,
    StoreProtocolError,
    StoreStatusError,
    StoreUnavailableError,
)
from .links import MIME_TYPE

logger = get_logger(__name__)


class TodoRecord(BaseModel):
    """A todo as returned by the store; unknown fields are kept."""

    model_config = ConfigDict(extra="allow")

    id: int
    task: str
    completed: bool = False
    created_at: str | None = None


def classify_response(response: httpx.Response) -> StoreStatusError | None:
    """Return the failure a response represents, or None for 2xx."""
    if response.is_success:
        return None
    reason = response.reason_phrase or httpx.codes.get_reason_phrase(response.status_code)
    if response.status_code >= 500:
        return StoreBadResponseError(response.status_code, reason)
    return StoreBadRequestError(response.status_code, reason)


class TodoClient:
    """Stateless client: every call is exactly one HTTP request to the store."""

    def __init__(
        self,
        base_url: str = "http://localhost:3000",
        *,
        timeout: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize client with store base URL, timeout and optional transport (for tests)."""
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    def _http(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self._transport,
            headers={"Accept": MIME_TYPE},
        )

    async def _request(self, method: str, path: str, *, json: dict[str, Any] | None = None) -> httpx.Response:
        """Send one request and raise a classified StoreError for anything but 2xx."""
        try:
            async with self._http() as client:
                response = await client.request(method, path, json=json)
        except httpx.HTTPError as e:
            logger.error("store.unreachable", method=method, path=path, error=str(e))
            raise StoreUnavailableError(f"Todo store unreachable at {self.base_url}: {e}") from e

        failure = classify_response(response)
        if failure is not None:
            logger.warning("store.request_failed", method=method, path=path, status_code=response.status_code)
            raise failure

        logger.debug("store.request_completed", method=method, path=path, status_code=response.status_code)
        return response

    @staticmethod
    def _envelope(response: httpx.Response) -> dict[str, Any]:
        try:
            body = response.json()
        except ValueError as e:
            raise StoreProtocolError(f"Store returned a non-JSON body for {response.request.url.path}") from e
        if not isinstance(body, dict):
            raise StoreProtocolError(f"Store returned an unexpected body for {response.request.url.path}")
        return body

    @classmethod
    def _data(cls, response: httpx.Response) -> Any:
        body = cls._envelope(response)
        if "data" not in body:
            raise StoreProtocolError(f"Store response for {response.request.url.path} has no 'data' field")
        return body["data"]

    @staticmethod
    def _record(data: Any) -> TodoRecord:
        try:
            return TodoRecord.model_validate(data)
        except ValidationError as e:
            raise StoreProtocolError(f"Store returned a malformed todo: {e.error_count()} error(s)") from e

    # --------------------------------------------------------------------- Raw reads (resources)

    async def fetch_all_raw(self) -> str:
        """GET /todos and return the body untouched."""
        response = await self._request("GET", "/todos")
        return response.text

    async def fetch_one_raw(self, todo_id: int) -> str:
        """GET /todos/{id} and return the body untouched."""
        response = await self._request("GET", f"/todos/{todo_id}")
        return response.text

    # --------------------------------------------------------------------- Typed operations (tools)

    async def list_todos(self) -> list[TodoRecord]:
        """Fetch all todos."""
        data = self._data(await self._request("GET", "/todos"))
        if not isinstance(data, list):
            raise StoreProtocolError("Store returned a non-list 'data' for /todos")
        return [self._record(item) for item in data]

    async def get_todo(self, todo_id: int) -> TodoRecord:
        """Fetch one todo by id."""
        return self._record(self._data(await self._request("GET", f"/todos/{todo_id}")))

    async def add_todo(self, task: str) -> TodoRecord:
        """Create a todo and return the stored record."""
        response = await self._request("POST", "/todos", json={"task": task})
        return self._record(self._data(response))

    async def update_todo(self, todo_id: int, patch: TodoPatch) -> dict[str, Any]:
        """Apply a partial update and return the store's updated record unchanged."""
        response = await self._request("PUT", f"/todos/{todo_id}", json=patch.values())
        data = self._data(response)
        if not isinstance(data, dict):
            raise StoreProtocolError(f"Store returned a non-object 'data' for /todos/{todo_id}")
        return data

    async def delete_todo(self, todo_id: int) -> int:
        """Delete a todo and return the number of rows removed."""
        body = self._envelope(await self._request("DELETE", f"/todos/{todo_id}"))
        return int(body.get("changes", 0))

