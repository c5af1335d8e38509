"""Tests for error handlers and request logging middleware."""

from __future__ import annotations

from fastapi import FastAPI, HTTPException
from fastapi.testclient import TestClient
from structlog.testing import capture_logs

from todokit.core.api import NOT_FOUND_TEXT, add_error_handlers, add_logging_middleware


def _app() -> FastAPI:
    app = FastAPI()
    add_error_handlers(app)
    add_logging_middleware(app)

    @app.get("/teapot")
    async def teapot() -> None:
        raise HTTPException(status_code=418, detail="short and stout")

    @app.get("/items/{item_id}")
    async def item(item_id: int) -> dict[str, int]:
        return {"item_id": item_id}

    return app


def test_non_404_http_errors_keep_status() -> None:
    """Other HTTP errors keep their status and carry an error message."""
    response = TestClient(_app()).get("/teapot")
    assert response.status_code == 418
    assert response.json() == {"error": "short and stout"}


def test_validation_errors_become_400() -> None:
    """Parameter validation failures are reported as 400."""
    response = TestClient(_app()).get("/items/not-a-number")
    assert response.status_code == 400
    assert "item_id" in response.json()["error"]


def test_unknown_path_is_plain_text() -> None:
    """Unmatched routes answer with the plain-text 404."""
    response = TestClient(_app()).get("/missing")
    assert response.status_code == 404
    assert response.text == NOT_FOUND_TEXT


def test_request_id_is_propagated_and_logged() -> None:
    """An incoming X-Request-ID is echoed and bound to the request log."""
    with capture_logs() as logs:
        response = TestClient(_app()).get("/items/3", headers={"X-Request-ID": "abc123"})

    assert response.headers["X-Request-ID"] == "abc123"
    completed = [entry for entry in logs if entry["event"] == "request.completed"]
    assert completed
    assert completed[0]["status_code"] == 200


def test_request_id_is_generated() -> None:
    """A request id is generated when the client sends none."""
    response = TestClient(_app()).get("/items/3")
    assert len(response.headers["X-Request-ID"]) == 32
