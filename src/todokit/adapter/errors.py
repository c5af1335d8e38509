"""Failures raised when talking to the todo store."""

from __future__ import annotations


class StoreError(Exception):
    """Base class for every failure of a store round trip."""


class StoreUnavailableError(StoreError):
    """The store could not be reached (connection refused, timeout, ...)."""


class StoreStatusError(StoreError):
    """The store answered with a non-2xx status."""

    kind = "Bad status"

    def __init__(self, status_code: int, reason: str) -> None:
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"{self.kind} - {status_code} - {reason}")


class StoreBadResponseError(StoreStatusError):
    """The store failed on its side (status >= 500)."""

    kind = "Bad response"


class StoreBadRequestError(StoreStatusError):
    """The store rejected the request (status 400-499)."""

    kind = "Bad request"


class StoreProtocolError(StoreError):
    """A successful response did not carry the expected JSON envelope."""
