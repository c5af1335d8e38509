"""Base class for routers that register their endpoints on construction."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

from fastapi import APIRouter


class Router(ABC):
    """Base class wrapping an APIRouter; subclasses implement _register_routes."""

    router: APIRouter

    @classmethod
    def create(cls, prefix: str, tags: Sequence[str], **kwargs: Any) -> APIRouter:
        """Instantiate the router and return the configured APIRouter."""
        return cls(prefix=prefix, tags=list(tags), **kwargs).router

    def __init__(self, prefix: str, tags: Sequence[str], **kwargs: Any) -> None:
        """Create the underlying APIRouter and register routes."""
        self.router = APIRouter(prefix=prefix, tags=list(tags), **kwargs)
        self._register_routes()

    @abstractmethod
    def _register_routes(self) -> None:
        """Register routes on self.router."""
        ...
