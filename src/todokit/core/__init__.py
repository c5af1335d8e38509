"""Core framework components - database, models, logging."""

from .database import Database
from .logging import configure_logging, get_logger
from .models import Base

__all__ = [
    "Base",
    "Database",
    "configure_logging",
    "get_logger",
]
