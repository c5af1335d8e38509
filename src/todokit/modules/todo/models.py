"""Todo ORM model."""

from __future__ import annotations

import datetime

from sqlalchemy import Boolean, DateTime, Integer, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from todokit.core.models import Base


class Todo(Base):
    """A single to-do record; id and created_at are assigned by the database."""

    __tablename__ = "todos"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    task: Mapped[str] = mapped_column(Text, nullable=False)
    completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default="0")
    created_at: Mapped[datetime.datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.current_timestamp()
    )

    # sqlite_autoincrement keeps ids from being reused after deletes
    __table_args__ = {"sqlite_autoincrement": True}
