"""Database model for logged work updates."""
from __future__ import annotations

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from worklog.db.base import Base


class WorkUpdate(Base):
    """A single logged record of work; the author fields are a snapshot."""

    __tablename__ = "work_updates"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    username: Mapped[str | None] = mapped_column(String, index=True)
    name: Mapped[str | None] = mapped_column(String)
    user_type: Mapped[str | None] = mapped_column("userType", String)
    date: Mapped[str | None] = mapped_column(String)
    project_type: Mapped[str | None] = mapped_column("projectType", String)
    project_name: Mapped[str | None] = mapped_column("projectName", String)
    work_done: Mapped[str | None] = mapped_column("workDone", String)
    task: Mapped[str | None] = mapped_column(String)
    help_taken: Mapped[str | None] = mapped_column("helpTaken", String)
    status: Mapped[str | None] = mapped_column(String)
    timestamp: Mapped[str] = mapped_column(String, nullable=False, index=True)
