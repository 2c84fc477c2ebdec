"""Database model for application users."""
from __future__ import annotations

import enum

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from worklog.db.base import Base


class UserRole(str, enum.Enum):
    EMPLOYEE = "employee"
    ADMIN = "admin"


class User(Base):
    """Application user with hashed password, role and work category."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String, unique=True, nullable=False, index=True)
    password_hash: Mapped[str] = mapped_column("password", String, nullable=False)
    role: Mapped[str] = mapped_column(String, default=UserRole.EMPLOYEE.value)
    name: Mapped[str | None] = mapped_column(String)
    type: Mapped[str | None] = mapped_column(String, nullable=True)
