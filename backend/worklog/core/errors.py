"""Domain errors raised by the service layer and rendered as ``{"error": ...}``."""
from __future__ import annotations

from fastapi import status
from sqlalchemy.exc import SQLAlchemyError


class WorklogError(Exception):
    """Base class for failures reported directly to the HTTP caller."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidCredentials(WorklogError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid credentials"


class NotFound(WorklogError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class StorageError(WorklogError):
    """Database failure; the driver message is passed through verbatim."""

    default_message = "Storage error"

    @classmethod
    def from_exc(cls, exc: SQLAlchemyError) -> "StorageError":
        original = getattr(exc, "orig", None)
        return cls(str(original) if original is not None else str(exc))


class HashingError(WorklogError):
    default_message = "Error hashing password"
