"""Password hashing helpers."""
from __future__ import annotations

from passlib.context import CryptContext

from .errors import HashingError


_password_context = CryptContext(schemes=["argon2"], deprecated="auto")


class PasswordHasher:
    """Hash and verify user passwords using Argon2id."""

    @staticmethod
    def hash(password: str) -> str:
        try:
            return _password_context.hash(password)
        except (TypeError, ValueError) as exc:
            raise HashingError("Error hashing password") from exc

    @staticmethod
    def verify(password: str, hashed: str) -> bool:
        try:
            return _password_context.verify(password, hashed)
        except (TypeError, ValueError) as exc:
            raise HashingError("Error checking password") from exc
