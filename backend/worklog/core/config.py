"""Application configuration and settings management."""
from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Global application settings loaded from environment variables or .env."""

    model_config = SettingsConfigDict(
        env_file=(Path(__file__).resolve().parent.parent / ".." / ".env"),
        env_file_encoding="utf-8",
        env_prefix="WORKLOG_",
        extra="ignore",
    )

    app_name: str = "Work Log Backend"
    root_message: str = "✅ Work Backend is running successfully!"

    # Database
    database_url: str = "sqlite+aiosqlite:///:memory:"
    sql_echo: bool = False
    seed_default_users: bool = True

    # Work updates
    default_user_type: str = "software"

    # CORS
    allowed_origins: List[str] = [
        "http://localhost:3000",
        "https://work-frontend-ror6.vercel.app",
    ]
    allowed_methods: List[str] = ["GET", "POST", "PUT", "DELETE"]

    # Logging
    log_level: str = "INFO"

    @field_validator("allowed_origins", "allowed_methods", mode="before")
    @classmethod
    def _split_csv(cls, value: List[str] | str) -> List[str]:
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value


@lru_cache
def get_settings() -> Settings:
    """Return memoized settings instance."""

    return Settings()
