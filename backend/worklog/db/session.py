"""Database engine, session and lifecycle management."""
from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from worklog import models  # noqa: F401  registers tables on Base.metadata
from worklog.core.config import Settings
from worklog.db.base import Base
from worklog.services.users import seed_default_users

logger = logging.getLogger(__name__)


def _is_memory_sqlite(url: str) -> bool:
    parsed = make_url(url)
    return parsed.get_backend_name() == "sqlite" and parsed.database in (None, "", ":memory:")


class Database:
    """Owns the engine and session factory for one application instance.

    An in-memory SQLite database lives only as long as its connection, so a
    static pool is used to share that single connection between sessions.
    Sessions hold that connection one at a time.
    """

    def __init__(self, url: str, echo: bool = False) -> None:
        self.url = url
        engine_kwargs: dict = {"future": True, "echo": echo}
        if _is_memory_sqlite(url):
            engine_kwargs["poolclass"] = StaticPool
            engine_kwargs["connect_args"] = {"check_same_thread": False}
        self.engine: AsyncEngine = create_async_engine(url, **engine_kwargs)
        self.session_factory = async_sessionmaker(self.engine, expire_on_commit=False, class_=AsyncSession)
        self._lock = asyncio.Lock()

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(settings.database_url, echo=settings.sql_echo)

    async def create_all(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def start(self, seed: bool = True) -> None:
        """Create tables and, optionally, the default accounts."""

        await self.create_all()
        if seed:
            async with self.session() as session:
                await seed_default_users(session)
        logger.info("Database ready at %s", self.url)

    async def dispose(self) -> None:
        await self.engine.dispose()
        logger.info("Database disposed")

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Provide an exclusive transactional scope around a series of operations."""

        async with self._lock:
            async with self.session_factory() as session:
                try:
                    yield session
                finally:
                    await session.close()
