"""Service layer for the work-update ledger."""
from __future__ import annotations

import logging
from datetime import datetime, timezone

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from worklog.core.errors import NotFound, StorageError
from worklog.models.user import User
from worklog.models.work_update import WorkUpdate
from worklog.schemas.work_update import WorkUpdateCreate

logger = logging.getLogger(__name__)

_NEWEST_FIRST = (WorkUpdate.timestamp.desc(), WorkUpdate.id.desc())


def utc_timestamp() -> str:
    """Current instant as ISO-8601 UTC, e.g. ``2024-05-01T09:30:00.123456Z``."""

    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ")


async def submit(
    session: AsyncSession,
    data: WorkUpdateCreate,
    default_user_type: str,
) -> WorkUpdate:
    """Append a work update, freezing the author's current type into it."""

    try:
        result = await session.execute(select(User.type).where(User.username == data.username))
        user_type = result.scalar_one_or_none() or default_user_type

        update = WorkUpdate(
            username=data.username,
            name=data.name,
            user_type=user_type,
            date=data.date,
            project_type=data.project_type,
            project_name=data.project_name,
            work_done=data.work_done,
            task=data.task,
            help_taken=data.help_taken,
            status=data.status,
            timestamp=utc_timestamp(),
        )
        session.add(update)
        await session.commit()
    except SQLAlchemyError as exc:
        await session.rollback()
        raise StorageError.from_exc(exc) from exc

    logger.info("Recorded work update %s for %s", update.id, data.username)
    return update


async def list_by_user(session: AsyncSession, username: str) -> list[WorkUpdate]:
    try:
        result = await session.execute(
            select(WorkUpdate).where(WorkUpdate.username == username).order_by(*_NEWEST_FIRST)
        )
    except SQLAlchemyError as exc:
        raise StorageError.from_exc(exc) from exc
    return list(result.scalars().all())


async def list_all(session: AsyncSession) -> list[WorkUpdate]:
    try:
        result = await session.execute(select(WorkUpdate).order_by(*_NEWEST_FIRST))
    except SQLAlchemyError as exc:
        raise StorageError.from_exc(exc) from exc
    return list(result.scalars().all())


async def delete_by_id(session: AsyncSession, update_id: int) -> None:
    try:
        result = await session.execute(delete(WorkUpdate).where(WorkUpdate.id == update_id))
        if result.rowcount == 0:
            raise NotFound()
        await session.commit()
    except SQLAlchemyError as exc:
        await session.rollback()
        raise StorageError.from_exc(exc) from exc
    logger.info("Deleted work update %s", update_id)
