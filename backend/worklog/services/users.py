"""User service functions for authentication, registration and the directory."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from worklog.core.errors import InvalidCredentials, NotFound, StorageError
from worklog.core.security import PasswordHasher
from worklog.models.user import User, UserRole

logger = logging.getLogger(__name__)

DEFAULT_ACCOUNTS = (
    # username, password, role, name, type
    ("alice", "123", UserRole.EMPLOYEE.value, "Alice Smith", "software"),
    ("admin", "admin", UserRole.ADMIN.value, "John Admin", "software"),
)


@dataclass
class LoginResult:
    user: User
    created: bool
    requires_type_selection: bool


def display_name(username: str) -> str:
    """Capitalize the first character only; the remainder is kept as typed."""

    return username[:1].upper() + username[1:]


def requires_type_selection(user: User) -> bool:
    return user.role == UserRole.EMPLOYEE.value and not user.type


async def get_user_by_username(session: AsyncSession, username: str) -> User | None:
    try:
        result = await session.execute(select(User).where(User.username == username))
    except SQLAlchemyError as exc:
        raise StorageError.from_exc(exc) from exc
    return result.scalar_one_or_none()


async def create_user(
    session: AsyncSession,
    username: str,
    password: str,
    role: str = UserRole.EMPLOYEE.value,
    name: str | None = None,
    type_: str | None = None,
) -> User:
    password_hash = PasswordHasher.hash(password)
    user = User(
        username=username,
        password_hash=password_hash,
        role=role,
        name=name if name is not None else display_name(username),
        type=type_,
    )
    session.add(user)
    try:
        await session.commit()
    except SQLAlchemyError as exc:
        await session.rollback()
        raise StorageError.from_exc(exc) from exc
    return user


async def login(session: AsyncSession, username: str, password: str) -> LoginResult:
    """Verify credentials, registering unknown usernames as new employees."""

    user = await get_user_by_username(session, username)
    if user is not None:
        if not PasswordHasher.verify(password, user.password_hash):
            logger.warning("Rejected login for %s", username)
            raise InvalidCredentials()
        return LoginResult(user=user, created=False, requires_type_selection=requires_type_selection(user))

    user = await create_user(session, username, password)
    logger.info("Registered new employee %s on first login", username)
    return LoginResult(user=user, created=True, requires_type_selection=True)


async def select_type(session: AsyncSession, username: str, type_: str | None) -> User:
    user = await get_user_by_username(session, username)
    if user is None:
        raise NotFound("User not found")
    user.type = type_
    try:
        await session.commit()
    except SQLAlchemyError as exc:
        await session.rollback()
        raise StorageError.from_exc(exc) from exc
    logger.info("User %s selected type %s", username, type_)
    return user


async def list_users(session: AsyncSession) -> list[User]:
    try:
        result = await session.execute(select(User).order_by(User.name.asc()))
    except SQLAlchemyError as exc:
        raise StorageError.from_exc(exc) from exc
    return list(result.scalars().all())


async def seed_default_users(session: AsyncSession) -> None:
    for username, password, role, name, type_ in DEFAULT_ACCOUNTS:
        if await get_user_by_username(session, username) is not None:
            continue
        await create_user(session, username, password, role=role, name=name, type_=type_)
        logger.info("Seeded %s account %s", role, username)
