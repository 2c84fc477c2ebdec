"""Authentication endpoints.

Logging in with an unknown username registers it as a new employee. No
session token is issued; clients keep the returned user object.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from worklog.core.dependencies import get_db
from worklog.schemas.auth import LoginRequest, LoginResponse
from worklog.schemas.user import UserRead
from worklog.services import users as user_service

router = APIRouter(tags=["auth"])


@router.post("/login", response_model=LoginResponse)
async def login(payload: LoginRequest, session: AsyncSession = Depends(get_db)) -> LoginResponse:
    result = await user_service.login(session, payload.username, payload.password)
    return LoginResponse(
        user=UserRead.model_validate(result.user),
        requires_type_selection=result.requires_type_selection,
    )
