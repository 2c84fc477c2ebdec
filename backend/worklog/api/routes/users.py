"""User directory and type selection endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from worklog.core.dependencies import get_db
from worklog.schemas.user import TypeSelection, TypeSelectionResponse, UserDirectoryEntry, UserRead
from worklog.services import users as user_service

router = APIRouter(tags=["users"])


# No role check: any caller can read the directory.
@router.get("/all-users", response_model=list[UserDirectoryEntry])
async def list_users(session: AsyncSession = Depends(get_db)) -> list[UserDirectoryEntry]:
    users = await user_service.list_users(session)
    return [UserDirectoryEntry.model_validate(user) for user in users]


@router.put("/users/{username}/type", response_model=TypeSelectionResponse)
async def select_type(
    username: str,
    payload: TypeSelection,
    session: AsyncSession = Depends(get_db),
) -> TypeSelectionResponse:
    user = await user_service.select_type(session, username, payload.type)
    return TypeSelectionResponse(user=UserRead.model_validate(user))
