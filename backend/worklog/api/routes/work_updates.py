"""Work-update ledger endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from worklog.core.config import Settings
from worklog.core.dependencies import get_app_settings, get_db
from worklog.schemas.work_update import DeleteResponse, WorkUpdateCreate, WorkUpdateCreated, WorkUpdateRead
from worklog.services import work_updates as work_update_service

router = APIRouter(tags=["work-updates"])


@router.post("/work-update", response_model=WorkUpdateCreated)
async def submit_work_update(
    payload: WorkUpdateCreate,
    session: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> WorkUpdateCreated:
    update = await work_update_service.submit(session, payload, default_user_type=settings.default_user_type)
    return WorkUpdateCreated(id=update.id)


@router.get("/work-updates/{username}", response_model=list[WorkUpdateRead])
async def list_user_work_updates(username: str, session: AsyncSession = Depends(get_db)) -> list[WorkUpdateRead]:
    updates = await work_update_service.list_by_user(session, username)
    return [WorkUpdateRead.model_validate(update) for update in updates]


@router.delete("/work-update/{update_id}", response_model=DeleteResponse)
async def delete_work_update(update_id: int, session: AsyncSession = Depends(get_db)) -> DeleteResponse:
    await work_update_service.delete_by_id(session, update_id)
    return DeleteResponse()


# Admin listing; no role check is performed.
@router.get("/all-work-updates", response_model=list[WorkUpdateRead])
async def list_all_work_updates(session: AsyncSession = Depends(get_db)) -> list[WorkUpdateRead]:
    updates = await work_update_service.list_all(session)
    return [WorkUpdateRead.model_validate(update) for update in updates]
