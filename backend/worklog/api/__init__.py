"""API router aggregator."""
from fastapi import APIRouter

from worklog.api.routes import auth, users, work_updates

api_router = APIRouter()
api_router.include_router(auth.router)
api_router.include_router(work_updates.router)
api_router.include_router(users.router)

__all__ = ["api_router"]
