"""FastAPI application entrypoint."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from worklog.api import api_router
from worklog.core.config import Settings, get_settings
from worklog.core.errors import StorageError, WorklogError
from worklog.db.session import Database

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level.upper())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        database = Database.from_settings(settings)
        await database.start(seed=settings.seed_default_users)
        app.state.database = database
        try:
            yield
        finally:
            await database.dispose()

    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=settings.allowed_methods,
        allow_headers=["*"],
    )

    @app.exception_handler(WorklogError)
    async def worklog_error_handler(request: Request, exc: WorklogError) -> JSONResponse:
        if isinstance(exc, StorageError):
            logger.error("Storage failure on %s %s: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.get("/", response_class=PlainTextResponse, tags=["root"])
    async def root() -> str:
        return settings.root_message

    @app.get("/health", tags=["monitoring"])
    async def health_check() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(api_router)
    return app


app = create_app()
