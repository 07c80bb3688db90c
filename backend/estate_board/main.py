# backend/estate_board/main.py
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import models  # noqa: F401  registers tables on Base.metadata
from .api import (
    assignments_router,
    backup_router,
    contacts_router,
    files_router,
    projects_router,
    system_router,
)
from .api.dependencies import require_auth
from .api.exception_handlers import register_exception_handlers
from .config import Settings, get_settings
from .database import Database
from .services.storage import FileStorage
from .utils.logging import api_logger, configure_file_logging


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        settings.create_storage_dirs()
        configure_file_logging(settings.LOGS_PATH)

        database = Database(settings.DATABASE_URL)
        database.create_all()
        app.state.database = database
        app.state.storage = FileStorage(settings.UPLOADS_PATH)
        api_logger.info("Estate Board API started", extra={"uploads_path": str(settings.UPLOADS_PATH)})
        try:
            yield
        finally:
            database.dispose()
            api_logger.info("Estate Board API stopped")

    app = FastAPI(title="Estate Board API", lifespan=lifespan)
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Content-Disposition", "Content-Length"],
    )

    register_exception_handlers(app)

    # Public routes
    app.include_router(system_router)

    # Everything else needs a bearer token
    protected = [Depends(require_auth)]
    app.include_router(projects_router, dependencies=protected)
    app.include_router(assignments_router, dependencies=protected)
    app.include_router(contacts_router, dependencies=protected)
    app.include_router(files_router, dependencies=protected)
    app.include_router(backup_router, dependencies=protected)

    @app.get("/")
    async def root():
        return {"message": "Estate Board API is running"}

    return app


app = create_app()
