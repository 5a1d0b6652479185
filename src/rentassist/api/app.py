from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError

from rentassist.api.admin import router as admin_router
from rentassist.api.routes import router as public_router
from rentassist.config import Settings, get_settings
from rentassist.core.uploads import UploadStore
from rentassist.db.init import ensure_data_directories
from rentassist.db.session import Database
from rentassist.logging_config import configure_logging

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)
    ensure_data_directories(settings)

    database = Database(settings.database_url)
    database.create_schema()

    app = FastAPI(title=settings.app_name)
    app.state.settings = settings
    app.state.database = database
    app.state.upload_store = UploadStore.from_settings(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list or ["*"],
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "X-Admin-Password"],
    )

    @app.on_event("shutdown")
    def _shutdown() -> None:
        database.dispose()

    @app.exception_handler(SQLAlchemyError)
    async def _storage_failure(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        logger.error("Storage failure on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse({"detail": "Internal server error"}, status_code=500)

    @app.get("/health")
    def health() -> JSONResponse:
        return JSONResponse({"status": "ok"})

    app.include_router(public_router)
    app.include_router(admin_router)
    app.mount("/uploads", StaticFiles(directory=str(settings.upload_dir)), name="uploads")
    return app
