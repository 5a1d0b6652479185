from __future__ import annotations

import logging
from collections.abc import Generator

from fastapi import Depends, Header, HTTPException, Query, Request, status
from sqlalchemy.orm import Session

from rentassist.config import Settings
from rentassist.core.auth import secrets_match
from rentassist.core.uploads import UploadStore
from rentassist.db.repositories import ApplicationRepository

logger = logging.getLogger(__name__)


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_db(request: Request) -> Generator[Session, None, None]:
    yield from request.app.state.database.iter_sessions()


def get_repository(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> ApplicationRepository:
    return ApplicationRepository(db, affirmative_flag=settings.affirmative_flag)


def get_upload_store(request: Request) -> UploadStore:
    return request.app.state.upload_store


def require_admin(
    request: Request,
    password: str | None = Query(None),
    x_admin_password: str | None = Header(None),
    settings: Settings = Depends(get_app_settings),
) -> None:
    candidate = password or x_admin_password
    if secrets_match(candidate, settings.admin_password):
        return
    logger.warning("Rejected admin request to %s", request.url.path)
    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Admin authentication required",
    )
