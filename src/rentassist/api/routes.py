from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile

from rentassist.api.deps import get_app_settings, get_repository, get_upload_store
from rentassist.api.schemas import SubmitErrorResponse, SubmitResponse
from rentassist.config import Settings
from rentassist.core.fields import UPLOAD_SLOTS
from rentassist.core.uploads import PendingUpload, UploadRejectedError, UploadStore
from rentassist.core.validation import (
    SubmissionValidationError,
    check_formats,
    mask_ssn,
    validate_submission,
)
from rentassist.db.repositories import ApplicationRepository

logger = logging.getLogger(__name__)

router = APIRouter(tags=["public"])


def _error(status_code: int, error: str, missing_fields: list[str] | None = None) -> JSONResponse:
    body = SubmitErrorResponse(error=error, missing_fields=missing_fields or [])
    return JSONResponse(body.model_dump(), status_code=status_code)


def _log_format_warnings(values: dict[str, Any], settings: Settings) -> None:
    for warning in check_formats(values):
        shown = values.get(warning.field)
        if warning.field == "ssn" and settings.redact_log_pii:
            shown = mask_ssn(str(shown))
        logger.warning("Accepted %s with unexpected format (%s): %s", warning.field, warning.message, shown)


def _store_submission(
    fields: dict[str, Any],
    pending: list[PendingUpload],
    *,
    repo: ApplicationRepository,
    store: UploadStore,
    settings: Settings,
) -> JSONResponse:
    try:
        values = validate_submission(fields, require_biography=settings.require_biography)
    except SubmissionValidationError as exc:
        logger.info("Rejected submission: %s", exc)
        return _error(400, str(exc), exc.missing_fields)

    _log_format_warnings(values, settings)

    saved: list[str] = []
    try:
        for item in pending:
            filename = store.save(item)
            saved.append(filename)
            values[item.slot] = filename
    except OSError:
        logger.exception("Failed to store uploaded files")
        store.discard(saved)
        return _error(500, "Internal server error")

    try:
        application_id = repo.insert(values)
    except (SQLAlchemyError, OverflowError):
        logger.exception("Failed to save application")
        store.discard(saved)
        return _error(500, "Internal server error")

    logger.info("Application saved with id %s", application_id)
    return JSONResponse(SubmitResponse(applicationId=application_id).model_dump())


@router.post("/submit")
async def submit_application(
    request: Request,
    repo: ApplicationRepository = Depends(get_repository),
    store: UploadStore = Depends(get_upload_store),
    settings: Settings = Depends(get_app_settings),
) -> JSONResponse:
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            payload = await request.json()
        except ValueError:
            return _error(400, "Malformed JSON body")
        if not isinstance(payload, dict):
            return _error(400, "Malformed JSON body")
        fields = {key: value for key, value in payload.items() if key not in UPLOAD_SLOTS}
        return await run_in_threadpool(
            _store_submission, fields, [], repo=repo, store=store, settings=settings
        )

    form = await request.form()
    try:
        fields = {key: value for key, value in form.items() if isinstance(value, str)}
        pending: list[PendingUpload] = []
        for slot in UPLOAD_SLOTS:
            item = form.get(slot)
            if not isinstance(item, UploadFile):
                continue
            inspected = store.inspect(
                slot,
                filename=item.filename,
                content_type=item.content_type,
                stream=item.file,
            )
            if inspected is not None:
                pending.append(inspected)
        return await run_in_threadpool(
            _store_submission, fields, pending, repo=repo, store=store, settings=settings
        )
    except UploadRejectedError as exc:
        logger.info("Rejected upload in slot %s: %s", exc.slot, exc.reason)
        return _error(exc.status_code, str(exc))
    finally:
        await form.close()
