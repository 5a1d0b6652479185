from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from rentassist.api.deps import get_repository, require_admin
from rentassist.api.schemas import ApplicationResponse, DeleteResponse, StatsResponse
from rentassist.db.repositories import ApplicationRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin", tags=["admin"], dependencies=[Depends(require_admin)])


@router.get("/applications", response_model=list[ApplicationResponse])
def list_applications(
    repo: ApplicationRepository = Depends(get_repository),
) -> list[ApplicationResponse]:
    return [ApplicationResponse.model_validate(row) for row in repo.list_applications()]


@router.get("/applications/{application_id}", response_model=ApplicationResponse)
def get_application(
    application_id: int,
    repo: ApplicationRepository = Depends(get_repository),
) -> ApplicationResponse:
    row = repo.get_application(application_id)
    if row is None:
        raise HTTPException(status_code=404, detail="Application not found")
    return ApplicationResponse.model_validate(row)


@router.get("/search", response_model=list[ApplicationResponse])
def search_applications(
    q: str | None = Query(None),
    repo: ApplicationRepository = Depends(get_repository),
) -> list[ApplicationResponse]:
    try:
        rows = repo.search(q or "")
    except ValueError as exc:
        raise HTTPException(status_code=400, detail="Search query required") from exc
    return [ApplicationResponse.model_validate(row) for row in rows]


@router.delete("/applications/{application_id}", response_model=DeleteResponse)
def delete_application(
    application_id: int,
    repo: ApplicationRepository = Depends(get_repository),
) -> DeleteResponse:
    if not repo.delete_application(application_id):
        raise HTTPException(status_code=404, detail="Application not found")
    logger.info("Deleted application %s", application_id)
    return DeleteResponse()


@router.get("/stats", response_model=StatsResponse)
def application_stats(repo: ApplicationRepository = Depends(get_repository)) -> StatsResponse:
    return StatsResponse.model_validate(repo.stats().model_dump())
