# filmlib/services/api/routers/works.py
from __future__ import annotations

from http import HTTPStatus
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Query

from filmlib.common.settings import get_settings
from filmlib.services.api.deps import get_work_service, require_admin, require_reader
from filmlib.services.catalog.work_service import WorkService
from filmlib.services.mappers.work import to_domain_from_create, to_domain_from_patch
from filmlib.services.schemas.works import WorkCreate, WorkPatch, WorkRead

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/works", tags=["works"])


@router.get("", response_model=List[WorkRead], dependencies=[Depends(require_reader)])
def list_works(
    mode: int = Query(0, description="1 = title A-Z, 2 = newest release first, anything else = highest rating first"),
    svc: WorkService = Depends(get_work_service),
) -> List[WorkRead]:
    return [WorkRead.model_validate(w) for w in svc.list_sorted(mode)]


@router.get("/search/title", response_model=List[WorkRead], dependencies=[Depends(require_reader)])
def search_works_by_title(
    q: str = Query("", description="Substring of the title"),
    svc: WorkService = Depends(get_work_service),
) -> List[WorkRead]:
    return [WorkRead.model_validate(w) for w in svc.search_by_title(q)]


@router.get("/search/performer", response_model=List[WorkRead], dependencies=[Depends(require_reader)])
def search_works_by_performer(
    q: str = Query("", description="Substring of a credited performer's name"),
    svc: WorkService = Depends(get_work_service),
) -> List[WorkRead]:
    return [WorkRead.model_validate(w) for w in svc.search_by_performer_name(q)]


@router.post("", response_model=WorkRead, status_code=HTTPStatus.CREATED, dependencies=[Depends(require_admin)])
def create_work(
    payload: WorkCreate,
    svc: WorkService = Depends(get_work_service),
) -> WorkRead:
    return WorkRead.model_validate(svc.create(to_domain_from_create(payload)))


@router.get("/{work_id}", response_model=WorkRead, dependencies=[Depends(require_reader)])
def get_work(
    work_id: UUID = Path(...),
    svc: WorkService = Depends(get_work_service),
) -> WorkRead:
    return WorkRead.model_validate(svc.get(work_id))


@router.patch("/{work_id}", response_model=WorkRead, dependencies=[Depends(require_admin)])
def update_work(
    work_id: UUID,
    payload: WorkPatch,
    svc: WorkService = Depends(get_work_service),
) -> WorkRead:
    return WorkRead.model_validate(svc.update(work_id, to_domain_from_patch(payload)))


@router.delete("/{work_id}", status_code=HTTPStatus.NO_CONTENT, dependencies=[Depends(require_admin)])
def delete_work(
    work_id: UUID,
    svc: WorkService = Depends(get_work_service),
) -> None:
    svc.delete(work_id)
    return None
