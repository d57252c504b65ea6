# filmlib/services/api/routers/performers.py
from __future__ import annotations

from http import HTTPStatus
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Path

from filmlib.common.settings import get_settings
from filmlib.services.api.deps import get_performer_service, require_admin, require_reader
from filmlib.services.catalog.performer_service import PerformerService
from filmlib.services.mappers.performer import to_domain_from_create, to_domain_from_patch
from filmlib.services.schemas.performers import (
    PerformerCreate, PerformerPatch, PerformerRead, PerformerWithWorksRead,
)

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/performers", tags=["performers"])


@router.get("", response_model=List[PerformerWithWorksRead], dependencies=[Depends(require_reader)])
def list_performers(
    svc: PerformerService = Depends(get_performer_service),
) -> List[PerformerWithWorksRead]:
    return [PerformerWithWorksRead.model_validate(p) for p in svc.list_with_works()]


@router.post(
    "",
    response_model=PerformerRead,
    status_code=HTTPStatus.CREATED,
    dependencies=[Depends(require_admin)],
)
def create_performer(
    payload: PerformerCreate,
    svc: PerformerService = Depends(get_performer_service),
) -> PerformerRead:
    return PerformerRead.model_validate(svc.create(to_domain_from_create(payload)))


@router.get("/{performer_id}", response_model=PerformerRead, dependencies=[Depends(require_reader)])
def get_performer(
    performer_id: UUID = Path(...),
    svc: PerformerService = Depends(get_performer_service),
) -> PerformerRead:
    return PerformerRead.model_validate(svc.get(performer_id))


@router.patch("/{performer_id}", response_model=PerformerRead, dependencies=[Depends(require_admin)])
def update_performer(
    performer_id: UUID,
    payload: PerformerPatch,
    svc: PerformerService = Depends(get_performer_service),
) -> PerformerRead:
    return PerformerRead.model_validate(svc.update(performer_id, to_domain_from_patch(payload)))


@router.delete("/{performer_id}", status_code=HTTPStatus.NO_CONTENT, dependencies=[Depends(require_admin)])
def delete_performer(
    performer_id: UUID,
    svc: PerformerService = Depends(get_performer_service),
) -> None:
    # credits pointing at this performer are left in place
    svc.delete(performer_id)
    return None
