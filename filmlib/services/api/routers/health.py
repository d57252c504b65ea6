# filmlib/services/api/routers/health.py
from __future__ import annotations

from http import HTTPStatus

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from filmlib.common.logging import get_logger
from filmlib.common.settings import get_settings
from filmlib.services.api.deps import get_db

logger = get_logger(__name__)
router = APIRouter(tags=["health"])


@router.get("/healthz")
def healthz(db: Session = Depends(get_db)):
    """Liveness plus a round trip to the database."""
    s = get_settings()
    body = {"ok": True, "app": s.app_name, "env": s.app_env, "db": "connected"}
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.error("health check could not reach the database: %s", exc)
        body.update(ok=False, db="unreachable")
        return JSONResponse(status_code=HTTPStatus.SERVICE_UNAVAILABLE, content=body)
    return body
