# filmlib/services/api/errors.py
from __future__ import annotations

from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from filmlib.common.logging import get_logger
from filmlib.services.exceptions import (
    CatalogError,
    ConflictError,
    Forbidden,
    InvalidCredentials,
    MalformedAuthHeader,
    NotFoundError,
    StorageError,
    Unauthenticated,
    ValidationError,
)

logger = get_logger(__name__)

BEARER_CHALLENGE = {"WWW-Authenticate": "Bearer"}


def _error(status: HTTPStatus, detail: str, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(status_code=status, content={"detail": detail}, headers=headers)


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    body = {"detail": exc.message}
    if exc.field:
        body["field"] = exc.field
    return JSONResponse(status_code=HTTPStatus.BAD_REQUEST, content=body)


async def conflict_error_handler(request: Request, exc: ConflictError) -> JSONResponse:
    return _error(HTTPStatus.CONFLICT, exc.message)


async def not_found_error_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return _error(HTTPStatus.NOT_FOUND, f"{exc.resource} not found")


async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    logger.error("storage error: %s | path=%s", exc.message, request.url.path)
    return _error(HTTPStatus.INTERNAL_SERVER_ERROR, "storage failure")


async def invalid_credentials_handler(request: Request, exc: InvalidCredentials) -> JSONResponse:
    return _error(HTTPStatus.UNAUTHORIZED, exc.message, BEARER_CHALLENGE)


async def unauthenticated_handler(request: Request, exc: Unauthenticated) -> JSONResponse:
    return _error(HTTPStatus.UNAUTHORIZED, "not authenticated", BEARER_CHALLENGE)


async def malformed_header_handler(request: Request, exc: MalformedAuthHeader) -> JSONResponse:
    return _error(HTTPStatus.BAD_REQUEST, "invalid authorization header")


async def forbidden_handler(request: Request, exc: Forbidden) -> JSONResponse:
    return _error(HTTPStatus.FORBIDDEN, "insufficient role")


async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
    logger.error("unhandled catalog error %s | path=%s", type(exc).__name__, request.url.path)
    return _error(HTTPStatus.INTERNAL_SERVER_ERROR, "internal error")


def register_error_handlers(app: FastAPI) -> None:
    # Starlette walks the exception MRO, so NotFoundError resolves to its
    # own handler before the StorageError one.
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(ConflictError, conflict_error_handler)
    app.add_exception_handler(NotFoundError, not_found_error_handler)
    app.add_exception_handler(StorageError, storage_error_handler)
    app.add_exception_handler(InvalidCredentials, invalid_credentials_handler)
    app.add_exception_handler(Unauthenticated, unauthenticated_handler)
    app.add_exception_handler(MalformedAuthHeader, malformed_header_handler)
    app.add_exception_handler(Forbidden, forbidden_handler)
    app.add_exception_handler(CatalogError, catalog_error_handler)
