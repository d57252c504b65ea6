# filmlib/services/catalog/utils.py
from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import SQLAlchemyError

from filmlib.common.logging import get_logger
from filmlib.services.exceptions import StorageError

logger = get_logger(__name__)


@contextmanager
def storage_errors(action: str) -> Iterator[None]:
    """Re-raise any SQLAlchemy failure inside the block as StorageError."""
    try:
        yield
    except SQLAlchemyError as exc:
        logger.error("storage failure while trying to %s: %s", action, exc)
        raise StorageError(f"failed to {action}") from exc

