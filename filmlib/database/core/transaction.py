# filmlib/database/core/transaction.py
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.orm import Session


@contextmanager
def transactional(db: Session) -> Iterator[Session]:
    """
    Run a unit of work atomically.

    If the session already has a transaction open (request-scoped session
    from the API), the block joins it and the owner commits or rolls back.
    Otherwise a transaction is opened here: COMMIT on normal exit, ROLLBACK
    if an exception escapes.
    """
    if db.in_transaction():
        yield db
        return
    with db.begin():
        yield db
