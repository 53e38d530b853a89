"""Transaction boundary shared by every repository."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import text
from sqlalchemy.exc import DBAPIError, OperationalError, SQLAlchemyError
from sqlalchemy.orm import Session

from lexcards.exceptions import PersistenceError, StoreTimeoutError

logger = logging.getLogger(__name__)

# query_canceled, raised when statement_timeout fires
PG_QUERY_CANCELED = "57014"
# lock_not_available
PG_LOCK_NOT_AVAILABLE = "55P03"


def is_postgresql(db: Session) -> bool:
    return db.bind is not None and db.bind.dialect.name == "postgresql"


def _is_timeout(error: SQLAlchemyError) -> bool:
    if not isinstance(error, DBAPIError):
        return False
    pgcode = getattr(error.orig, "pgcode", None)
    if pgcode in (PG_QUERY_CANCELED, PG_LOCK_NOT_AVAILABLE):
        return True
    # SQLite reports busy-timeout expiry this way
    return isinstance(error, OperationalError) and "database is locked" in str(error.orig)


@contextmanager
def atomic(db: Session, timeout_seconds: float) -> Iterator[Session]:
    """
    Run one logical store operation as a single transaction.

    Commits when the block exits normally and rolls back on any exception.
    On PostgreSQL every statement in the block is bounded by
    ``timeout_seconds``; SQLite bounds lock waits through its connect
    timeout instead.

    Raises:
        StoreTimeoutError: If the store cancelled the operation for taking too long
        PersistenceError: For any other store failure
    """
    try:
        if is_postgresql(db):
            # SET does not take bind parameters
            db.execute(text(f"SET LOCAL statement_timeout = {int(timeout_seconds * 1000)}"))
        yield db
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        if _is_timeout(e):
            logger.error(f"Store operation timed out after {timeout_seconds}s: {e}")
            raise StoreTimeoutError(timeout_seconds) from e
        logger.error(f"Store operation failed: {e}")
        raise PersistenceError() from e
    except BaseException:
        db.rollback()
        raise
