"""Classification of driver errors surfaced through SQLAlchemy."""

from __future__ import annotations

from sqlalchemy.exc import DBAPIError

# PostgreSQL: lock_not_available, raised when lock_timeout expires
LOCK_NOT_AVAILABLE = "55P03"


def _sqlstate(error: BaseException | None) -> str | None:
    while error is not None:
        code = getattr(error, "sqlstate", None) or getattr(error, "pgcode", None)
        if code:
            return str(code)
        error = error.__cause__
    return None


def is_lock_timeout(exc: DBAPIError) -> bool:
    """True when the statement gave up waiting for a lock held by another transaction."""
    if _sqlstate(exc.orig) == LOCK_NOT_AVAILABLE:
        return True
    return "database is locked" in str(exc.orig)
