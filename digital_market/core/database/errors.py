"""Error types for the database layer.

Defines a small hierarchy of exceptions raised by repositories when the
store rejects a write: unique-constraint violations (username, category
name) and foreign-key violations (a user, category or asset id that does
not exist).
"""

from __future__ import annotations

from sqlalchemy.exc import IntegrityError

# SQLSTATE codes reported by PostgreSQL drivers
UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"

_UNIQUE_MARKERS = ("unique", "duplicate key")
_FOREIGN_KEY_MARKERS = ("foreign key",)


class DatabaseError(Exception):
    """Base error for all database layer exceptions."""

    def __init__(self, table: str, detail: str) -> None:
        self.table = table
        self.detail = detail
        super().__init__(f"{self.summary} on '{table}': {detail}")

    summary = "Database error"


class DuplicateRecordError(DatabaseError):
    """Raised when an insert violates a unique constraint."""

    summary = "Duplicate record"


class MissingReferenceError(DatabaseError):
    """Raised when an insert references a row that does not exist."""

    summary = "Missing referenced record"


class IntegrityViolationError(DatabaseError):
    """Raised for any other integrity error reported by the store."""

    summary = "Integrity violation"


def translate_integrity_error(exc: IntegrityError, table: str) -> DatabaseError:
    """Map a driver-level ``IntegrityError`` onto the domain error hierarchy.

    PostgreSQL drivers expose the SQLSTATE code, which decides the mapping
    when present. SQLite only reports a message, so without a code the check
    is made against the lower-cased driver message.

    Args:
        exc: The error raised while flushing or committing
        table: Name of the table being written

    Returns:
        The matching ``DatabaseError`` subclass instance
    """
    detail = str(exc.orig) if exc.orig is not None else str(exc)
    sqlstate = getattr(exc.orig, "sqlstate", None) or getattr(exc.orig, "pgcode", None)
    if sqlstate:
        if sqlstate == FOREIGN_KEY_VIOLATION:
            return MissingReferenceError(table, detail)
        if sqlstate == UNIQUE_VIOLATION:
            return DuplicateRecordError(table, detail)
        return IntegrityViolationError(table, detail)

    message = detail.lower()
    if any(marker in message for marker in _FOREIGN_KEY_MARKERS):
        return MissingReferenceError(table, detail)
    if any(marker in message for marker in _UNIQUE_MARKERS):
        return DuplicateRecordError(table, detail)
    return IntegrityViolationError(table, detail)
