"""
Centralized database layer for digital-market.

This package provides a unified location for all database entities,
schemas and repositories, organized by table.

Structure:
- entities/: SQLModel table models, one module per table
- schemas/: insert, read and composite-view schemas
- repositories/: async data access layer, one module per table
- errors.py: domain errors for store-enforced constraint violations
- utils.py: engine, session factory and table creation helpers
- session.py: global engine and session factory (imported on demand)
"""

from .base import Base
from .errors import (
    DatabaseError,
    DuplicateRecordError,
    IntegrityViolationError,
    MissingReferenceError,
)
from .utils import (
    create_all,
    create_engine,
    create_sessionmaker,
    drop_all,
)

__all__ = [
    "Base",
    "DatabaseError",
    "DuplicateRecordError",
    "IntegrityViolationError",
    "MissingReferenceError",
    "create_all",
    "create_engine",
    "create_sessionmaker",
    "drop_all",
]
