"""
Base repository interfaces and utilities.

This module provides the foundational repository pattern shared by every
table repository: insert (from an insert schema), lookup by primary key and
filtered listing. Rows are never updated or deleted through this layer.
Built with async SQLAlchemy sessions and SQLModel entities.
"""

from __future__ import annotations

from typing import Any, Dict, Generic, List, Mapping, Optional, Type, TypeVar, Union

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel, select

from digital_market.core.logging_config import get_logger

from ..errors import translate_integrity_error

logger = get_logger(__name__)

# Generic type for SQLModel entities
EntityType = TypeVar("EntityType", bound=SQLModel)
# Generic type for the matching insert schema
CreateSchemaType = TypeVar("CreateSchemaType", bound=SQLModel)


class AsyncBaseRepository(Generic[EntityType, CreateSchemaType]):
    """Base async repository with insert and read operations using SQLModel."""

    def __init__(self, session: AsyncSession, model: Type[EntityType], create_schema: Type[CreateSchemaType]) -> None:
        """Initialize repository with async database session and SQLModel entity class.

        Args:
            session: Async SQLAlchemy session for database operations
            model: SQLModel entity class for this repository
            create_schema: Insert schema validating new rows
        """
        self.session = session
        self.model = model
        self.create_schema = create_schema

    @property
    def table_name(self) -> str:
        return str(self.model.__tablename__)

    async def create(self, entity: EntityType) -> EntityType:
        """Persist a new entity record.

        Uniqueness and foreign-key violations reported by the store are
        rolled back and re-raised as ``DatabaseError`` subclasses.

        Args:
            entity: SQLModel instance to persist

        Returns:
            Persisted entity with generated fields populated

        Raises:
            DuplicateRecordError: A unique column already holds the value
            MissingReferenceError: A foreign key points at a missing row
            IntegrityViolationError: Any other integrity error
        """
        self.session.add(entity)
        try:
            await self.session.commit()
        except IntegrityError as exc:
            await self.session.rollback()
            error = translate_integrity_error(exc, self.table_name)
            logger.warning(f"Rejected insert into {self.table_name}: {error.detail}")
            raise error from exc
        await self.session.refresh(entity)
        logger.debug(f"Inserted {entity!r}")
        return entity

    async def insert(self, payload: Union[CreateSchemaType, Mapping[str, Any]]) -> EntityType:
        """Validate an insert payload and persist it.

        Args:
            payload: Insert schema instance or raw mapping

        Returns:
            Persisted entity

        Raises:
            pydantic.ValidationError: The payload does not satisfy the insert schema
        """
        if not isinstance(payload, self.create_schema):
            payload = self.create_schema.model_validate(payload)
        entity = self.model(**payload.model_dump())
        return await self.create(entity)

    async def get_by_id(self, entity_id: int) -> Optional[EntityType]:
        """Get entity by its primary identifier.

        Args:
            entity_id: Primary key value

        Returns:
            Entity instance or None if not found
        """
        stmt = select(self.model).where(self.model.id == entity_id)  # type: ignore[attr-defined]
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list(
        self, limit: Optional[int] = None, offset: Optional[int] = None, filters: Optional[Dict[str, Any]] = None
    ) -> List[EntityType]:
        """List entities ordered by id with optional pagination and filtering.

        Args:
            limit: Maximum number of records to return
            offset: Number of records to skip
            filters: Dictionary of column equality filters

        Returns:
            List of entity instances
        """
        stmt = select(self.model).order_by(self.model.id)  # type: ignore[attr-defined]

        if filters:
            stmt = QueryBuilder.apply_filters(stmt, self.model, filters)

        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)

        result = await self.session.execute(stmt)
        return list(result.scalars().all())


class QueryBuilder:
    """Utility class for building SQLModel-based database queries."""

    @staticmethod
    def apply_filters(stmt, model: Type[SQLModel], filters: Dict[str, Any]):
        """Apply equality filters to a SQLModel select statement.

        Keys that are not attributes of ``model`` and ``None`` values are ignored.

        Args:
            stmt: SQLModel select statement
            model: SQLModel entity class
            filters: Dictionary of field filters

        Returns:
            Modified select statement with filters applied
        """
        for key, value in filters.items():
            if value is not None and hasattr(model, key):
                stmt = stmt.where(getattr(model, key) == value)
        return stmt

    @staticmethod
    def apply_pagination(stmt, limit: Optional[int], offset: Optional[int]):
        """Apply pagination to a SQLModel select statement.

        Args:
            stmt: SQLModel select statement
            limit: Maximum number of records
            offset: Number of records to skip

        Returns:
            Modified select statement with pagination applied
        """
        if limit is not None:
            stmt = stmt.limit(limit)
        if offset is not None:
            stmt = stmt.offset(offset)
        return stmt
