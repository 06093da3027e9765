"""
Base repository interfaces and utilities.

This module provides the foundational repository patterns shared by every
repository in the data access layer:

- ``BaseRepository``: session handling, relation loading, soft-delete aware
  reads and the create / update / clear / delete / paginate building blocks
- ``QueryBuilder``: helpers that turn filter inputs into WHERE clauses

Mutations commit the session unless the repository was built with
``auto_commit=False``, in which case they only flush so several repositories
can share one caller-managed transaction.
"""

from __future__ import annotations

import uuid
from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, Iterable, List, Mapping, Optional, Sequence, Tuple, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy import func, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from sqlmodel import SQLModel, select

from baremetal_db.core.logging_config import get_logger

from ..base import utc_now
from ..errors import DoesNotExistError, InvalidParamsError
from ..paginator import PageInput, Paginator
from ..search import build_search_clause

logger = get_logger(__name__)

# Generic type for SQLModel entities
EntityType = TypeVar("EntityType", bound=SQLModel)

DEFAULT_ORDER_BY_FIELD = "created"


class BaseRepository(ABC, Generic[EntityType]):
    """Base async repository with common CRUD building blocks using SQLModel.

    Subclasses set ``order_by_fields`` and ``relations`` from the entity module
    and implement the typed public operations on top of the protected helpers.
    """

    order_by_fields: Tuple[str, ...] = ()
    relations: Tuple[str, ...] = ()
    soft_delete: bool = True

    def __init__(self, session: AsyncSession, model: Type[EntityType], auto_commit: bool = True) -> None:
        """Initialize repository with async database session and SQLModel entity class.

        Args:
            session: Async session for database operations
            model: SQLModel entity class for this repository
            auto_commit: Commit after each mutation, flush only when False
        """
        self.session = session
        self.model = model
        self.auto_commit = auto_commit

    @property
    def entity_name(self) -> str:
        return self.model.__name__

    @abstractmethod
    async def create(self, data: Any) -> EntityType:
        """Create a new record from a create input.

        Args:
            data: Entity-specific create input

        Returns:
            Persisted entity, re-read from the database
        """

    @abstractmethod
    async def get_by_id(self, entity_id: uuid.UUID, include_relations: Optional[Sequence[str]] = None) -> EntityType:
        """Get entity by its primary identifier.

        Args:
            entity_id: Primary key value
            include_relations: Relationship names to eager load

        Returns:
            Entity instance

        Raises:
            DoesNotExistError: If no live record has this ID
        """

    @abstractmethod
    async def update(self, data: Any) -> EntityType:
        """Update the columns set on an update input.

        Args:
            data: Entity-specific update input carrying the ID

        Returns:
            Updated entity instance
        """

    @abstractmethod
    async def delete_by_id(self, entity_id: uuid.UUID) -> None:
        """Delete entity by its primary identifier. Deleting a missing row is a no-op.

        Args:
            entity_id: Primary key value
        """

    # ------------------------------------------------------------------
    # Session helpers
    # ------------------------------------------------------------------

    async def _commit(self) -> None:
        if self.auto_commit:
            await self.session.commit()
        else:
            await self.session.flush()

    def _select(self, include_deleted: bool = False):
        """Select statement for the entity, hiding soft-deleted rows unless asked."""
        stmt = select(self.model)
        if self.soft_delete and not include_deleted:
            stmt = stmt.where(self.model.deleted.is_(None))
        return stmt

    def _live(self, entity_id: uuid.UUID) -> List[Any]:
        """WHERE conditions matching a single live row."""
        conditions = [self.model.id == entity_id]
        if self.soft_delete:
            conditions.append(self.model.deleted.is_(None))
        return conditions

    def _relation_options(self, include_relations: Optional[Sequence[str]]) -> List[Any]:
        """Build eager load options for the requested relationships.

        Raises:
            InvalidParamsError: If a name is not a relationship of the entity
        """
        options = []
        for name in include_relations or ():
            if name not in self.relations:
                raise InvalidParamsError(f"Invalid relation '{name}' for {self.entity_name}")
            options.append(selectinload(getattr(self.model, name)))
        return options

    def _order_by_columns(self) -> Mapping[str, Any]:
        """Orderable field names mapped to the column expressions they sort on."""
        return {field: getattr(self.model, field) for field in self.order_by_fields}

    @staticmethod
    def _row_values(values: Mapping[str, Any]) -> Dict[str, Any]:
        """Convert nested pydantic documents into plain dicts for JSON columns."""
        return {
            key: value.model_dump() if isinstance(value, BaseModel) else value for key, value in values.items()
        }

    # ------------------------------------------------------------------
    # CRUD building blocks
    # ------------------------------------------------------------------

    async def _get(
        self,
        entity_id: uuid.UUID,
        include_relations: Optional[Sequence[str]] = None,
        include_deleted: bool = False,
        for_update: bool = False,
    ) -> EntityType:
        options = self._relation_options(include_relations)
        stmt = (
            self._select(include_deleted=include_deleted)
            .where(self.model.id == entity_id)
            .options(*options)
            .execution_options(populate_existing=True)
        )
        if for_update:
            stmt = stmt.with_for_update()

        result = await self.session.execute(stmt)
        entity = result.scalar_one_or_none()
        if entity is None:
            raise DoesNotExistError(self.entity_name, entity_id)
        logger.debug(f"Fetched {self.entity_name}: id={entity_id}")
        return entity

    async def _create(self, values: Mapping[str, Any]) -> EntityType:
        entity = self.model(**self._row_values(values))
        entity_id = entity.id
        self.session.add(entity)
        await self._commit()
        logger.info(f"Created {self.entity_name}: id={entity_id}")
        return await self._get(entity_id)

    async def _update(self, entity_id: uuid.UUID, values: Mapping[str, Any]) -> EntityType:
        stmt = (
            update(self.model)
            .where(*self._live(entity_id))
            .values(**self._row_values(values), updated=utc_now())
        )
        await self.session.execute(stmt)
        await self._commit()
        logger.info(f"Updated {self.entity_name}: id={entity_id}, fields={sorted(values)}")
        return await self._get(entity_id)

    async def _clear(self, entity_id: uuid.UUID, columns: Iterable[str]) -> EntityType:
        columns = list(columns)
        if not columns:
            return await self._get(entity_id)
        stmt = (
            update(self.model)
            .where(*self._live(entity_id))
            .values(**{column: None for column in columns}, updated=utc_now())
        )
        await self.session.execute(stmt)
        await self._commit()
        logger.info(f"Cleared {self.entity_name}: id={entity_id}, fields={columns}")
        return await self._get(entity_id)

    async def _soft_delete(self, entity_id: uuid.UUID) -> None:
        now = utc_now()
        stmt = update(self.model).where(*self._live(entity_id)).values(deleted=now, updated=now)
        await self.session.execute(stmt)
        await self._commit()
        logger.info(f"Deleted {self.entity_name}: id={entity_id}")

    async def _paginate(
        self,
        stmt,
        page: Optional[PageInput],
        include_relations: Optional[Sequence[str]] = None,
    ) -> Tuple[List[EntityType], int]:
        """Count, order and page a filtered statement.

        Args:
            stmt: Filtered select statement
            page: Pagination parameters
            include_relations: Relationship names to eager load

        Returns:
            Rows of the requested page and the total number of matching rows
        """
        options = self._relation_options(include_relations)
        paginator = await Paginator.create(
            self.session,
            stmt,
            page,
            self._order_by_columns(),
            DEFAULT_ORDER_BY_FIELD,
            tiebreaker=self.model.id,
        )
        result = await self.session.execute(paginator.statement.options(*options))
        rows = list(result.scalars().all())
        logger.debug(f"Listed {self.entity_name}: returned={len(rows)}, total={paginator.total}")
        return rows, paginator.total

    async def _count(self, stmt) -> int:
        """Count the rows a filtered statement matches."""
        result = await self.session.execute(select(func.count()).select_from(stmt.subquery()))
        return result.scalar_one()

    async def _count_by_status(self, statuses: Iterable[str], *conditions) -> Dict[str, int]:
        """Count live rows per status.

        Returns:
            ``{"total": n}`` plus one entry per status, zero when absent
        """
        stmt = select(self.model.status, func.count()).group_by(self.model.status)
        if self.soft_delete:
            stmt = stmt.where(self.model.deleted.is_(None))
        for condition in conditions:
            stmt = stmt.where(condition)

        result = await self.session.execute(stmt)
        counts = {status: 0 for status in statuses}
        total = 0
        for status, count in result.all():
            counts[status] = count
            total += count
        counts["total"] = total
        return counts


class QueryBuilder:
    """Utility class for turning filter inputs into SQL conditions."""

    @staticmethod
    def apply_equal(stmt, column, value: Any):
        """Apply ``column = value`` when the value is set.

        Args:
            stmt: SQLModel select statement
            column: Column to compare
            value: Filter value, ignored when None

        Returns:
            Modified select statement
        """
        if value is None:
            return stmt
        return stmt.where(column == value)

    @staticmethod
    def apply_in(stmt, column, values: Optional[Sequence[Any]]):
        """Apply ``column IN (...)`` when the list is set.

        A single value compares with ``=``. An empty list matches nothing.

        Args:
            stmt: SQLModel select statement
            column: Column to compare
            values: Filter values, ignored when None

        Returns:
            Modified select statement
        """
        if values is None:
            return stmt
        values = list(values)
        if len(values) == 1:
            return stmt.where(column == values[0])
        return stmt.where(column.in_(values))

    @staticmethod
    def apply_search(stmt, query: Optional[str], text_columns: Sequence[Any], cast_columns: Sequence[Any] = ()):
        """AND a full-text / ILIKE search group into the statement when a query is given."""
        if not query:
            return stmt
        return stmt.where(build_search_clause(query, text_columns, cast_columns))
