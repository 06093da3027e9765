"""
Offset/limit pagination with a total count and validated ordering.

Every listing operation returns ``(rows, total)`` where ``total`` is the number
of rows matching the filter regardless of the page. The paginator counts the
filtered statement, then applies ORDER BY / LIMIT / OFFSET to it.

Ordering is restricted per entity: each repository passes the mapping of
orderable field names to column expressions, and anything else is rejected
with ``InvalidOrderByFieldError``. Ordering always ends with the primary key so
that pages never overlap when the requested field has duplicates.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from pydantic import BaseModel, Field, field_validator
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from baremetal_db.core.logging_config import get_logger

from .errors import InvalidOrderByFieldError, InvalidOrderError, InvalidParamsError

logger = get_logger(__name__)

DEFAULT_LIMIT = 20
# Stand-in for "no limit" when callers want every matching row
TOTAL_LIMIT = 2**31 - 1

ORDER_ASCENDING = "ASC"
ORDER_DESCENDING = "DESC"


class OrderBy(BaseModel):
    """Ordering requested by a caller."""

    field: str = Field(description="Name of the field to order by")
    order: str = Field(default=ORDER_ASCENDING, description="ASC or DESC")

    @field_validator("order")
    @classmethod
    def _normalize_order(cls, value: str) -> str:
        normalized = value.upper()
        if normalized not in (ORDER_ASCENDING, ORDER_DESCENDING):
            raise InvalidOrderError(value)
        return normalized


class PageInput(BaseModel):
    """Pagination parameters for a listing call."""

    offset: Optional[int] = Field(default=None, description="Number of rows to skip")
    limit: Optional[int] = Field(default=None, description="Maximum rows to return, DEFAULT_LIMIT when unset")
    order_by: Optional[OrderBy] = Field(default=None, description="Ordering, entity default when unset")


def new_default_order_by(field: str) -> OrderBy:
    """Build an ascending ``OrderBy`` for ``field``."""
    return OrderBy(field=field, order=ORDER_ASCENDING)


@dataclass(frozen=True)
class Paginator:
    """Result of paginating a filtered statement.

    Attributes:
        statement: Filtered statement with ordering, limit and offset applied
        total: Number of rows matching the filter
        offset: Offset that was applied
        limit: Limit that was applied
        order_by: Ordering that was applied
    """

    statement: Any
    total: int
    offset: int
    limit: int
    order_by: OrderBy

    @classmethod
    async def create(
        cls,
        session: AsyncSession,
        stmt,
        page: Optional[PageInput],
        order_by_columns: Mapping[str, Any],
        default_field: str,
        tiebreaker: Any = None,
    ) -> "Paginator":
        """Count the filtered statement and apply the requested page to it.

        Args:
            session: Session used to run the count query
            stmt: Filtered select statement, without ordering or limits
            page: Pagination parameters, defaults applied when None
            order_by_columns: Orderable field names mapped to column expressions
            default_field: Field used when the page carries no ordering
            tiebreaker: Column appended to the ordering, usually the primary key

        Returns:
            Paginator carrying the paged statement and the total count

        Raises:
            InvalidOrderByFieldError: If the ordering field is not orderable
            InvalidParamsError: If offset or limit is negative
        """
        page = page or PageInput()
        order_by = page.order_by or new_default_order_by(default_field)

        if order_by.field not in order_by_columns:
            raise InvalidOrderByFieldError(order_by.field, order_by_columns.keys())

        offset = 0 if page.offset is None else page.offset
        limit = DEFAULT_LIMIT if page.limit is None else page.limit
        if offset < 0:
            raise InvalidParamsError(f"Offset must not be negative: {offset}")
        if limit < 0:
            raise InvalidParamsError(f"Limit must not be negative: {limit}")

        count_stmt = select(func.count()).select_from(stmt.order_by(None).subquery())
        result = await session.execute(count_stmt)
        total = result.scalar_one()

        column = order_by_columns[order_by.field]
        ordering = [column.desc() if order_by.order == ORDER_DESCENDING else column.asc()]
        if tiebreaker is not None and tiebreaker is not column:
            ordering.append(tiebreaker.asc())

        paged = stmt.order_by(*ordering).limit(limit).offset(offset)
        logger.debug(f"Paginated query: total={total}, offset={offset}, limit={limit}, order_by={order_by.field}")
        return cls(statement=paged, total=total, offset=offset, limit=limit, order_by=order_by)
