"""
Allocation repository implementation.
"""

from __future__ import annotations

import uuid
from typing import List, Optional, Sequence, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.allocations import ALLOCATION_ORDER_BY_FIELDS, ALLOCATION_RELATIONS, Allocation
from ..paginator import PageInput
from ..schemas.allocations import AllocationCreateInput, AllocationFilterInput, AllocationUpdateInput
from .base import BaseRepository, QueryBuilder


class AllocationRepository(BaseRepository[Allocation]):
    """Repository for allocation data access operations."""

    order_by_fields = ALLOCATION_ORDER_BY_FIELDS
    relations = ALLOCATION_RELATIONS

    def __init__(self, session: AsyncSession, auto_commit: bool = True) -> None:
        super().__init__(session, Allocation, auto_commit=auto_commit)

    async def create(self, data: AllocationCreateInput) -> Allocation:
        return await self._create(data.set_fields(exclude=()))

    async def get_by_id(self, entity_id: uuid.UUID, include_relations: Optional[Sequence[str]] = None) -> Allocation:
        return await self._get(entity_id, include_relations)

    async def get_all(
        self,
        filter_input: Optional[AllocationFilterInput] = None,
        page: Optional[PageInput] = None,
        include_relations: Optional[Sequence[str]] = None,
    ) -> Tuple[List[Allocation], int]:
        stmt = self._select()
        if filter_input is not None:
            stmt = QueryBuilder.apply_in(stmt, Allocation.id, filter_input.allocation_ids)
            stmt = QueryBuilder.apply_equal(
                stmt, Allocation.infrastructure_provider_id, filter_input.infrastructure_provider_id
            )
            stmt = QueryBuilder.apply_in(stmt, Allocation.tenant_id, filter_input.tenant_ids)
            stmt = QueryBuilder.apply_in(stmt, Allocation.site_id, filter_input.site_ids)
            stmt = QueryBuilder.apply_in(stmt, Allocation.status, filter_input.statuses)
            stmt = QueryBuilder.apply_search(
                stmt, filter_input.search_query, [Allocation.name, Allocation.description, Allocation.status]
            )
        return await self._paginate(stmt, page, include_relations)

    async def update(self, data: AllocationUpdateInput) -> Allocation:
        return await self._update(data.id, data.set_fields())

    async def delete_by_id(self, entity_id: uuid.UUID) -> None:
        await self._soft_delete(entity_id)
