"""
Instance type repository implementation.
"""

from __future__ import annotations

import uuid
from typing import List, Optional, Sequence, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.instance_types import INSTANCE_TYPE_ORDER_BY_FIELDS, INSTANCE_TYPE_RELATIONS, InstanceType
from ..paginator import PageInput
from ..schemas.instance_types import (
    InstanceTypeClearInput,
    InstanceTypeCreateInput,
    InstanceTypeFilterInput,
    InstanceTypeUpdateInput,
)
from .base import BaseRepository, QueryBuilder


class InstanceTypeRepository(BaseRepository[InstanceType]):
    """Repository for instance type data access operations."""

    order_by_fields = INSTANCE_TYPE_ORDER_BY_FIELDS
    relations = INSTANCE_TYPE_RELATIONS

    def __init__(self, session: AsyncSession, auto_commit: bool = True) -> None:
        super().__init__(session, InstanceType, auto_commit=auto_commit)

    async def create(self, data: InstanceTypeCreateInput) -> InstanceType:
        return await self._create(data.set_fields(exclude=()))

    async def get_by_id(
        self, entity_id: uuid.UUID, include_relations: Optional[Sequence[str]] = None
    ) -> InstanceType:
        return await self._get(entity_id, include_relations)

    async def get_all(
        self,
        filter_input: Optional[InstanceTypeFilterInput] = None,
        page: Optional[PageInput] = None,
        include_relations: Optional[Sequence[str]] = None,
    ) -> Tuple[List[InstanceType], int]:
        stmt = self._select()
        if filter_input is not None:
            stmt = QueryBuilder.apply_in(stmt, InstanceType.id, filter_input.instance_type_ids)
            stmt = QueryBuilder.apply_in(stmt, InstanceType.name, filter_input.names)
            stmt = QueryBuilder.apply_equal(
                stmt, InstanceType.infrastructure_provider_id, filter_input.infrastructure_provider_id
            )
            stmt = QueryBuilder.apply_in(stmt, InstanceType.site_id, filter_input.site_ids)
            stmt = QueryBuilder.apply_in(stmt, InstanceType.status, filter_input.statuses)
            stmt = QueryBuilder.apply_search(
                stmt,
                filter_input.search_query,
                [InstanceType.name, InstanceType.display_name, InstanceType.description, InstanceType.status],
                cast_columns=[InstanceType.labels],
            )
        return await self._paginate(stmt, page, include_relations)

    async def update(self, data: InstanceTypeUpdateInput) -> InstanceType:
        return await self._update(data.id, data.set_fields())

    async def clear(self, data: InstanceTypeClearInput) -> InstanceType:
        return await self._clear(data.id, data.flagged_fields())

    async def delete_by_id(self, entity_id: uuid.UUID) -> None:
        await self._soft_delete(entity_id)
