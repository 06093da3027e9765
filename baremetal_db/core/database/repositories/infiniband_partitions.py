"""
InfiniBand partition repository implementation.
"""

from __future__ import annotations

import uuid
from typing import List, Optional, Sequence, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.infiniband_partitions import (
    INFINIBAND_PARTITION_ORDER_BY_FIELDS,
    INFINIBAND_PARTITION_RELATIONS,
    InfiniBandPartition,
)
from ..paginator import PageInput
from ..schemas.infiniband_partitions import (
    InfiniBandPartitionClearInput,
    InfiniBandPartitionCreateInput,
    InfiniBandPartitionFilterInput,
    InfiniBandPartitionUpdateInput,
)
from .base import BaseRepository, QueryBuilder


class InfiniBandPartitionRepository(BaseRepository[InfiniBandPartition]):
    """Repository for InfiniBand partition data access operations."""

    order_by_fields = INFINIBAND_PARTITION_ORDER_BY_FIELDS
    relations = INFINIBAND_PARTITION_RELATIONS

    def __init__(self, session: AsyncSession, auto_commit: bool = True) -> None:
        super().__init__(session, InfiniBandPartition, auto_commit=auto_commit)

    async def create(self, data: InfiniBandPartitionCreateInput) -> InfiniBandPartition:
        return await self._create(data.set_fields(exclude=()))

    async def get_by_id(
        self, entity_id: uuid.UUID, include_relations: Optional[Sequence[str]] = None
    ) -> InfiniBandPartition:
        return await self._get(entity_id, include_relations)

    async def get_all(
        self,
        filter_input: Optional[InfiniBandPartitionFilterInput] = None,
        page: Optional[PageInput] = None,
        include_relations: Optional[Sequence[str]] = None,
    ) -> Tuple[List[InfiniBandPartition], int]:
        """List InfiniBand partitions matching a filter.

        ``tenant_orgs`` matches the organization stored on the partition.
        """
        stmt = self._select()
        if filter_input is not None:
            stmt = QueryBuilder.apply_in(stmt, InfiniBandPartition.id, filter_input.infiniband_partition_ids)
            stmt = QueryBuilder.apply_in(stmt, InfiniBandPartition.name, filter_input.names)
            stmt = QueryBuilder.apply_in(stmt, InfiniBandPartition.site_id, filter_input.site_ids)
            stmt = QueryBuilder.apply_in(stmt, InfiniBandPartition.org, filter_input.tenant_orgs)
            stmt = QueryBuilder.apply_in(stmt, InfiniBandPartition.tenant_id, filter_input.tenant_ids)
            stmt = QueryBuilder.apply_in(stmt, InfiniBandPartition.status, filter_input.statuses)
            stmt = QueryBuilder.apply_in(stmt, InfiniBandPartition.partition_name, filter_input.partition_names)
            stmt = QueryBuilder.apply_in(stmt, InfiniBandPartition.partition_key, filter_input.partition_keys)
            stmt = QueryBuilder.apply_equal(stmt, InfiniBandPartition.enable_sharp, filter_input.sharp_enabled)
            stmt = QueryBuilder.apply_search(
                stmt,
                filter_input.search_query,
                [
                    InfiniBandPartition.name,
                    InfiniBandPartition.description,
                    InfiniBandPartition.partition_key,
                    InfiniBandPartition.partition_name,
                    InfiniBandPartition.status,
                ],
                cast_columns=[InfiniBandPartition.labels],
            )
        return await self._paginate(stmt, page, include_relations)

    async def update(self, data: InfiniBandPartitionUpdateInput) -> InfiniBandPartition:
        return await self._update(data.id, data.set_fields())

    async def clear(self, data: InfiniBandPartitionClearInput) -> InfiniBandPartition:
        return await self._clear(data.id, data.flagged_fields())

    async def delete_by_id(self, entity_id: uuid.UUID) -> None:
        await self._soft_delete(entity_id)
