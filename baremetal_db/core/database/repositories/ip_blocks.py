"""
IP block repository implementation.

An IP block owned by the provider has no tenant. Blocks carved out for a
tenant ("derived" blocks) reference it, so ``exclude_derived`` keeps the
provider-owned ones only.
"""

from __future__ import annotations

import uuid
from typing import Dict, List, Optional, Sequence, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.ip_blocks import IP_BLOCK_ORDER_BY_FIELDS, IP_BLOCK_RELATIONS, IPBlock, IPBlockStatus
from ..errors import InvalidParamsError
from ..paginator import PageInput
from ..schemas.ip_blocks import IPBlockClearInput, IPBlockCreateInput, IPBlockFilterInput, IPBlockUpdateInput
from .base import BaseRepository, QueryBuilder


class IPBlockRepository(BaseRepository[IPBlock]):
    """Repository for IP block data access operations using SQLModel."""

    order_by_fields = IP_BLOCK_ORDER_BY_FIELDS
    relations = IP_BLOCK_RELATIONS

    def __init__(self, session: AsyncSession, auto_commit: bool = True) -> None:
        super().__init__(session, IPBlock, auto_commit=auto_commit)

    async def create(self, data: IPBlockCreateInput) -> IPBlock:
        return await self._create(data.set_fields(exclude=()))

    async def get_by_id(self, entity_id: uuid.UUID, include_relations: Optional[Sequence[str]] = None) -> IPBlock:
        return await self._get(entity_id, include_relations)

    async def get_all(
        self,
        filter_input: Optional[IPBlockFilterInput] = None,
        page: Optional[PageInput] = None,
        include_relations: Optional[Sequence[str]] = None,
    ) -> Tuple[List[IPBlock], int]:
        """List IP blocks matching a filter.

        Args:
            filter_input: Filter values, every live block when None
            page: Pagination and ordering
            include_relations: Relationship names to eager load

        Returns:
            Page of IPBlock instances and the total number of matches

        Raises:
            InvalidParamsError: If ``tenant_ids`` is combined with ``exclude_derived``
        """
        stmt = self._select()
        if filter_input is not None:
            if filter_input.exclude_derived and filter_input.tenant_ids is not None:
                raise InvalidParamsError("tenant_ids cannot be combined with exclude_derived")

            stmt = QueryBuilder.apply_in(stmt, IPBlock.id, filter_input.ip_block_ids)
            stmt = QueryBuilder.apply_in(stmt, IPBlock.name, filter_input.names)
            stmt = QueryBuilder.apply_in(stmt, IPBlock.site_id, filter_input.site_ids)
            stmt = QueryBuilder.apply_in(stmt, IPBlock.infrastructure_provider_id, filter_input.infrastructure_provider_ids)
            stmt = QueryBuilder.apply_in(stmt, IPBlock.tenant_id, filter_input.tenant_ids)
            stmt = QueryBuilder.apply_in(stmt, IPBlock.routing_type, filter_input.routing_types)
            stmt = QueryBuilder.apply_in(stmt, IPBlock.prefix, filter_input.prefixes)
            stmt = QueryBuilder.apply_in(stmt, IPBlock.prefix_length, filter_input.prefix_lengths)
            stmt = QueryBuilder.apply_in(stmt, IPBlock.protocol_version, filter_input.protocol_versions)
            stmt = QueryBuilder.apply_in(stmt, IPBlock.status, filter_input.statuses)
            stmt = QueryBuilder.apply_equal(stmt, IPBlock.full_grant, filter_input.full_grant)
            if filter_input.exclude_derived:
                stmt = stmt.where(IPBlock.tenant_id.is_(None))
            stmt = QueryBuilder.apply_search(
                stmt, filter_input.search_query, [IPBlock.name, IPBlock.description, IPBlock.status]
            )
        return await self._paginate(stmt, page, include_relations)

    async def get_count_by_status(
        self,
        infrastructure_provider_id: Optional[uuid.UUID] = None,
        site_id: Optional[uuid.UUID] = None,
    ) -> Dict[str, int]:
        """Count live IP blocks per status."""
        conditions = []
        if infrastructure_provider_id is not None:
            conditions.append(IPBlock.infrastructure_provider_id == infrastructure_provider_id)
        if site_id is not None:
            conditions.append(IPBlock.site_id == site_id)
        return await self._count_by_status([status.value for status in IPBlockStatus], *conditions)

    async def update(self, data: IPBlockUpdateInput) -> IPBlock:
        return await self._update(data.id, data.set_fields())

    async def clear(self, data: IPBlockClearInput) -> IPBlock:
        return await self._clear(data.id, data.flagged_fields())

    async def delete_by_id(self, entity_id: uuid.UUID) -> None:
        await self._soft_delete(entity_id)
