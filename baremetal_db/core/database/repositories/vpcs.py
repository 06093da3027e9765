"""
VPC repository implementation.

This module provides data access operations for VPCs, including filtered
listing, free-text search and per-status counts for dashboards.
"""

from __future__ import annotations

import uuid
from typing import Dict, List, Optional, Sequence, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.vpcs import VPC_ORDER_BY_FIELDS, VPC_RELATIONS, Vpc, VpcStatus
from ..paginator import PageInput
from ..schemas.vpcs import VpcClearInput, VpcCreateInput, VpcFilterInput, VpcUpdateInput
from .base import BaseRepository, QueryBuilder


class VpcRepository(BaseRepository[Vpc]):
    """Repository for VPC data access operations using SQLModel."""

    order_by_fields = VPC_ORDER_BY_FIELDS
    relations = VPC_RELATIONS

    def __init__(self, session: AsyncSession, auto_commit: bool = True) -> None:
        super().__init__(session, Vpc, auto_commit=auto_commit)

    async def create(self, data: VpcCreateInput) -> Vpc:
        return await self._create(data.set_fields(exclude=()))

    async def get_by_id(self, entity_id: uuid.UUID, include_relations: Optional[Sequence[str]] = None) -> Vpc:
        return await self._get(entity_id, include_relations)

    async def get_all(
        self,
        filter_input: Optional[VpcFilterInput] = None,
        page: Optional[PageInput] = None,
        include_relations: Optional[Sequence[str]] = None,
    ) -> Tuple[List[Vpc], int]:
        """List VPCs matching a filter.

        Args:
            filter_input: Filter values, every live VPC when None
            page: Pagination and ordering
            include_relations: Relationship names to eager load

        Returns:
            Page of Vpc instances and the total number of matches
        """
        stmt = self._select()
        if filter_input is not None:
            stmt = QueryBuilder.apply_equal(stmt, Vpc.name, filter_input.name)
            stmt = QueryBuilder.apply_equal(stmt, Vpc.org, filter_input.org)
            stmt = QueryBuilder.apply_equal(stmt, Vpc.infrastructure_provider_id, filter_input.infrastructure_provider_id)
            stmt = QueryBuilder.apply_equal(
                stmt, Vpc.network_virtualization_type, filter_input.network_virtualization_type
            )
            stmt = QueryBuilder.apply_in(stmt, Vpc.id, filter_input.vpc_ids)
            stmt = QueryBuilder.apply_in(stmt, Vpc.tenant_id, filter_input.tenant_ids)
            stmt = QueryBuilder.apply_in(stmt, Vpc.site_id, filter_input.site_ids)
            stmt = QueryBuilder.apply_in(stmt, Vpc.nvlink_logical_partition_id, filter_input.nvlink_logical_partition_ids)
            stmt = QueryBuilder.apply_in(stmt, Vpc.network_security_group_id, filter_input.network_security_group_ids)
            stmt = QueryBuilder.apply_in(stmt, Vpc.status, filter_input.statuses)
            stmt = QueryBuilder.apply_search(
                stmt,
                filter_input.search_query,
                [Vpc.name, Vpc.description, Vpc.network_virtualization_type, Vpc.status],
                cast_columns=[Vpc.labels],
            )
        return await self._paginate(stmt, page, include_relations)

    async def get_count_by_status(
        self,
        infrastructure_provider_id: Optional[uuid.UUID] = None,
        tenant_id: Optional[uuid.UUID] = None,
        site_id: Optional[uuid.UUID] = None,
    ) -> Dict[str, int]:
        """Count live VPCs per status.

        Returns:
            ``{"total": n}`` plus one entry per VPC status
        """
        conditions = []
        if infrastructure_provider_id is not None:
            conditions.append(Vpc.infrastructure_provider_id == infrastructure_provider_id)
        if tenant_id is not None:
            conditions.append(Vpc.tenant_id == tenant_id)
        if site_id is not None:
            conditions.append(Vpc.site_id == site_id)
        return await self._count_by_status([status.value for status in VpcStatus], *conditions)

    async def update(self, data: VpcUpdateInput) -> Vpc:
        return await self._update(data.id, data.set_fields())

    async def clear(self, data: VpcClearInput) -> Vpc:
        return await self._clear(data.id, data.flagged_fields())

    async def delete_by_id(self, entity_id: uuid.UUID) -> None:
        await self._soft_delete(entity_id)
