"""
Tenant repository implementation.
"""

from __future__ import annotations

import uuid
from typing import List, Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.tenants import TENANT_RELATIONS, Tenant
from ..schemas.tenants import TenantCreateInput, TenantUpdateInput
from .base import BaseRepository


class TenantRepository(BaseRepository[Tenant]):
    """Repository for tenant data access operations."""

    relations = TENANT_RELATIONS

    def __init__(self, session: AsyncSession, auto_commit: bool = True) -> None:
        super().__init__(session, Tenant, auto_commit=auto_commit)

    async def create(self, data: TenantCreateInput) -> Tenant:
        return await self._create(data.set_fields(exclude=()))

    async def get_by_id(self, entity_id: uuid.UUID, include_relations: Optional[Sequence[str]] = None) -> Tenant:
        return await self._get(entity_id, include_relations)

    async def get_all_by_org(self, org: str, include_relations: Optional[Sequence[str]] = None) -> List[Tenant]:
        """Get every live tenant of an organization, oldest first."""
        options = self._relation_options(include_relations)
        stmt = self._select().where(Tenant.org == org).order_by(Tenant.created, Tenant.id).options(*options)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def update(self, data: TenantUpdateInput) -> Tenant:
        """Update a tenant. A given ``config`` replaces the stored one."""
        return await self._update(data.id, data.set_fields())

    async def delete_by_id(self, entity_id: uuid.UUID) -> None:
        await self._soft_delete(entity_id)
