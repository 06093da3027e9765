"""
Infrastructure provider repository implementation.

Providers are looked up by ID or listed per organization; they have no
paginated listing.
"""

from __future__ import annotations

import uuid
from typing import List, Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.infrastructure_providers import INFRASTRUCTURE_PROVIDER_RELATIONS, InfrastructureProvider
from ..schemas.infrastructure_providers import InfrastructureProviderCreateInput, InfrastructureProviderUpdateInput
from .base import BaseRepository


class InfrastructureProviderRepository(BaseRepository[InfrastructureProvider]):
    """Repository for infrastructure provider data access operations."""

    relations = INFRASTRUCTURE_PROVIDER_RELATIONS

    def __init__(self, session: AsyncSession, auto_commit: bool = True) -> None:
        super().__init__(session, InfrastructureProvider, auto_commit=auto_commit)

    async def create(self, data: InfrastructureProviderCreateInput) -> InfrastructureProvider:
        return await self._create(data.set_fields(exclude=()))

    async def get_by_id(
        self, entity_id: uuid.UUID, include_relations: Optional[Sequence[str]] = None
    ) -> InfrastructureProvider:
        return await self._get(entity_id, include_relations)

    async def get_all_by_org(
        self, org: str, include_relations: Optional[Sequence[str]] = None
    ) -> List[InfrastructureProvider]:
        """Get every live provider of an organization, oldest first.

        Args:
            org: Organization name
            include_relations: Relationship names to eager load

        Returns:
            List of InfrastructureProvider instances
        """
        options = self._relation_options(include_relations)
        stmt = (
            self._select()
            .where(InfrastructureProvider.org == org)
            .order_by(InfrastructureProvider.created, InfrastructureProvider.id)
            .options(*options)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def update(self, data: InfrastructureProviderUpdateInput) -> InfrastructureProvider:
        return await self._update(data.id, data.set_fields())

    async def delete_by_id(self, entity_id: uuid.UUID) -> None:
        await self._soft_delete(entity_id)
