"""Unit tests for the infrastructure provider repository."""

from __future__ import annotations

import uuid

import pytest

from baremetal_db.core.database.errors import DoesNotExistError, InvalidParamsError
from baremetal_db.core.database.repositories.infrastructure_providers import InfrastructureProviderRepository
from baremetal_db.core.database.schemas.infrastructure_providers import (
    InfrastructureProviderCreateInput,
    InfrastructureProviderUpdateInput,
)


class TestInfrastructureProviderRepository:
    """Tests for InfrastructureProviderRepository operations."""

    @pytest.fixture
    def repository(self, in_memory_session):
        return InfrastructureProviderRepository(in_memory_session)

    async def test_create_and_get(self, repository):
        created = await repository.create(
            InfrastructureProviderCreateInput(name="provider-b", org="provider-org", org_display_name="Provider Org")
        )

        fetched = await repository.get_by_id(created.id)
        assert fetched.name == "provider-b"
        assert fetched.org_display_name == "Provider Org"
        assert fetched.deleted is None

    async def test_get_all_by_org_oldest_first(self, repository, provider):
        second = await repository.create(InfrastructureProviderCreateInput(name="provider-b", org=provider.org))
        await repository.create(InfrastructureProviderCreateInput(name="other", org="other-org"))

        providers = await repository.get_all_by_org(provider.org)

        assert [row.id for row in providers] == [provider.id, second.id]

    async def test_get_all_by_org_skips_deleted(self, repository, provider):
        await repository.delete_by_id(provider.id)

        assert await repository.get_all_by_org(provider.org) == []

    async def test_update(self, repository, provider):
        updated = await repository.update(InfrastructureProviderUpdateInput(id=provider.id, display_name="Renamed"))

        assert updated.display_name == "Renamed"
        assert updated.name == "provider-a"

    async def test_get_missing(self, repository):
        with pytest.raises(DoesNotExistError):
            await repository.get_by_id(uuid.uuid4())

    async def test_provider_has_no_relations(self, repository, provider):
        with pytest.raises(InvalidParamsError):
            await repository.get_by_id(provider.id, include_relations=["sites"])
