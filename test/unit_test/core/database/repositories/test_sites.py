"""Unit tests for site repository.

Round trips run against in-memory SQLite; the JSON ordering and search
statements are compiled for Postgres with a mocked session.
"""

from __future__ import annotations

import uuid

import pytest
from sqlalchemy.dialects import postgresql

from baremetal_db.core.database.entities.sites import SiteStatus
from baremetal_db.core.database.errors import DoesNotExistError, InvalidOrderByFieldError
from baremetal_db.core.database.paginator import OrderBy, PageInput
from baremetal_db.core.database.repositories.sites import SiteRepository
from baremetal_db.core.database.schemas.sites import (
    SiteClearInput,
    SiteConfigFilterInput,
    SiteConfigUpdateInput,
    SiteCreateInput,
    SiteFilterInput,
    SiteLocation,
    SiteUpdateInput,
)


def _sql(stmt) -> str:
    return str(stmt.compile(dialect=postgresql.dialect(paramstyle="named"), compile_kwargs={"literal_binds": True}))


class TestSiteRepository:
    """Tests for SiteRepository operations."""

    @pytest.fixture
    def repository(self, in_memory_session):
        return SiteRepository(in_memory_session)

    async def test_create(self, repository, provider):
        site = await repository.create(
            SiteCreateInput(
                name="sjc-1",
                org=provider.org,
                infrastructure_provider_id=provider.id,
                location=SiteLocation(city="San Jose"),
            )
        )

        assert site.status == SiteStatus.PENDING.value
        assert site.config == {
            "native_networking": False,
            "network_security_group": False,
            "nvlink_partition": False,
            "max_network_security_group_rule_count": None,
        }
        assert site.get_location().city == "San Jose"
        assert site.contact is None

    async def test_create_with_explicit_id(self, repository, provider):
        site_id = uuid.uuid4()

        site = await repository.create(
            SiteCreateInput(id=site_id, name="sjc-2", org=provider.org, infrastructure_provider_id=provider.id)
        )

        assert site.id == site_id

    async def test_get_by_id_with_relation(self, repository, site, provider):
        fetched = await repository.get_by_id(site.id, include_relations=["infrastructure_provider"])

        assert fetched.infrastructure_provider.id == provider.id

    async def test_get_missing(self, repository):
        with pytest.raises(DoesNotExistError):
            await repository.get_by_id(uuid.uuid4())

    async def test_update_merges_config(self, repository, site):
        updated = await repository.update(
            SiteUpdateInput(
                id=site.id,
                display_name="Site A (renamed)",
                config=SiteConfigUpdateInput(network_security_group=True),
            )
        )

        assert updated.display_name == "Site A (renamed)"
        assert updated.config["native_networking"] is True
        assert updated.config["network_security_group"] is True

    async def test_update_missing(self, repository):
        with pytest.raises(DoesNotExistError):
            await repository.update(SiteUpdateInput(id=uuid.uuid4(), name="ghost"))

    async def test_clear(self, repository, site):
        cleared = await repository.clear(SiteClearInput(id=site.id, display_name=True, contact=True))

        assert cleared.display_name is None
        assert cleared.contact is None
        assert cleared.location is not None

    async def test_delete_hides_row(self, repository, site):
        await repository.delete_by_id(site.id)

        with pytest.raises(DoesNotExistError):
            await repository.get_by_id(site.id)
        deleted = await repository.get_by_id(site.id, include_deleted=True)
        assert deleted.deleted is not None

    async def test_delete_missing_is_noop(self, repository):
        await repository.delete_by_id(uuid.uuid4())

    async def test_get_all_filters(self, repository, site, provider):
        await repository.create(
            SiteCreateInput(
                name="site-b",
                org=provider.org,
                infrastructure_provider_id=provider.id,
                status=SiteStatus.REGISTERED,
            )
        )

        sites, total = await repository.get_all(SiteFilterInput(statuses=[SiteStatus.PENDING]))
        assert total == 1
        assert [row.id for row in sites] == [site.id]

        sites, total = await repository.get_all(SiteFilterInput(infrastructure_provider_id=provider.id))
        assert total == 2

        assert await repository.get_count(SiteFilterInput(site_ids=[])) == 0
        assert await repository.get_count() == 2

    async def test_get_all_config_filter(self, repository, site):
        sites, total = await repository.get_all(
            SiteFilterInput(config=SiteConfigFilterInput(native_networking=True))
        )
        assert total == 1
        assert sites[0].id == site.id

        _, total = await repository.get_all(SiteFilterInput(config=SiteConfigFilterInput(native_networking=False)))
        assert total == 0

    async def test_get_all_paging(self, repository, site, provider):
        for name in ("site-c", "site-b"):
            await repository.create(SiteCreateInput(name=name, org=provider.org, infrastructure_provider_id=provider.id))

        sites, total = await repository.get_all(
            page=PageInput(offset=1, limit=1, order_by=OrderBy(field="name", order="DESC"))
        )

        assert total == 3
        assert [row.name for row in sites] == ["site-b"]

    async def test_invalid_order_by(self, repository):
        with pytest.raises(InvalidOrderByFieldError):
            await repository.get_all(page=PageInput(order_by=OrderBy(field="registration_token")))


class TestSiteRepositoryStatements:
    """Tests for the Postgres statements built by SiteRepository."""

    @pytest.fixture
    def repository(self, mock_session):
        return SiteRepository(mock_session)

    async def test_order_by_location_city(self, repository, mock_session):
        await repository.get_all(page=PageInput(order_by=OrderBy(field="location", order="DESC")))

        sql = _sql(mock_session.execute.await_args.args[0])
        assert "ORDER BY site.location ->> 'city' DESC" in sql

    async def test_order_by_contact_email(self, repository, mock_session):
        await repository.get_all(page=PageInput(order_by=OrderBy(field="contact")))

        sql = _sql(mock_session.execute.await_args.args[0])
        assert "site.contact ->> 'email' ASC" in sql

    async def test_search_casts_documents(self, repository, mock_session):
        await repository.get_count(SiteFilterInput(search_query="clara"))

        sql = _sql(mock_session.execute.await_args.args[0])
        assert "to_tsquery('english'::regconfig, 'clara:*')" in sql
        assert "CAST(site.location AS TEXT) ILIKE '%clara%'" in sql
        assert "CAST(site.contact AS TEXT) ILIKE '%clara%'" in sql
