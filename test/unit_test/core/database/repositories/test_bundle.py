"""Unit tests for the repository bundle."""

from __future__ import annotations

import dataclasses

import pytest

from baremetal_db.core.database.repositories.bundle import (
    SqlRepoBundle,
    build_sql_repos,
    build_sql_repos_from_session,
)
from baremetal_db.core.database.repositories.sites import SiteRepository
from baremetal_db.core.database.schemas.tenants import TenantCreateInput
from baremetal_db.core.database.transaction import begin_transaction
from baremetal_db.core.database.utils import create_sessionmaker


class TestBuildSqlRepos:
    def test_every_repository_shares_the_session(self, mock_session):
        bundle = build_sql_repos_from_session(session=mock_session, auto_commit=False)

        repositories = [
            getattr(bundle, field.name) for field in dataclasses.fields(SqlRepoBundle) if field.name != "session"
        ]
        assert len(repositories) == 13
        assert all(repository.session is mock_session for repository in repositories)
        assert all(repository.auto_commit is False for repository in repositories)
        assert isinstance(bundle.sites, SiteRepository)

    def test_bundle_is_frozen(self, mock_session):
        bundle = build_sql_repos_from_session(session=mock_session)

        with pytest.raises(dataclasses.FrozenInstanceError):
            bundle.sites = None

    async def test_build_from_factory(self, in_memory_engine):
        bundle = build_sql_repos(session_factory=create_sessionmaker(in_memory_engine))
        try:
            tenant = await bundle.tenants.create(TenantCreateInput(name="tenant-a", org="tenant-org"))
            assert (await bundle.tenants.get_by_id(tenant.id)).org == "tenant-org"
        finally:
            await bundle.session.close()

    async def test_repositories_inside_one_transaction(self, in_memory_engine):
        session_factory = create_sessionmaker(in_memory_engine)

        with pytest.raises(RuntimeError):
            async with begin_transaction(session_factory) as session:
                bundle = build_sql_repos_from_session(session=session, auto_commit=False)
                await bundle.tenants.create(TenantCreateInput(name="tenant-a", org="tenant-org"))
                raise RuntimeError("abort")

        async with session_factory() as session:
            bundle = build_sql_repos_from_session(session=session)
            assert await bundle.tenants.get_all_by_org("tenant-org") == []

    async def test_commit_on_success(self, in_memory_engine):
        session_factory = create_sessionmaker(in_memory_engine)

        async with begin_transaction(session_factory) as session:
            bundle = build_sql_repos_from_session(session=session, auto_commit=False)
            tenant = await bundle.tenants.create(TenantCreateInput(name="tenant-a", org="tenant-org"))

        async with session_factory() as session:
            fetched = await build_sql_repos_from_session(session=session).tenants.get_by_id(tenant.id)
            assert fetched.name == "tenant-a"
