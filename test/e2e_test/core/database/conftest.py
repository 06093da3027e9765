"""Test configuration for database e2e tests.

This module provides fixtures for testing the data access layer against a
real PostgreSQL started with testcontainers. The tests are skipped unless
``DATABASE__ENABLE_POSTGRES_TESTS`` is enabled in ``test/.env``.
"""

from __future__ import annotations

from test.settings import test_settings
from typing import AsyncGenerator, Generator

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from testcontainers.postgres import PostgresContainer

from baremetal_db.core.database.entities.infrastructure_providers import InfrastructureProvider
from baremetal_db.core.database.entities.sites import Site
from baremetal_db.core.database.entities.tenants import Tenant
from baremetal_db.core.database.utils import create_all, create_engine, create_sessionmaker, drop_all


@pytest.fixture(scope="session")
def postgres_container() -> Generator[PostgresContainer, None, None]:
    """Start a PostgreSQL container for the test session."""
    if not test_settings.database.enable_postgres_tests:
        pytest.skip("PostgreSQL tests disabled, set DATABASE__ENABLE_POSTGRES_TESTS=true to run them")

    postgres_config = test_settings.database.postgres
    container = PostgresContainer(
        postgres_config.image,
        username=postgres_config.user,
        password=postgres_config.password,
        dbname=postgres_config.db,
    )
    container.start()
    try:
        yield container
    finally:
        container.stop()


@pytest.fixture
async def pg_engine(postgres_container) -> AsyncGenerator[AsyncEngine, None]:
    """Engine on an empty schema; every test starts from freshly created tables."""
    engine = create_engine(postgres_container.get_connection_url())
    await drop_all(engine)
    await create_all(engine)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
def pg_session_factory(pg_engine) -> async_sessionmaker[AsyncSession]:
    return create_sessionmaker(pg_engine)


@pytest.fixture
async def pg_session(pg_session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with pg_session_factory() as session:
        yield session


@pytest.fixture
async def provider(pg_session) -> InfrastructureProvider:
    entity = InfrastructureProvider(name="provider-a", org="provider-org")
    pg_session.add(entity)
    await pg_session.commit()
    return entity


@pytest.fixture
async def tenant(pg_session) -> Tenant:
    entity = Tenant(name="tenant-a", org="tenant-org")
    pg_session.add(entity)
    await pg_session.commit()
    return entity


@pytest.fixture
async def site(pg_session, provider) -> Site:
    entity = Site(
        name="sjc-west",
        display_name="San Jose West",
        org=provider.org,
        infrastructure_provider_id=provider.id,
        config={"native_networking": True, "network_security_group": False, "max_network_security_group_rule_count": 50},
        location={"city": "Santa Clara", "state": "CA", "country": "USA"},
        contact={"email": "ops@example.com"},
    )
    pg_session.add(entity)
    await pg_session.commit()
    return entity
