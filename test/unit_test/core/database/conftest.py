"""Test configuration for database unit tests.

This module provides common fixtures for testing the data access layer with
in-memory SQLite and with a mocked ``AsyncSession``.
"""

from __future__ import annotations

import uuid
from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from baremetal_db.core.database.entities.infrastructure_providers import InfrastructureProvider
from baremetal_db.core.database.entities.sites import Site
from baremetal_db.core.database.entities.tenants import Tenant
from baremetal_db.core.database.utils import create_all, create_engine, create_sessionmaker


@pytest.fixture(scope="function")
async def in_memory_engine() -> AsyncGenerator:
    """Create in-memory SQLite engine with every table created."""
    engine = create_engine("sqlite+aiosqlite:///:memory:")
    await create_all(engine)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture(scope="function")
async def in_memory_session(in_memory_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create in-memory SQLite session for testing."""
    async with create_sessionmaker(in_memory_engine)() as session:
        yield session


@pytest.fixture
def mock_session():
    """Create a mock async session whose ``execute`` returns ``mock_session.result``."""
    session = AsyncMock()
    session.add = MagicMock()
    session.add_all = MagicMock()
    session.commit = AsyncMock()
    session.flush = AsyncMock()
    session.refresh = AsyncMock()

    result = MagicMock()
    result.scalar_one_or_none = MagicMock(return_value=None)
    result.scalar_one = MagicMock(return_value=0)
    result.scalars = MagicMock()
    result.scalars.return_value.all = MagicMock(return_value=[])
    result.all = MagicMock(return_value=[])
    session.execute = AsyncMock(return_value=result)
    session.result = result
    return session


@pytest.fixture(scope="function")
async def provider(in_memory_session) -> InfrastructureProvider:
    """A persisted infrastructure provider."""
    entity = InfrastructureProvider(name="provider-a", display_name="Provider A", org="provider-org")
    in_memory_session.add(entity)
    await in_memory_session.commit()
    return entity


@pytest.fixture(scope="function")
async def tenant(in_memory_session) -> Tenant:
    """A persisted tenant."""
    entity = Tenant(name="tenant-a", org="tenant-org", config={"enable_ssh_access": True})
    in_memory_session.add(entity)
    await in_memory_session.commit()
    return entity


@pytest.fixture(scope="function")
async def site(in_memory_session, provider) -> Site:
    """A persisted site owned by ``provider``."""
    entity = Site(
        name="site-a",
        display_name="Site A",
        org=provider.org,
        infrastructure_provider_id=provider.id,
        config={"native_networking": True, "network_security_group": False, "nvlink_partition": False},
        location={"city": "Santa Clara", "state": "CA", "country": "USA"},
        contact={"email": "ops@example.com"},
    )
    in_memory_session.add(entity)
    await in_memory_session.commit()
    return entity


@pytest.fixture(scope="function")
def sample_site_data() -> dict:
    """Sample site create data for testing."""
    return {
        "name": "sjc-1",
        "display_name": "San Jose 1",
        "description": "Primary west coast site",
        "org": "provider-org",
        "infrastructure_provider_id": uuid.uuid4(),
        "serial_console_hostname": "console.sjc-1.example.com",
        "is_serial_console_enabled": True,
        "serial_console_idle_timeout": 300,
        "serial_console_max_session_length": 3600,
    }
