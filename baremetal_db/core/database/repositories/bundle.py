"""
Repository bundle for dependency injection.

This module provides a convenience bundle of all repository instances
sharing one session, so services can run several repositories inside a
single transaction.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from .allocation_constraints import AllocationConstraintRepository
from .allocations import AllocationRepository
from .expected_machines import ExpectedMachineRepository
from .infiniband_partitions import InfiniBandPartitionRepository
from .infrastructure_providers import InfrastructureProviderRepository
from .instance_types import InstanceTypeRepository
from .ip_blocks import IPBlockRepository
from .operating_system_site_associations import OperatingSystemSiteAssociationRepository
from .operating_systems import OperatingSystemRepository
from .sites import SiteRepository
from .tenant_sites import TenantSiteRepository
from .tenants import TenantRepository
from .vpcs import VpcRepository


@dataclass(frozen=True)
class SqlRepoBundle:
    """Convenience bundle of all SQL repositories for dependency injection."""

    session: AsyncSession
    infrastructure_providers: InfrastructureProviderRepository
    sites: SiteRepository
    tenants: TenantRepository
    tenant_sites: TenantSiteRepository
    vpcs: VpcRepository
    ip_blocks: IPBlockRepository
    instance_types: InstanceTypeRepository
    infiniband_partitions: InfiniBandPartitionRepository
    operating_systems: OperatingSystemRepository
    operating_system_site_associations: OperatingSystemSiteAssociationRepository
    expected_machines: ExpectedMachineRepository
    allocations: AllocationRepository
    allocation_constraints: AllocationConstraintRepository


def build_sql_repos_from_session(*, session: AsyncSession, auto_commit: bool = True) -> SqlRepoBundle:
    """Build a SqlRepoBundle from an existing session.

    Args:
        session: Existing async session
        auto_commit: Commit after each mutation. Pass False when the caller
            manages the transaction, e.g. inside ``begin_transaction``

    Returns:
        Bundle containing all repository instances
    """
    return SqlRepoBundle(
        session=session,
        infrastructure_providers=InfrastructureProviderRepository(session, auto_commit=auto_commit),
        sites=SiteRepository(session, auto_commit=auto_commit),
        tenants=TenantRepository(session, auto_commit=auto_commit),
        tenant_sites=TenantSiteRepository(session, auto_commit=auto_commit),
        vpcs=VpcRepository(session, auto_commit=auto_commit),
        ip_blocks=IPBlockRepository(session, auto_commit=auto_commit),
        instance_types=InstanceTypeRepository(session, auto_commit=auto_commit),
        infiniband_partitions=InfiniBandPartitionRepository(session, auto_commit=auto_commit),
        operating_systems=OperatingSystemRepository(session, auto_commit=auto_commit),
        operating_system_site_associations=OperatingSystemSiteAssociationRepository(
            session, auto_commit=auto_commit
        ),
        expected_machines=ExpectedMachineRepository(session, auto_commit=auto_commit),
        allocations=AllocationRepository(session, auto_commit=auto_commit),
        allocation_constraints=AllocationConstraintRepository(session, auto_commit=auto_commit),
    )


def build_sql_repos(*, session_factory: async_sessionmaker[AsyncSession]) -> SqlRepoBundle:
    """Build a SqlRepoBundle on a new session from a session factory.

    The caller owns the returned ``bundle.session`` and must close it.

    Args:
        session_factory: Async session factory for creating sessions

    Returns:
        Bundle containing all repository instances
    """
    return build_sql_repos_from_session(session=session_factory())
