"""
Database entity models.

This package contains all database entity models, one module per table.
Importing the package registers every table on ``Base.metadata`` and lets
SQLAlchemy resolve the string targets of every relationship.

Modules:
- infrastructure_providers: Providers operating sites
- sites: Datacenter sites with their config, location and contact
- tenants: Tenant organizations
- vpcs: Tenant virtual networks
- ip_blocks: Provider and derived tenant prefixes
- instance_types: Machine shapes offered by providers
- infiniband_partitions: Tenant InfiniBand partitions
- operating_systems: Installable operating systems
- operating_system_site_associations: Operating system availability per site
- expected_machines: Announced but not yet discovered machines
- allocations: Capacity granted to tenants
- allocation_constraints: Resource terms of an allocation
- tenant_sites: Tenant access to sites
"""

from . import (
    allocation_constraints,
    allocations,
    expected_machines,
    infiniband_partitions,
    infrastructure_providers,
    instance_types,
    ip_blocks,
    operating_system_site_associations,
    operating_systems,
    sites,
    tenant_sites,
    tenants,
    vpcs,
)

__all__ = [
    "allocation_constraints",
    "allocations",
    "expected_machines",
    "infiniband_partitions",
    "infrastructure_providers",
    "instance_types",
    "ip_blocks",
    "operating_system_site_associations",
    "operating_systems",
    "sites",
    "tenant_sites",
    "tenants",
    "vpcs",
]
