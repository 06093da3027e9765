"""
Database repository layer using SQLModel.

This package contains all repository classes, one module per table. Each
module provides async data access operations for its SQLModel entity.

All repositories are built on SQLModel and share:
- soft-delete aware reads (expected machines are hard-deleted)
- ``(rows, total)`` listings through the paginator
- full-text plus ILIKE search through ``search_query`` filters
- commit or flush only mutations, selected with ``auto_commit``

Modules:
- base: BaseRepository interface and QueryBuilder utilities
- bundle: SqlRepoBundle and its builders
- one module per entity, named after the entity module
"""

from . import (
    allocation_constraints,
    allocations,
    bundle,
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
    "bundle",
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
