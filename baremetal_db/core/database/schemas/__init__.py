"""
Input schema models for repository operations.

This package contains Pydantic-based input models, one module per table:
``<Entity>CreateInput``, ``<Entity>UpdateInput``, ``<Entity>ClearInput`` and
``<Entity>FilterInput``. They are separate from the entity models so callers
never construct table rows themselves.
"""

from . import (
    allocation_constraints,
    allocations,
    base,
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
    "base",
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
