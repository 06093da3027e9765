"""
Allocation entity models.

An allocation grants a tenant a share of an infrastructure provider's
capacity on a site. What is granted is described by its
``AllocationConstraint`` rows.
"""

import uuid
from enum import Enum
from typing import TYPE_CHECKING, Optional

from sqlmodel import Field, Relationship

from ..base import Base, SoftDeleteColumns

if TYPE_CHECKING:
    from .infrastructure_providers import InfrastructureProvider
    from .sites import Site
    from .tenants import Tenant


class AllocationStatus(str, Enum):
    """Lifecycle state of an allocation."""

    PENDING = "Pending"
    REGISTERED = "Registered"
    ERROR = "Error"
    DELETING = "Deleting"


class AllocationBase(Base):
    """Base fields for allocation."""

    name: str = Field(index=True)
    description: Optional[str] = Field(default=None)
    infrastructure_provider_id: uuid.UUID = Field(foreign_key="infrastructure_provider.id", index=True)
    tenant_id: uuid.UUID = Field(foreign_key="tenant.id", index=True)
    site_id: uuid.UUID = Field(foreign_key="site.id", index=True)
    status: str = Field(default=AllocationStatus.PENDING.value, index=True)


class Allocation(AllocationBase, SoftDeleteColumns, table=True):
    """Persistent allocation.

    Table: allocation
    """

    __tablename__ = "allocation"
    __table_args__ = ({"extend_existing": True},)

    infrastructure_provider: Optional["InfrastructureProvider"] = Relationship(
        sa_relationship_kwargs={"lazy": "raise"}
    )
    tenant: Optional["Tenant"] = Relationship(sa_relationship_kwargs={"lazy": "raise"})
    site: Optional["Site"] = Relationship(sa_relationship_kwargs={"lazy": "raise"})

    def __repr__(self) -> str:
        return f"Allocation(id={self.id}, name={self.name}, status={self.status})"


ALLOCATION_ORDER_BY_FIELDS = ("name", "status", "created", "updated")
ALLOCATION_RELATIONS = ("infrastructure_provider", "tenant", "site")
