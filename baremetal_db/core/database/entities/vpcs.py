"""
VPC entity models.

A VPC is a tenant's isolated virtual network on a single site.
"""

import uuid
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Optional

from sqlmodel import Field, Relationship

from ..base import Base, JSONType, SoftDeleteColumns

if TYPE_CHECKING:
    from .infrastructure_providers import InfrastructureProvider
    from .sites import Site
    from .tenants import Tenant


class VpcStatus(str, Enum):
    """Lifecycle state of a VPC."""

    PENDING = "Pending"
    PROVISIONING = "Provisioning"
    READY = "Ready"
    ERROR = "Error"
    DELETING = "Deleting"


class NetworkVirtualizationType(str, Enum):
    """How a VPC is virtualized on the site fabric."""

    ETHERNET_VIRTUALIZER = "ETHERNET_VIRTUALIZER"
    FNN = "FNN"


class VpcBase(Base):
    """Base fields for VPC."""

    name: str = Field(index=True)
    description: Optional[str] = Field(default=None)
    org: str = Field(index=True)
    infrastructure_provider_id: uuid.UUID = Field(foreign_key="infrastructure_provider.id", index=True)
    tenant_id: uuid.UUID = Field(foreign_key="tenant.id", index=True)
    site_id: uuid.UUID = Field(foreign_key="site.id", index=True)
    nvlink_logical_partition_id: Optional[uuid.UUID] = Field(default=None)
    network_virtualization_type: Optional[str] = Field(default=None)
    controller_vpc_id: Optional[uuid.UUID] = Field(default=None, description="ID assigned by the site controller")
    network_security_group_id: Optional[str] = Field(default=None, index=True)
    network_security_group_propagation_details: Optional[Dict[str, Any]] = Field(default=None, sa_type=JSONType)
    labels: Optional[Dict[str, str]] = Field(default=None, sa_type=JSONType)
    status: str = Field(default=VpcStatus.PENDING.value, index=True)
    is_missing_on_site: bool = Field(default=False)


class Vpc(VpcBase, SoftDeleteColumns, table=True):
    """Persistent VPC.

    Table: vpc
    """

    __tablename__ = "vpc"
    __table_args__ = ({"extend_existing": True},)

    infrastructure_provider: Optional["InfrastructureProvider"] = Relationship(
        sa_relationship_kwargs={"lazy": "raise"}
    )
    site: Optional["Site"] = Relationship(sa_relationship_kwargs={"lazy": "raise"})
    tenant: Optional["Tenant"] = Relationship(sa_relationship_kwargs={"lazy": "raise"})

    def __repr__(self) -> str:
        return f"Vpc(id={self.id}, name={self.name}, status={self.status})"


VPC_ORDER_BY_FIELDS = ("name", "status", "created", "updated")
VPC_RELATIONS = ("infrastructure_provider", "site", "tenant")
