"""
InfiniBand partition entity models.

A partition isolates a tenant's InfiniBand traffic on a site. Most of its
properties are reported back by the site controller after provisioning,
hence the many nullable columns.
"""

import uuid
from enum import Enum
from typing import TYPE_CHECKING, Dict, Optional

from sqlmodel import Field, Relationship

from ..base import Base, JSONType, SoftDeleteColumns

if TYPE_CHECKING:
    from .sites import Site
    from .tenants import Tenant


class InfiniBandPartitionStatus(str, Enum):
    """Lifecycle state of an InfiniBand partition."""

    PENDING = "Pending"
    PROVISIONING = "Provisioning"
    READY = "Ready"
    CONFIGURING = "Configuring"
    ERROR = "Error"
    DELETING = "Deleting"


class InfiniBandPartitionBase(Base):
    """Base fields for InfiniBand partition."""

    name: str = Field(index=True)
    description: Optional[str] = Field(default=None)
    org: str = Field(index=True, description="Tenant organization")
    site_id: uuid.UUID = Field(foreign_key="site.id", index=True)
    tenant_id: uuid.UUID = Field(foreign_key="tenant.id", index=True)
    controller_ib_partition_id: Optional[uuid.UUID] = Field(default=None)
    partition_key: Optional[str] = Field(default=None)
    partition_name: Optional[str] = Field(default=None)
    service_level: Optional[int] = Field(default=None)
    rate_limit: Optional[float] = Field(default=None)
    mtu: Optional[int] = Field(default=None)
    enable_sharp: Optional[bool] = Field(default=None)
    labels: Optional[Dict[str, str]] = Field(default=None, sa_type=JSONType)
    status: str = Field(default=InfiniBandPartitionStatus.PENDING.value, index=True)
    is_missing_on_site: bool = Field(default=False)


class InfiniBandPartition(InfiniBandPartitionBase, SoftDeleteColumns, table=True):
    """Persistent InfiniBand partition.

    Table: infiniband_partition
    """

    __tablename__ = "infiniband_partition"
    __table_args__ = ({"extend_existing": True},)

    site: Optional["Site"] = Relationship(sa_relationship_kwargs={"lazy": "raise"})
    tenant: Optional["Tenant"] = Relationship(sa_relationship_kwargs={"lazy": "raise"})

    def __repr__(self) -> str:
        return f"InfiniBandPartition(id={self.id}, name={self.name}, status={self.status})"


INFINIBAND_PARTITION_ORDER_BY_FIELDS = ("name", "status", "created", "updated")
INFINIBAND_PARTITION_RELATIONS = ("site", "tenant")
