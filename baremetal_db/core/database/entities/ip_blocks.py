"""
IP block entity models.

An IP block is a prefix owned by an infrastructure provider on a site. Blocks
without a tenant are the provider's originals; blocks carved out of them and
granted to a tenant are "derived" and carry the tenant's id.
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


class IPBlockStatus(str, Enum):
    """Lifecycle state of an IP block."""

    PENDING = "Pending"
    PROVISIONING = "Provisioning"
    READY = "Ready"
    ERROR = "Error"
    DELETING = "Deleting"


class IPBlockRoutingType(str, Enum):
    """Reachability of the addresses in a block."""

    PUBLIC = "Public"
    DATACENTER_ONLY = "DatacenterOnly"


class IPBlockProtocolVersion(str, Enum):
    """IP protocol version of the prefix."""

    IPV4 = "IPv4"
    IPV6 = "IPv6"


class IPBlockBase(Base):
    """Base fields for IP block."""

    name: str = Field(index=True)
    description: Optional[str] = Field(default=None)
    site_id: uuid.UUID = Field(foreign_key="site.id", index=True)
    infrastructure_provider_id: uuid.UUID = Field(foreign_key="infrastructure_provider.id", index=True)
    tenant_id: Optional[uuid.UUID] = Field(default=None, foreign_key="tenant.id", index=True)
    routing_type: str = Field(description="Public or DatacenterOnly")
    prefix: str = Field(description="Network address, e.g. 10.0.0.0")
    prefix_length: int = Field(ge=0, le=128)
    protocol_version: str = Field(description="IPv4 or IPv6")
    full_grant: bool = Field(default=False, description="Whole block granted to a single tenant")
    status: str = Field(default=IPBlockStatus.PENDING.value, index=True)


class IPBlock(IPBlockBase, SoftDeleteColumns, table=True):
    """Persistent IP block.

    Table: ip_block
    """

    __tablename__ = "ip_block"
    __table_args__ = ({"extend_existing": True},)

    site: Optional["Site"] = Relationship(sa_relationship_kwargs={"lazy": "raise"})
    infrastructure_provider: Optional["InfrastructureProvider"] = Relationship(
        sa_relationship_kwargs={"lazy": "raise"}
    )
    tenant: Optional["Tenant"] = Relationship(sa_relationship_kwargs={"lazy": "raise"})

    @property
    def cidr(self) -> str:
        """Prefix in CIDR notation."""
        return f"{self.prefix}/{self.prefix_length}"

    def __repr__(self) -> str:
        return f"IPBlock(id={self.id}, name={self.name}, cidr={self.cidr})"


IP_BLOCK_ORDER_BY_FIELDS = ("name", "prefix", "status", "created", "updated")
IP_BLOCK_RELATIONS = ("site", "infrastructure_provider", "tenant")
