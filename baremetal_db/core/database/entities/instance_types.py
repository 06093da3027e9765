"""
Instance type entity models.

An instance type is a named machine shape offered by an infrastructure
provider, optionally pinned to the site whose machines back it.
"""

import uuid
from enum import Enum
from typing import TYPE_CHECKING, Dict, Optional

from sqlmodel import Field, Relationship

from ..base import Base, JSONType, SoftDeleteColumns

if TYPE_CHECKING:
    from .infrastructure_providers import InfrastructureProvider
    from .sites import Site


class InstanceTypeStatus(str, Enum):
    """Lifecycle state of an instance type."""

    PENDING = "Pending"
    READY = "Ready"
    ERROR = "Error"
    DELETING = "Deleting"


class InstanceTypeBase(Base):
    """Base fields for instance type."""

    name: str = Field(index=True)
    display_name: Optional[str] = Field(default=None)
    description: Optional[str] = Field(default=None)
    controller_machine_type: Optional[str] = Field(default=None, description="Machine type known to the site")
    infrastructure_provider_id: uuid.UUID = Field(foreign_key="infrastructure_provider.id", index=True)
    site_id: Optional[uuid.UUID] = Field(default=None, foreign_key="site.id", index=True)
    labels: Optional[Dict[str, str]] = Field(default=None, sa_type=JSONType)
    status: str = Field(default=InstanceTypeStatus.PENDING.value, index=True)


class InstanceType(InstanceTypeBase, SoftDeleteColumns, table=True):
    """Persistent instance type.

    Table: instance_type
    """

    __tablename__ = "instance_type"
    __table_args__ = ({"extend_existing": True},)

    infrastructure_provider: Optional["InfrastructureProvider"] = Relationship(
        sa_relationship_kwargs={"lazy": "raise"}
    )
    site: Optional["Site"] = Relationship(sa_relationship_kwargs={"lazy": "raise"})

    def __repr__(self) -> str:
        return f"InstanceType(id={self.id}, name={self.name}, status={self.status})"


INSTANCE_TYPE_ORDER_BY_FIELDS = ("name", "display_name", "status", "created", "updated")
INSTANCE_TYPE_RELATIONS = ("infrastructure_provider", "site")
