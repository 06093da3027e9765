"""
Allocation constraint entity models.

A constraint states how much of one resource (an instance type or an IP
block) an allocation grants, and on which terms. For IP blocks the derived
block carved out for the tenant is recorded in ``derived_resource_id``.
"""

import uuid
from enum import Enum
from typing import TYPE_CHECKING, Optional

from sqlmodel import Field, Relationship

from ..base import Base, SoftDeleteColumns

if TYPE_CHECKING:
    from .allocations import Allocation


class AllocationResourceType(str, Enum):
    """Kind of resource a constraint applies to."""

    INSTANCE_TYPE = "InstanceType"
    IP_BLOCK = "IPBlock"


class AllocationConstraintType(str, Enum):
    """Terms on which the resource is granted."""

    RESERVED = "Reserved"
    ON_DEMAND = "OnDemand"
    PREEMPTIBLE = "Preemptible"


class AllocationConstraintBase(Base):
    """Base fields for allocation constraint."""

    allocation_id: uuid.UUID = Field(foreign_key="allocation.id", index=True)
    resource_type: str = Field(index=True, description="InstanceType or IPBlock")
    resource_type_id: uuid.UUID = Field(index=True, description="ID of the instance type or IP block")
    constraint_type: str = Field(description="Reserved, OnDemand or Preemptible")
    constraint_value: int = Field(description="Instance count, or prefix length for IP blocks")
    derived_resource_id: Optional[uuid.UUID] = Field(default=None, index=True)


class AllocationConstraint(AllocationConstraintBase, SoftDeleteColumns, table=True):
    """Persistent allocation constraint.

    Table: allocation_constraint
    """

    __tablename__ = "allocation_constraint"
    __table_args__ = ({"extend_existing": True},)

    allocation: Optional["Allocation"] = Relationship(sa_relationship_kwargs={"lazy": "raise"})

    def __repr__(self) -> str:
        return (
            f"AllocationConstraint(id={self.id}, resource_type={self.resource_type}, "
            f"constraint_type={self.constraint_type}, value={self.constraint_value})"
        )


ALLOCATION_CONSTRAINT_ORDER_BY_FIELDS = ("resource_type", "created", "updated")
ALLOCATION_CONSTRAINT_RELATIONS = ("allocation",)
