"""
Expected machine entity models.

An expected machine is a machine an infrastructure provider announced for a
site before it was discovered, identified by its BMC MAC address and chassis
serial number. Once discovered, ``machine_id`` links it to the real machine.

Expected machines are hard-deleted: the table has no ``deleted`` column.
"""

import uuid
from typing import TYPE_CHECKING, Dict, List, Optional

from sqlmodel import Field, Relationship

from ..base import AuditColumns, Base, JSONType, StringArrayType

if TYPE_CHECKING:
    from .sites import Site


class ExpectedMachineBase(Base):
    """Base fields for expected machine."""

    site_id: uuid.UUID = Field(foreign_key="site.id", index=True)
    bmc_mac_address: str = Field(index=True)
    chassis_serial_number: str = Field(index=True)
    sku_id: Optional[str] = Field(default=None, index=True)
    machine_id: Optional[str] = Field(default=None, index=True)
    fallback_dpu_serial_numbers: Optional[List[str]] = Field(default=None, sa_type=StringArrayType)
    labels: Optional[Dict[str, str]] = Field(default=None, sa_type=JSONType)


class ExpectedMachine(ExpectedMachineBase, AuditColumns, table=True):
    """Persistent expected machine.

    Table: expected_machine
    """

    __tablename__ = "expected_machine"
    __table_args__ = ({"extend_existing": True},)

    site: Optional["Site"] = Relationship(sa_relationship_kwargs={"lazy": "raise"})

    def __repr__(self) -> str:
        return f"ExpectedMachine(id={self.id}, bmc_mac_address={self.bmc_mac_address}, site_id={self.site_id})"


EXPECTED_MACHINE_ORDER_BY_FIELDS = ("id", "site_id", "bmc_mac_address", "chassis_serial_number", "created", "updated")
EXPECTED_MACHINE_RELATIONS = ("site",)
