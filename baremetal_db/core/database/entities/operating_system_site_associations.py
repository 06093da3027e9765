"""
Operating system / site association entity models.

Records that an operating system image has been (or is being) synced to a
site. Operating systems without any association are available everywhere.
"""

import uuid
from enum import Enum
from typing import TYPE_CHECKING, Optional

from sqlmodel import Field, Relationship

from ..base import Base, SoftDeleteColumns

if TYPE_CHECKING:
    from .operating_systems import OperatingSystem
    from .sites import Site


class OperatingSystemSiteAssociationStatus(str, Enum):
    """Sync state of an operating system on a site."""

    SYNCING = "Syncing"
    SYNCED = "Synced"
    ERROR = "Error"
    DELETING = "Deleting"


class OperatingSystemSiteAssociationBase(Base):
    """Base fields for operating system site association."""

    operating_system_id: uuid.UUID = Field(foreign_key="operating_system.id", index=True)
    site_id: uuid.UUID = Field(foreign_key="site.id", index=True)
    version: Optional[str] = Field(default=None)
    status: str = Field(default=OperatingSystemSiteAssociationStatus.SYNCING.value, index=True)
    is_missing_on_site: bool = Field(default=False)


class OperatingSystemSiteAssociation(OperatingSystemSiteAssociationBase, SoftDeleteColumns, table=True):
    """Persistent operating system site association.

    Table: operating_system_site_association
    """

    __tablename__ = "operating_system_site_association"
    __table_args__ = ({"extend_existing": True},)

    operating_system: Optional["OperatingSystem"] = Relationship(sa_relationship_kwargs={"lazy": "raise"})
    site: Optional["Site"] = Relationship(sa_relationship_kwargs={"lazy": "raise"})

    def __repr__(self) -> str:
        return (
            f"OperatingSystemSiteAssociation(id={self.id}, operating_system_id={self.operating_system_id}, "
            f"site_id={self.site_id})"
        )


OPERATING_SYSTEM_SITE_ASSOCIATION_ORDER_BY_FIELDS = ("status", "created", "updated")
OPERATING_SYSTEM_SITE_ASSOCIATION_RELATIONS = ("operating_system", "site")
