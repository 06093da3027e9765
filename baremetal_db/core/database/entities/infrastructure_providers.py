"""
Infrastructure provider entity models.

An infrastructure provider is the organization that owns and operates
sites full of bare-metal machines and leases capacity to tenants.
"""

from __future__ import annotations

from typing import Optional

from sqlmodel import Field

from ..base import Base, SoftDeleteColumns


class InfrastructureProviderBase(Base):
    """Base fields for infrastructure provider."""

    name: str = Field(index=True, description="Provider name, unique within an org")
    display_name: Optional[str] = Field(default=None, description="Human-readable provider name")
    org: str = Field(index=True, description="Owning organization")
    org_display_name: Optional[str] = Field(default=None, description="Human-readable organization name")


class InfrastructureProvider(InfrastructureProviderBase, SoftDeleteColumns, table=True):
    """Persistent infrastructure provider.

    Table: infrastructure_provider
    """

    __tablename__ = "infrastructure_provider"
    __table_args__ = ({"extend_existing": True},)

    def __repr__(self) -> str:
        return f"InfrastructureProvider(id={self.id}, name={self.name}, org={self.org})"


INFRASTRUCTURE_PROVIDER_RELATIONS: tuple = ()
