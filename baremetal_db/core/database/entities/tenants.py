"""
Tenant entity models.

A tenant is an organization that consumes capacity leased from one or more
infrastructure providers.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from sqlmodel import Field

from ..base import Base, JSONType, SoftDeleteColumns


class TenantConfig(Base):
    """Tenant level switches stored in ``tenant.config``."""

    enable_ssh_access: bool = Field(default=False, description="Tenant may use SSH access to instances")
    targeted_instance_creation: bool = Field(
        default=False, description="Tenant may create instances on specific machines"
    )


class TenantBase(Base):
    """Base fields for tenant."""

    name: str = Field(index=True, description="Tenant name")
    display_name: Optional[str] = Field(default=None, description="Human-readable tenant name")
    org: str = Field(index=True, description="Tenant organization")
    org_display_name: Optional[str] = Field(default=None, description="Human-readable organization name")
    config: Optional[Dict[str, Any]] = Field(default=None, sa_type=JSONType)


class Tenant(TenantBase, SoftDeleteColumns, table=True):
    """Persistent tenant.

    Table: tenant
    """

    __tablename__ = "tenant"
    __table_args__ = ({"extend_existing": True},)

    def get_config(self) -> TenantConfig:
        """Get tenant configuration, defaults when unset."""
        return TenantConfig.model_validate(self.config or {})

    def __repr__(self) -> str:
        return f"Tenant(id={self.id}, name={self.name}, org={self.org})"


TENANT_RELATIONS: tuple = ()
