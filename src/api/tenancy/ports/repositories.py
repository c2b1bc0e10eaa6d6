"""Repository protocols (ports) for the tenancy bounded context.

Both repositories are read-only: tenants and memberships are managed
elsewhere, and the gate must never write them.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from tenancy.domain.aggregates import Membership, Tenant
from tenancy.domain.value_objects import TenantId


@runtime_checkable
class ITenantRepository(Protocol):
    """Read access to tenant records."""

    async def get_active_by_slug(self, slug: str) -> Tenant | None:
        """Retrieve the active tenant with the given slug.

        Args:
            slug: Lower-cased tenant slug

        Returns:
            The Tenant, or None if no tenant has this slug or it is inactive
        """
        ...


@runtime_checkable
class IMembershipRepository(Protocol):
    """Read access to tenant memberships."""

    async def get_for_user(
        self, tenant_id: TenantId, user_id: str
    ) -> Membership | None:
        """Retrieve the membership linking a caller to a tenant.

        Args:
            tenant_id: The tenant to look in
            user_id: The caller's identifier

        Returns:
            The Membership, or None if the caller is not a member
        """
        ...
