"""PostgreSQL implementation of ITenantRepository.

Read-only: tenants are created and deactivated by the store's management
service, never by the request path.
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tenancy.domain.aggregates import Tenant
from tenancy.domain.value_objects import TenantId
from tenancy.infrastructure.models import TenantModel
from tenancy.infrastructure.observability import (
    DefaultTenantRepositoryProbe,
    TenantRepositoryProbe,
)
from tenancy.ports.repositories import ITenantRepository


class TenantRepository(ITenantRepository):
    """Repository reading tenant records from PostgreSQL."""

    def __init__(
        self,
        session: AsyncSession,
        probe: TenantRepositoryProbe | None = None,
    ) -> None:
        """Initialize repository with a database session.

        Args:
            session: AsyncSession used for the lookups
            probe: Optional domain probe for observability
        """
        self._session = session
        self._probe = probe or DefaultTenantRepositoryProbe()

    async def get_active_by_slug(self, slug: str) -> Tenant | None:
        """Fetch the active tenant with the given slug.

        Args:
            slug: Lower-cased tenant slug

        Returns:
            The Tenant, or None if missing or inactive
        """
        stmt = select(TenantModel).where(
            TenantModel.slug == slug,
            TenantModel.is_active.is_(True),
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            self._probe.active_tenant_not_found(slug)
            return None

        tenant = Tenant(
            id=TenantId(value=model.id),
            slug=model.slug,
            is_active=model.is_active,
            plan=model.plan,
        )

        self._probe.tenant_retrieved(tenant.id.value, tenant.slug)
        return tenant
