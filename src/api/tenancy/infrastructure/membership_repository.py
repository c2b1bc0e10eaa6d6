"""PostgreSQL implementation of IMembershipRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tenancy.domain.aggregates import Membership
from tenancy.domain.value_objects import TenantId
from tenancy.infrastructure.models import MembershipModel
from tenancy.infrastructure.observability import (
    DefaultMembershipRepositoryProbe,
    MembershipRepositoryProbe,
)
from tenancy.ports.repositories import IMembershipRepository


class MembershipRepository(IMembershipRepository):
    """Repository reading tenant memberships from PostgreSQL."""

    def __init__(
        self,
        session: AsyncSession,
        probe: MembershipRepositoryProbe | None = None,
    ) -> None:
        self._session = session
        self._probe = probe or DefaultMembershipRepositoryProbe()

    async def get_for_user(
        self, tenant_id: TenantId, user_id: str
    ) -> Membership | None:
        """Fetch the membership linking a caller to a tenant.

        Args:
            tenant_id: The tenant to look in
            user_id: The caller's identifier

        Returns:
            The Membership, or None if the caller is not a member
        """
        stmt = select(MembershipModel).where(
            MembershipModel.tenant_id == tenant_id.value,
            MembershipModel.user_id == user_id,
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            self._probe.membership_not_found(tenant_id.value, user_id)
            return None

        membership = Membership(
            tenant_id=TenantId(value=model.tenant_id),
            user_id=model.user_id,
            role=model.role,
        )

        self._probe.membership_retrieved(
            membership.tenant_id.value, membership.user_id, membership.role
        )
        return membership
