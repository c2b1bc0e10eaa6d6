"""Tenant resolution gate.

Binds a request to an active tenant and, when the caller is already
authenticated, checks that the caller is a member of it. The gate is pure
per-request logic: all state it touches belongs to the request, and the
store is only read.
"""

from __future__ import annotations

from shared_kernel.middleware.observability.tenant_context_probe import (
    DefaultTenantContextProbe,
    TenantContextProbe,
)
from shared_kernel.middleware.tenant_context import TenantContext
from tenancy.application.slug_resolution import SlugResolver
from tenancy.domain.aggregates import Membership, Tenant
from tenancy.ports.exceptions import (
    TenantAccessDeniedError,
    TenantNotFoundError,
    TenantNotResolvedError,
)
from tenancy.ports.repositories import IMembershipRepository, ITenantRepository
from tenancy.ports.request import TenantRequest


class TenantGate:
    """Resolves the tenant for a request or rejects the request.

    Resolution runs in three steps, each of which can end the request:

    1. Extract a slug (header, then subdomain, then path). No slug raises
       TenantNotResolvedError.
    2. Load the active tenant with that slug. No such tenant raises
       TenantNotFoundError, whether it is missing or merely inactive.
    3. If an earlier stage attached a caller id, load the caller's
       membership. No membership raises TenantAccessDeniedError. Without a
       caller id this step is skipped and the request continues anonymously.

    Store failures are recorded and re-raised unchanged.
    """

    def __init__(
        self,
        tenant_repository: ITenantRepository,
        membership_repository: IMembershipRepository,
        resolver: SlugResolver | None = None,
        probe: TenantContextProbe | None = None,
    ) -> None:
        self._tenants = tenant_repository
        self._memberships = membership_repository
        self._resolver = resolver or SlugResolver()
        self._probe = probe or DefaultTenantContextProbe()

    async def resolve(self, request: TenantRequest) -> TenantContext:
        """Bind the request to its tenant.

        Args:
            request: The incoming request's tenant-relevant capabilities.

        Returns:
            The TenantContext that was bound to ``request.context``.

        Raises:
            TenantNotResolvedError: No slug in header, host or path.
            TenantNotFoundError: No active tenant with the slug.
            TenantAccessDeniedError: The caller is not a member.
        """
        resolved = self._resolver.resolve(request)
        if resolved is None:
            self._probe.tenant_slug_missing(host=request.host, path=request.path)
            raise TenantNotResolvedError()

        tenant = await self._load_tenant(resolved.slug)
        if tenant is None:
            self._probe.tenant_not_found(
                slug=resolved.slug, source=resolved.source.value
            )
            raise TenantNotFoundError()

        role: str | None = None
        user_id = request.context.user_id
        if user_id:
            membership = await self._load_membership(tenant, user_id)
            if membership is None:
                self._probe.tenant_access_denied(
                    tenant_id=tenant.id.value, user_id=user_id
                )
                raise TenantAccessDeniedError()
            role = membership.role

        context = TenantContext(
            tenant_id=tenant.id.value,
            slug=tenant.slug,
            plan=tenant.plan,
            source=resolved.source.value,
            role=role,
        )
        request.context.bind_tenant(context)

        self._probe.tenant_resolved(
            tenant_id=context.tenant_id,
            slug=context.slug,
            source=context.source,
            user_id=user_id or None,
            role=role,
        )
        return context

    async def _load_tenant(self, slug: str) -> Tenant | None:
        try:
            return await self._tenants.get_active_by_slug(slug)
        except Exception as e:
            self._probe.tenant_lookup_failed(slug=slug, error=e)
            raise

    async def _load_membership(self, tenant: Tenant, user_id: str) -> Membership | None:
        try:
            return await self._memberships.get_for_user(tenant.id, user_id)
        except Exception as e:
            self._probe.tenant_lookup_failed(slug=tenant.slug, error=e)
            raise
