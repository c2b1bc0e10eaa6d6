"""Dependency wiring for the tenancy bounded context.

Builds the tenant gate for the middleware and provides FastAPI
dependencies that route handlers use to read the resolved tenant.

Usage in FastAPI routes:
    @router.get("/orders")
    async def list_orders(
        tenant: Annotated[TenantContext, Depends(get_tenant_context)],
    ):
        # tenant.tenant_id and tenant.plan are always set
        ...

    @router.delete("/products/{product_id}")
    async def delete_product(
        tenant: Annotated[TenantContext, Depends(require_tenant_role("owner"))],
    ):
        ...
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager

from fastapi import HTTPException, Request, status

from infrastructure.database.dependencies import read_session_scope
from infrastructure.settings import TenancySettings, get_tenancy_settings
from shared_kernel.middleware.tenant_context import TenantContext
from tenancy.application.slug_resolution import SlugResolver
from tenancy.application.tenant_gate import TenantGate
from tenancy.infrastructure.membership_repository import MembershipRepository
from tenancy.infrastructure.tenant_repository import TenantRepository


def build_slug_resolver(settings: TenancySettings) -> SlugResolver:
    """Create a SlugResolver configured from tenancy settings."""
    return SlugResolver(
        header_name=settings.header_name,
        reserved_subdomains=settings.reserved_subdomains,
        path_prefixes=settings.path_prefixes,
    )


@asynccontextmanager
async def open_tenant_gate() -> AsyncIterator[TenantGate]:
    """Open a TenantGate backed by a read session for one request.

    The session is closed when the ``async with`` block exits.
    """
    resolver = build_slug_resolver(get_tenancy_settings())
    async with read_session_scope() as session:
        yield TenantGate(
            tenant_repository=TenantRepository(session=session),
            membership_repository=MembershipRepository(session=session),
            resolver=resolver,
        )


def get_tenant_context(request: Request) -> TenantContext:
    """Get the tenant context bound by TenantGateMiddleware.

    Raises:
        HTTPException 500: If the route is not behind the tenant gate.
    """
    context = getattr(request.state, "tenant_context", None)
    if not isinstance(context, TenantContext):
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Tenant context is not available for this route",
        )
    return context


def require_tenant_role(*roles: str) -> Callable[[Request], TenantContext]:
    """Create a dependency that requires the caller to hold one of ``roles``.

    Anonymous requests (no caller identity, so no role) are rejected too.

    Raises:
        ValueError: If no roles are given.
    """
    if not roles:
        raise ValueError("require_tenant_role needs at least one role")
    allowed = frozenset(roles)

    def dependency(request: Request) -> TenantContext:
        context = get_tenant_context(request)
        if context.role not in allowed:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Insufficient role for this store",
            )
        return context

    return dependency
