"""Tenant context value object for a resolved storefront tenant.

This module contains the pure value object that represents the outcome of
tenant resolution for one request. It is framework-agnostic and contains
no business logic, making it safe for the shared kernel.

The resolution logic (slug extraction, tenant lookup, membership check)
lives in the tenancy bounded context.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class TenantContext:
    """Resolved tenant context for the current request.

    Attributes:
        tenant_id: Identifier of the active tenant that was resolved.
        slug: The slug the tenant was resolved from.
        plan: The tenant's plan tier.
        role: The caller's membership role, or None when the request
            carried no caller identity.
        source: Where the slug came from - 'header', 'subdomain' or 'path'.
    """

    tenant_id: str
    slug: str
    plan: str
    source: Literal["header", "subdomain", "path"]
    role: str | None = None

    @property
    def is_member_request(self) -> bool:
        """True when a caller identity was checked against the tenant."""
        return self.role is not None
