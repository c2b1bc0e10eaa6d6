"""Tenant and Membership records as seen by the tenancy gate.

Both are owned by the store's persistence layer; this context only reads
them, so they are plain immutable records without behavior for mutation.
"""

from __future__ import annotations

from dataclasses import dataclass

from tenancy.domain.value_objects import TenantId


@dataclass(frozen=True)
class Tenant:
    """A storefront tenant.

    Attributes:
        id: Unique tenant identifier.
        slug: Unique, lowercase, URL-safe name used to address the tenant.
        is_active: Inactive tenants are never resolved.
        plan: Plan tier (e.g. "free", "pro").
    """

    id: TenantId
    slug: str
    is_active: bool
    plan: str


@dataclass(frozen=True)
class Membership:
    """Link between a caller identity and a tenant, carrying a role."""

    tenant_id: TenantId
    user_id: str
    role: str
