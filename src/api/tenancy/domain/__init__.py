"""Tenancy domain model: read-only tenant and membership records."""

from tenancy.domain.aggregates import Membership, Tenant
from tenancy.domain.value_objects import ResolvedSlug, SlugSource, TenantId

__all__ = [
    "Membership",
    "ResolvedSlug",
    "SlugSource",
    "Tenant",
    "TenantId",
]
