"""Observability for tenancy repositories."""

from tenancy.infrastructure.observability.repository_probe import (
    DefaultMembershipRepositoryProbe,
    DefaultTenantRepositoryProbe,
    MembershipRepositoryProbe,
    TenantRepositoryProbe,
)

__all__ = [
    "DefaultMembershipRepositoryProbe",
    "DefaultTenantRepositoryProbe",
    "MembershipRepositoryProbe",
    "TenantRepositoryProbe",
]
