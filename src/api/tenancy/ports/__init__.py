"""Ports (interfaces) for the tenancy bounded context."""

from tenancy.ports.exceptions import (
    TenantAccessDeniedError,
    TenantGateError,
    TenantNotFoundError,
    TenantNotResolvedError,
)
from tenancy.ports.repositories import IMembershipRepository, ITenantRepository
from tenancy.ports.request import RequestContext, TenantRequest

__all__ = [
    "IMembershipRepository",
    "ITenantRepository",
    "RequestContext",
    "TenantAccessDeniedError",
    "TenantGateError",
    "TenantNotFoundError",
    "TenantNotResolvedError",
    "TenantRequest",
]
