"""HTTP presentation layer for the tenancy bounded context."""

from tenancy.presentation.middleware import (
    StarletteRequestContext,
    StarletteTenantRequest,
    TenantGateMiddleware,
)

__all__ = [
    "StarletteRequestContext",
    "StarletteTenantRequest",
    "TenantGateMiddleware",
]
