"""Application layer of the tenancy bounded context."""

from tenancy.application.slug_resolution import SlugResolver
from tenancy.application.tenant_gate import TenantGate

__all__ = ["SlugResolver", "TenantGate"]
