"""PostgreSQL adapters for the tenancy bounded context."""

from tenancy.infrastructure.membership_repository import MembershipRepository
from tenancy.infrastructure.tenant_repository import TenantRepository

__all__ = ["MembershipRepository", "TenantRepository"]
