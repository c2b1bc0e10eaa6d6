"""Domain probes for tenancy repository operations.

Following Domain-Oriented Observability patterns, these probes capture
the outcome of tenant and membership reads.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from infrastructure.observability.context import ObservationContext


class TenantRepositoryProbe(Protocol):
    """Domain probe for tenant repository operations."""

    def tenant_retrieved(self, tenant_id: str, slug: str) -> None:
        """Record that an active tenant was retrieved."""
        ...

    def active_tenant_not_found(self, slug: str) -> None:
        """Record that no active tenant has the slug."""
        ...

    def with_context(self, context: ObservationContext) -> TenantRepositoryProbe:
        """Create a new probe with observation context bound."""
        ...


class MembershipRepositoryProbe(Protocol):
    """Domain probe for membership repository operations."""

    def membership_retrieved(self, tenant_id: str, user_id: str, role: str) -> None:
        """Record that a caller's membership was retrieved."""
        ...

    def membership_not_found(self, tenant_id: str, user_id: str) -> None:
        """Record that the caller has no membership in the tenant."""
        ...

    def with_context(self, context: ObservationContext) -> MembershipRepositoryProbe:
        """Create a new probe with observation context bound."""
        ...


class _StructlogProbe:
    """Shared logger and context handling for the default probes."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        """Get context metadata as kwargs for logging."""
        if self._context is None:
            return {}
        return self._context.as_dict()

    def _log(self, level: str, event: str, **fields: Any) -> None:
        kwargs = self._get_context_kwargs()
        kwargs.update(fields)
        getattr(self._logger, level)(event, **kwargs)


class DefaultTenantRepositoryProbe(_StructlogProbe):
    """Default implementation of TenantRepositoryProbe using structlog."""

    def with_context(self, context: ObservationContext) -> DefaultTenantRepositoryProbe:
        """Create a new probe with observation context bound."""
        return DefaultTenantRepositoryProbe(logger=self._logger, context=context)

    def tenant_retrieved(self, tenant_id: str, slug: str) -> None:
        """Record that an active tenant was retrieved."""
        self._log("debug", "tenant_retrieved", tenant_id=tenant_id, slug=slug)

    def active_tenant_not_found(self, slug: str) -> None:
        """Record that no active tenant has the slug."""
        self._log("debug", "active_tenant_not_found", slug=slug)


class DefaultMembershipRepositoryProbe(_StructlogProbe):
    """Default implementation of MembershipRepositoryProbe using structlog."""

    def with_context(
        self, context: ObservationContext
    ) -> DefaultMembershipRepositoryProbe:
        """Create a new probe with observation context bound."""
        return DefaultMembershipRepositoryProbe(logger=self._logger, context=context)

    def membership_retrieved(self, tenant_id: str, user_id: str, role: str) -> None:
        """Record that a caller's membership was retrieved."""
        self._log(
            "debug",
            "membership_retrieved",
            tenant_id=tenant_id,
            user_id=user_id,
            role=role,
        )

    def membership_not_found(self, tenant_id: str, user_id: str) -> None:
        """Record that the caller has no membership in the tenant."""
        self._log(
            "debug", "membership_not_found", tenant_id=tenant_id, user_id=user_id
        )
