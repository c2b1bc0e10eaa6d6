"""Domain probe for tenant context resolution.

Following Domain-Oriented Observability patterns, this probe captures
domain-significant events of the tenant resolution gate: which source
produced the slug, rejected requests, and store failures.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from infrastructure.observability.context import ObservationContext


class TenantContextProbe(Protocol):
    """Domain probe for tenant context resolution operations."""

    def tenant_resolved(
        self,
        tenant_id: str,
        slug: str,
        source: str,
        user_id: str | None,
        role: str | None,
    ) -> None:
        """Record that a request was bound to a tenant."""
        ...

    def tenant_slug_missing(self, host: str, path: str) -> None:
        """Record that no slug could be extracted from the request."""
        ...

    def tenant_not_found(self, slug: str, source: str) -> None:
        """Record that no active tenant matched the slug."""
        ...

    def tenant_access_denied(self, tenant_id: str, user_id: str) -> None:
        """Record that the caller is not a member of the tenant."""
        ...

    def tenant_lookup_failed(self, slug: str, error: Exception) -> None:
        """Record that the store failed while resolving the tenant."""
        ...

    def with_context(self, context: ObservationContext) -> TenantContextProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultTenantContextProbe:
    """Default implementation of TenantContextProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultTenantContextProbe:
        """Create a new probe with observation context bound."""
        return DefaultTenantContextProbe(logger=self._logger, context=context)

    def tenant_resolved(
        self,
        tenant_id: str,
        slug: str,
        source: str,
        user_id: str | None,
        role: str | None,
    ) -> None:
        """Record that a request was bound to a tenant."""
        kwargs = self._get_context_kwargs()
        kwargs.update(tenant_id=tenant_id, slug=slug, source=source)
        if user_id is not None:
            kwargs.update(user_id=user_id, role=role)
        self._logger.debug("tenant_context_resolved", **kwargs)

    def tenant_slug_missing(self, host: str, path: str) -> None:
        """Record that no slug could be extracted from the request."""
        self._logger.info(
            "tenant_context_slug_missing",
            host=host,
            path=path,
            **self._get_context_kwargs(),
        )

    def tenant_not_found(self, slug: str, source: str) -> None:
        """Record that no active tenant matched the slug."""
        self._logger.info(
            "tenant_context_tenant_not_found",
            slug=slug,
            source=source,
            **self._get_context_kwargs(),
        )

    def tenant_access_denied(self, tenant_id: str, user_id: str) -> None:
        """Record that the caller is not a member of the tenant."""
        kwargs = self._get_context_kwargs()
        kwargs.update(tenant_id=tenant_id, user_id=user_id)
        self._logger.warning("tenant_context_access_denied", **kwargs)

    def tenant_lookup_failed(self, slug: str, error: Exception) -> None:
        """Record that the store failed while resolving the tenant."""
        self._logger.error(
            "tenant_context_lookup_failed",
            slug=slug,
            error=str(error),
            error_type=type(error).__name__,
            **self._get_context_kwargs(),
        )
