"""Typed request capabilities consumed by the tenant gate.

The gate never touches framework request objects. Adapters (see
``tenancy.presentation.middleware``) expose just what it needs: header
lookup, host, path, and the request-scoped context.
"""

from __future__ import annotations

from typing import Protocol

from shared_kernel.middleware.tenant_context import TenantContext


class RequestContext(Protocol):
    """Request-scoped values shared between processing stages."""

    @property
    def user_id(self) -> str | None:
        """Caller identifier set by an earlier authentication stage."""
        ...

    def bind_tenant(self, context: TenantContext) -> None:
        """Attach the resolved tenant id, plan and role to the request."""
        ...


class TenantRequest(Protocol):
    """The parts of an HTTP request that tenant resolution reads."""

    @property
    def host(self) -> str:
        """Value of the Host header, or an empty string."""
        ...

    @property
    def path(self) -> str:
        """Request path without the query string."""
        ...

    @property
    def context(self) -> RequestContext:
        """Request-scoped context."""
        ...

    def header(self, name: str) -> str | None:
        """Look up a header by case-insensitive name."""
        ...
