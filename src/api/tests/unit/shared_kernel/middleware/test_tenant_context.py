"""Unit tests for the TenantContext shared value object and TenantContextProbe.

Tests the pure value object from the shared kernel and the domain probe
protocol + default implementation.
"""

from __future__ import annotations

import typing
from typing import get_type_hints
from unittest.mock import MagicMock

import pytest

from infrastructure.observability.context import ObservationContext
from shared_kernel.middleware.observability.tenant_context_probe import (
    DefaultTenantContextProbe,
)
from shared_kernel.middleware.tenant_context import TenantContext


class TestTenantContext:
    """Tests for the TenantContext value object."""

    def test_tenant_context_is_immutable(self) -> None:
        """TenantContext should be a frozen dataclass."""
        context = TenantContext(
            tenant_id="01ARZ3NDEKTSV4RRFFQ69G5FAV",
            slug="acme",
            plan="pro",
            source="header",
        )
        with pytest.raises(AttributeError):
            context.plan = "free"  # type: ignore[misc]

    def test_role_defaults_to_none(self) -> None:
        """Anonymous resolutions carry no role."""
        context = TenantContext(
            tenant_id="01ARZ3NDEKTSV4RRFFQ69G5FAV",
            slug="acme",
            plan="pro",
            source="path",
        )
        assert context.role is None
        assert context.is_member_request is False

    def test_member_request_with_role(self) -> None:
        """A resolved role marks a member request."""
        context = TenantContext(
            tenant_id="t1", slug="acme", plan="pro", source="subdomain", role="owner"
        )
        assert context.is_member_request is True

    def test_tenant_context_equality(self) -> None:
        """Two TenantContext instances with same values should be equal."""
        a = TenantContext(tenant_id="abc", slug="acme", plan="pro", source="header")
        b = TenantContext(tenant_id="abc", slug="acme", plan="pro", source="header")
        assert a == b

    def test_tenant_context_inequality(self) -> None:
        """Contexts resolved from different sources should not be equal."""
        a = TenantContext(tenant_id="abc", slug="acme", plan="pro", source="header")
        b = TenantContext(tenant_id="abc", slug="acme", plan="pro", source="path")
        assert a != b

    def test_source_field_is_literal_type(self) -> None:
        """TenantContext.source should be typed as a Literal of the three sources."""
        hints = get_type_hints(TenantContext, include_extras=True)
        source_type = hints["source"]

        assert typing.get_origin(source_type) is typing.Literal
        assert set(typing.get_args(source_type)) == {"header", "subdomain", "path"}


class TestDefaultTenantContextProbe:
    """Tests for the DefaultTenantContextProbe implementation."""

    def test_with_context_returns_new_instance(self) -> None:
        """with_context should return a new probe instance with context bound."""
        probe = DefaultTenantContextProbe()
        context = ObservationContext(request_id="req-123", user_id="user-456")
        new_probe = probe.with_context(context)

        assert new_probe is not probe
        assert isinstance(new_probe, DefaultTenantContextProbe)

    def test_probe_methods_do_not_raise(self) -> None:
        """All probe methods should execute without raising exceptions."""
        probe = DefaultTenantContextProbe()

        probe.tenant_resolved(
            tenant_id="t1", slug="acme", source="header", user_id=None, role=None
        )
        probe.tenant_slug_missing(host="localhost:8787", path="/")
        probe.tenant_not_found(slug="ghost", source="path")
        probe.tenant_access_denied(tenant_id="t1", user_id="u1")
        probe.tenant_lookup_failed(slug="acme", error=RuntimeError("test"))

    def test_anonymous_resolution_omits_user_fields(self) -> None:
        """user_id and role are only logged for member requests."""
        logger = MagicMock()
        probe = DefaultTenantContextProbe(logger=logger)

        probe.tenant_resolved(
            tenant_id="t1", slug="acme", source="path", user_id=None, role=None
        )

        logger.debug.assert_called_once_with(
            "tenant_context_resolved", tenant_id="t1", slug="acme", source="path"
        )

    def test_access_denied_prefers_explicit_user_over_context(self) -> None:
        """Context user_id must not collide with the event's user_id."""
        logger = MagicMock()
        context = ObservationContext(request_id="req-1", user_id="u-context")
        probe = DefaultTenantContextProbe(logger=logger).with_context(context)

        probe.tenant_access_denied(tenant_id="t1", user_id="u1")

        logger.warning.assert_called_once_with(
            "tenant_context_access_denied",
            request_id="req-1",
            tenant_id="t1",
            user_id="u1",
        )

    def test_lookup_failed_logs_error_type(self) -> None:
        """Store failures should be logged at error level with their type."""
        logger = MagicMock()
        probe = DefaultTenantContextProbe(logger=logger)

        probe.tenant_lookup_failed(slug="acme", error=TimeoutError("slow"))

        logger.error.assert_called_once_with(
            "tenant_context_lookup_failed",
            slug="acme",
            error="slow",
            error_type="TimeoutError",
        )
