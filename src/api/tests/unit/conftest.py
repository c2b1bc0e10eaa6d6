"""Unit test fixtures with mocked dependencies."""

from __future__ import annotations

import pytest

from shared_kernel.middleware.tenant_context import TenantContext


@pytest.fixture
def mock_db_settings():
    """Provide test database settings."""
    from infrastructure.settings import DatabaseSettings

    return DatabaseSettings(
        host="testhost",
        port=5432,
        database="testdb",
        username="testuser",
        password="testpass",
    )


class FakeRequestContext:
    """In-memory RequestContext recording what the gate binds."""

    def __init__(self, user_id: str | None = None) -> None:
        self._user_id = user_id
        self.bound: TenantContext | None = None

    @property
    def user_id(self) -> str | None:
        return self._user_id

    def bind_tenant(self, context: TenantContext) -> None:
        self.bound = context


class FakeTenantRequest:
    """In-memory TenantRequest with case-insensitive header lookup."""

    def __init__(
        self,
        headers: dict[str, str] | None = None,
        host: str = "",
        path: str = "/",
        user_id: str | None = None,
    ) -> None:
        self._headers = {k.lower(): v for k, v in (headers or {}).items()}
        self._host = host
        self._path = path
        self._context = FakeRequestContext(user_id=user_id)

    @property
    def host(self) -> str:
        return self._host

    @property
    def path(self) -> str:
        return self._path

    @property
    def context(self) -> FakeRequestContext:
        return self._context

    def header(self, name: str) -> str | None:
        return self._headers.get(name.lower())


@pytest.fixture
def make_request():
    """Factory for in-memory tenant requests."""
    return FakeTenantRequest

