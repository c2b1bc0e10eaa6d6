"""Starlette middleware running the tenant gate in front of every route.

Usage:
    app.add_middleware(
        TenantGateMiddleware,
        gate_provider=open_tenant_gate,
        exempt_paths=("/health",),
    )

An authentication stage that runs before this middleware may set
``request.state.user_id``; when present, the caller must be a member of
the resolved tenant.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from contextlib import AbstractAsyncContextManager

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.types import ASGIApp

from shared_kernel.middleware.tenant_context import TenantContext
from tenancy.application.tenant_gate import TenantGate
from tenancy.ports.exceptions import TenantGateError

GateProvider = Callable[[], AbstractAsyncContextManager[TenantGate]]


class StarletteRequestContext:
    """RequestContext backed by ``request.state``."""

    def __init__(self, request: Request) -> None:
        self._state = request.state

    @property
    def user_id(self) -> str | None:
        user_id = getattr(self._state, "user_id", None)
        if user_id is None:
            return None
        return str(user_id)

    def bind_tenant(self, context: TenantContext) -> None:
        self._state.tenant_context = context
        self._state.tenant_id = context.tenant_id
        self._state.plan = context.plan
        if context.role is not None:
            self._state.role = context.role


class StarletteTenantRequest:
    """TenantRequest adapter over a Starlette request."""

    def __init__(self, request: Request) -> None:
        self._request = request
        self._context = StarletteRequestContext(request)

    @property
    def host(self) -> str:
        return self._request.headers.get("host", "")

    @property
    def path(self) -> str:
        return self._request.url.path

    @property
    def context(self) -> StarletteRequestContext:
        return self._context

    def header(self, name: str) -> str | None:
        # Starlette header lookup is case-insensitive
        return self._request.headers.get(name)


class TenantGateMiddleware(BaseHTTPMiddleware):
    """Resolve the tenant before the route runs, or answer with a JSON error.

    A gate is opened per request through ``gate_provider`` and closed before
    the downstream handler is called, so no database session is held while
    the handler runs. Gate rejections become ``{"error": message}``
    responses; any other exception propagates to the application's error
    handling.
    """

    def __init__(
        self,
        app: ASGIApp,
        gate_provider: GateProvider,
        exempt_paths: Iterable[str] = ("/health",),
    ) -> None:
        super().__init__(app)
        self._gate_provider = gate_provider
        self._exempt_paths = tuple(p.rstrip("/") or "/" for p in exempt_paths)

    def _is_exempt(self, path: str) -> bool:
        for exempt in self._exempt_paths:
            if path == exempt:
                return True
            # "/" exempts only the root, never the paths below it
            if exempt != "/" and path.startswith(exempt + "/"):
                return True
        return False

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if self._is_exempt(request.url.path):
            return await call_next(request)

        try:
            async with self._gate_provider() as gate:
                await gate.resolve(StarletteTenantRequest(request))
        except TenantGateError as e:
            return JSONResponse({"error": e.message}, status_code=e.status_code)

        return await call_next(request)
