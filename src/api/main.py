"""Main FastAPI application entry point."""

from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI

from infrastructure.database.dependencies import close_database_connections
from infrastructure.logging import configure_logging
from infrastructure.settings import get_settings, get_tenancy_settings
from infrastructure.version import __version__
from shared_kernel.middleware.tenant_context import TenantContext
from tenancy.dependencies import get_tenant_context, open_tenant_gate
from tenancy.presentation.middleware import GateProvider, TenantGateMiddleware


@asynccontextmanager
async def storefront_lifespan(app: FastAPI):
    """Application lifespan context.

    Manages:
    - Logging configuration
    - Database engine disposal on shutdown (engine is created lazily)
    """
    configure_logging(debug=get_settings().debug)

    yield

    await close_database_connections()


def create_app(gate_provider: GateProvider | None = None) -> FastAPI:
    """Create the Storefront API application.

    Args:
        gate_provider: Opens a TenantGate per request. Defaults to a gate
            backed by the PostgreSQL read session.
    """
    settings = get_settings()
    tenancy_settings = get_tenancy_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Tenant-scoped storefront API",
        version=__version__,
        debug=settings.debug,
        lifespan=storefront_lifespan,
    )

    app.add_middleware(
        TenantGateMiddleware,
        gate_provider=gate_provider or open_tenant_gate,
        exempt_paths=tenancy_settings.exempt_paths,
    )

    @app.get("/health")
    def health():
        """Basic health check endpoint."""
        return {"status": "ok"}

    @app.get("/tenant")
    def current_tenant(
        tenant: Annotated[TenantContext, Depends(get_tenant_context)],
    ) -> dict:
        """Describe the tenant the request was resolved to."""
        return {
            "tenant_id": tenant.tenant_id,
            "slug": tenant.slug,
            "plan": tenant.plan,
            "role": tenant.role,
            "source": tenant.source,
        }

    return app


app = create_app()
