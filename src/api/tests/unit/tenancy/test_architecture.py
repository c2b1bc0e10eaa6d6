"""Architecture tests for the tenancy bounded context.

The domain and application layers stay free of web framework and
database imports so the gate can be exercised without either.
"""

from pytest_archon import archrule


class TestTenancyLayering:
    """Tests for dependency direction inside tenancy."""

    def test_domain_has_no_framework_dependencies(self):
        """Domain must not import FastAPI, Starlette or SQLAlchemy."""
        (
            archrule("tenancy_domain_is_pure")
            .match("tenancy.domain*")
            .should_not_import("fastapi*", "starlette*", "sqlalchemy*")
            .check("tenancy")
        )

    def test_application_has_no_framework_dependencies(self):
        """The gate must only see the typed request ports."""
        (
            archrule("tenancy_application_is_framework_free")
            .match("tenancy.application*")
            .should_not_import(
                "fastapi*",
                "starlette*",
                "sqlalchemy*",
                "tenancy.infrastructure*",
                "tenancy.presentation*",
            )
            .check("tenancy")
        )

    def test_ports_do_not_import_adapters(self):
        """Ports must not depend on their implementations."""
        (
            archrule("tenancy_ports_no_adapters")
            .match("tenancy.ports*")
            .should_not_import("tenancy.infrastructure*", "tenancy.presentation*")
            .check("tenancy")
        )
