"""Rejections raised by the tenant resolution gate.

Each rejection is terminal for the request and carries the HTTP status
and the message sent back to the client.
"""

from __future__ import annotations


class TenantGateError(Exception):
    """Base exception for requests rejected by the tenant gate."""

    status_code: int = 400
    message: str = "Tenant resolution failed"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class TenantNotResolvedError(TenantGateError):
    """No tenant slug could be extracted from the request."""

    status_code = 404
    message = "Tenant not found"


class TenantNotFoundError(TenantGateError):
    """No active tenant matches the slug.

    Inactive and nonexistent tenants share this error so that responses
    do not reveal whether a tenant exists.
    """

    status_code = 404
    message = "Store not found or inactive"


class TenantAccessDeniedError(TenantGateError):
    """The authenticated caller is not a member of the tenant."""

    status_code = 403
    message = "Access denied to this store"
