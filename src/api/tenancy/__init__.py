"""Tenancy bounded context.

Resolves which storefront tenant an incoming request addresses and gates
the request on the caller's membership in that tenant.
"""
