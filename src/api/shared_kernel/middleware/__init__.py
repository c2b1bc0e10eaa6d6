"""Shared middleware for cross-cutting concerns.

Holds the resolved tenant context value object and its observability
probe. The resolution logic itself lives in the tenancy bounded context.
"""
