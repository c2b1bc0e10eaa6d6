"""Value objects for the tenancy domain.

Value objects are immutable descriptors that provide type safety and
domain semantics for identifiers and domain concepts.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


@dataclass(frozen=True)
class TenantId:
    """Identifier for a Tenant.

    Tenant rows are created by the store's owner, using ULIDs.
    """

    value: str

    def __str__(self) -> str:
        """Return string representation."""
        return self.value


class SlugSource(StrEnum):
    """Where in the request a tenant slug was found, in priority order."""

    HEADER = "header"
    SUBDOMAIN = "subdomain"
    PATH = "path"


@dataclass(frozen=True)
class ResolvedSlug:
    """A candidate tenant slug extracted from a request.

    Attributes:
        slug: Lower-cased candidate slug, never empty.
        source: The part of the request that produced it.
    """

    slug: str
    source: SlugSource

    def __post_init__(self) -> None:
        if not self.slug:
            raise ValueError("slug must not be empty")
