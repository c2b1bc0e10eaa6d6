"""Extraction of a candidate tenant slug from a request.

Sources are tried in a fixed priority order and the first non-empty
candidate wins:

1. The explicit tenant header (``X-Tenant-Slug`` by default).
2. The first label of the Host header, unless reserved or a bare host:port.
3. A ``/store/{slug}`` or ``/t/{slug}`` path prefix.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from tenancy.domain.value_objects import ResolvedSlug, SlugSource
from tenancy.ports.request import TenantRequest

DEFAULT_HEADER_NAME = "X-Tenant-Slug"
DEFAULT_RESERVED_SUBDOMAINS = frozenset({"www", "api", "app", "admin", "localhost"})
DEFAULT_PATH_PREFIXES = ("store", "t")

# Slugs in paths are matched as-is: lowercase letters, digits and hyphens
_SLUG_PATTERN = "[a-z0-9-]+"


class SlugResolver:
    """Finds the tenant slug a request addresses."""

    def __init__(
        self,
        header_name: str = DEFAULT_HEADER_NAME,
        reserved_subdomains: Iterable[str] = DEFAULT_RESERVED_SUBDOMAINS,
        path_prefixes: Iterable[str] = DEFAULT_PATH_PREFIXES,
    ) -> None:
        self._header_name = header_name
        self._reserved_subdomains = frozenset(
            label.lower() for label in reserved_subdomains
        )
        prefixes = "|".join(re.escape(prefix) for prefix in path_prefixes)
        self._path_pattern = re.compile(rf"^/(?:{prefixes})/({_SLUG_PATTERN})")

    @property
    def header_name(self) -> str:
        return self._header_name

    def resolve(self, request: TenantRequest) -> ResolvedSlug | None:
        """Return the highest-priority candidate slug, or None."""
        return (
            self.from_header(request.header(self._header_name))
            or self.from_host(request.host)
            or self.from_path(request.path)
        )

    def from_header(self, value: str | None) -> ResolvedSlug | None:
        """Candidate from the tenant header; blank values count as absent."""
        if value is None:
            return None
        slug = value.strip().lower()
        if not slug:
            return None
        return ResolvedSlug(slug=slug, source=SlugSource.HEADER)

    def from_host(self, host: str | None) -> ResolvedSlug | None:
        """Candidate from the first label of the host.

        ``localhost:8787`` and ``www.example.com`` yield nothing: a colon in
        the first label means there is no subdomain, and reserved labels
        never name a tenant.
        """
        if not host:
            return None
        label = host.split(".", 1)[0].strip().lower()
        if not label or ":" in label or label in self._reserved_subdomains:
            return None
        return ResolvedSlug(slug=label, source=SlugSource.SUBDOMAIN)

    def from_path(self, path: str | None) -> ResolvedSlug | None:
        """Candidate from a ``/store/{slug}`` or ``/t/{slug}`` path prefix."""
        if not path:
            return None
        match = self._path_pattern.match(path)
        if match is None:
            return None
        return ResolvedSlug(slug=match.group(1).lower(), source=SlugSource.PATH)
