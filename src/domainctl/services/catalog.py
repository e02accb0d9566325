"""CatalogService — read-only listing and substring search."""

from __future__ import annotations

from domainctl.domain.filtering import filter_domains
from domainctl.services.base import BaseService
from domainctl.services.result import ServiceResult


class CatalogService(BaseService):
    """Lists and searches the catalog."""

    def list_domains(self) -> ServiceResult:
        """Every catalog entry in catalog order."""
        items = list(self._catalog.domains)
        return ServiceResult(
            ok=True,
            op="list_domains",
            data={"items": items, "count": len(items)},
            meta=self._meta(),
        )

    def search(self, query: str) -> ServiceResult:
        """Entries containing *query* (case-insensitive).

        No matches is still a success, with ``count == 0``.
        """
        items = list(filter_domains(self._catalog.domains, query))
        return ServiceResult(
            ok=True,
            op="search",
            data={"query": query, "items": items, "count": len(items)},
            meta=self._meta(),
        )
