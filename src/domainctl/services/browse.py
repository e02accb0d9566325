"""BrowseSession — query state, visible set, and copy state for one view.

One session per interactive view: opened when the view starts, closed
(cancelling any live confirmation timer) when it ends. The visible set is
derived lazily from ``(catalog, query)`` and cached until the query changes.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from domainctl.domain.filtering import filter_domains

if TYPE_CHECKING:
    from domainctl.domain.catalog import Catalog
    from domainctl.domain.types import CopyOutcome
    from domainctl.services.copy_session import CopySession


class BrowseSession:
    """Owns the live query and delegates copies to a :class:`CopySession`."""

    def __init__(self, catalog: Catalog, copier: CopySession, *, query: str = "") -> None:
        self._catalog = catalog
        self._copier = copier
        self._query = query
        self._visible: Sequence[str] | None = None

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    @property
    def copier(self) -> CopySession:
        return self._copier

    @property
    def query(self) -> str:
        return self._query

    @query.setter
    def query(self, value: str) -> None:
        if value != self._query:
            self._query = value
            self._visible = None

    def clear_query(self) -> None:
        self.query = ""

    @property
    def visible(self) -> Sequence[str]:
        """Catalog entries matching the current query."""
        if self._visible is None:
            self._visible = filter_domains(self._catalog.domains, self._query)
        return self._visible

    def entry(self, position: int) -> str | None:
        """Visible entry at 1-based *position*, or None when out of range."""
        if position < 1 or position > len(self.visible):
            return None
        return self.visible[position - 1]

    def is_confirmed(self, domain: str) -> bool:
        return self._copier.is_confirmed(domain)

    async def request_copy(self, domain: str) -> CopyOutcome:
        return await self._copier.request_copy(domain)

    def snapshot(self) -> dict[str, Any]:
        """Render-ready view state."""
        items = [{"domain": d, "copied": self._copier.is_confirmed(d)} for d in self.visible]
        return {
            "query": self._query,
            "items": items,
            "count": len(items),
            "total": len(self._catalog),
            "confirmed": self._copier.confirmed,
        }

    def close(self) -> None:
        self._copier.close()

    async def __aenter__(self) -> BrowseSession:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        self.close()
