"""BaseService — shared foundation for catalog-backed services.

Every service receives the loaded :class:`Catalog` at construction time.
The catalog is immutable, so services never coordinate access to it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from domainctl.domain.catalog import Catalog


class BaseService:
    """Base for service-layer classes that read the catalog.

    Usage::

        class CatalogService(BaseService):
            def list_domains(self) -> ServiceResult:
                return ServiceResult(ok=True, op="list_domains", ...)
    """

    def __init__(self, catalog: Catalog) -> None:
        self._catalog = catalog

    def _meta(self) -> dict[str, str | int]:
        return {"source": self._catalog.source, "total": len(self._catalog)}
