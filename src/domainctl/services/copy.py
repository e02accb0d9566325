"""CopyService — one-shot copy of a catalog entry, reported as ServiceResult."""

from __future__ import annotations

from typing import TYPE_CHECKING

from domainctl.domain.types import CopyOutcome
from domainctl.infrastructure.clipboard import CLIPBOARD_WRITE_FAILED
from domainctl.services.base import BaseService
from domainctl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from domainctl.domain.catalog import Catalog
    from domainctl.services.copy_session import CopySession


class CopyService(BaseService):
    """Validates the domain against the catalog, then copies it."""

    def __init__(self, catalog: Catalog, copier: CopySession) -> None:
        super().__init__(catalog)
        self._copier = copier

    async def copy(self, domain: str) -> ServiceResult:
        if domain not in self._catalog:
            return ServiceResult(
                ok=False,
                op="copy",
                error=ServiceError(
                    code="UNKNOWN_DOMAIN",
                    message=f"Domain not in catalog: {domain}",
                    detail={"domain": domain},
                ),
            )

        outcome = await self._copier.request_copy(domain)
        if outcome is CopyOutcome.FAILED:
            return ServiceResult(
                ok=False,
                op="copy",
                error=ServiceError(
                    code=CLIPBOARD_WRITE_FAILED,
                    message=f"Could not copy {domain} to the clipboard",
                    detail={"domain": domain},
                ),
            )

        return ServiceResult(
            ok=True,
            op="copy",
            data={
                "domain": domain,
                "outcome": str(outcome),
                "confirm_ms": self._copier.confirm_ms,
            },
            meta=self._meta(),
        )
