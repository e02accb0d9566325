"""Catalog — the immutable, ordered set of domains available for search."""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel, field_validator


class Catalog(BaseModel):
    """Ordered, duplicate-free sequence of domain strings.

    Frozen after construction. Behaves as a read-only sequence so it can be
    handed straight to :func:`~domainctl.domain.filtering.filter_domains`.

    Attributes:
        domains: The entries, in display order.
        source: Where the entries came from (file path or ``"bundled"``).
    """

    model_config = {"frozen": True}

    domains: tuple[str, ...] = ()
    source: str = "memory"

    @field_validator("domains")
    @classmethod
    def _unique_non_empty(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        seen: set[str] = set()
        for domain in value:
            if not domain:
                raise ValueError("catalog entries must be non-empty")
            if domain in seen:
                raise ValueError(f"duplicate catalog entry: {domain}")
            seen.add(domain)
        return value

    def __len__(self) -> int:
        return len(self.domains)

    def __iter__(self) -> Iterator[str]:  # type: ignore[override]
        return iter(self.domains)

    def __contains__(self, domain: object) -> bool:
        return domain in self.domains

    def __getitem__(self, index: int) -> str:
        return self.domains[index]
