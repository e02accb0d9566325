"""Tests for the Catalog model."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from domainctl.domain.catalog import Catalog


class TestCatalog:
    def test_sequence_behaviour(self, catalog: Catalog) -> None:
        assert len(catalog) == 3
        assert list(catalog) == ["aaa.com", "bbb.com", "mail.aaa.com"]
        assert "bbb.com" in catalog
        assert "zzz.com" not in catalog
        assert catalog[2] == "mail.aaa.com"

    def test_rejects_duplicates(self) -> None:
        with pytest.raises(ValidationError, match="duplicate"):
            Catalog(domains=("a.com", "a.com"))

    def test_rejects_empty_entries(self) -> None:
        with pytest.raises(ValidationError):
            Catalog(domains=("a.com", ""))

    def test_frozen(self, catalog: Catalog) -> None:
        with pytest.raises(ValidationError):
            catalog.domains = ("x.com",)  # type: ignore[misc]

    def test_list_input_is_coerced_to_tuple(self) -> None:
        cat = Catalog(domains=["a.com", "b.com"])  # type: ignore[arg-type]
        assert cat.domains == ("a.com", "b.com")
