"""Catalog source — load the domain catalog from a text file or package data.

Format: one domain per line. Blank lines and ``#`` comments are skipped,
surrounding whitespace is stripped. Duplicates keep their first position.
"""

from __future__ import annotations

import logging
from importlib import resources
from pathlib import Path

from domainctl.domain.catalog import Catalog

logger = logging.getLogger(__name__)

BUNDLED_SOURCE = "bundled"
_BUNDLED_FILE = "domains.txt"


class CatalogLoadError(Exception):
    """Raised when a catalog file is missing or unreadable.

    Attributes:
        code: ``CATALOG_NOT_FOUND`` or ``CATALOG_INVALID``.
    """

    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


def parse_catalog(text: str) -> tuple[list[str], list[str]]:
    """Parse catalog text into ``(domains, duplicates)``.

    Examples:
        >>> parse_catalog("a.com\\n# note\\n\\nb.com\\na.com\\n")
        (['a.com', 'b.com'], ['a.com'])
    """
    domains: list[str] = []
    duplicates: list[str] = []
    seen: set[str] = set()
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        if line in seen:
            duplicates.append(line)
            continue
        seen.add(line)
        domains.append(line)
    return domains, duplicates


def load_catalog(path: Path | None = None) -> tuple[Catalog, list[str]]:
    """Load a catalog from *path*, or the bundled list when *path* is None.

    Returns the catalog plus a list of warnings (one per dropped duplicate).

    Raises:
        CatalogLoadError: If the file does not exist or cannot be decoded.
    """
    if path is None:
        text = resources.files("domainctl.data").joinpath(_BUNDLED_FILE).read_text(encoding="utf-8")
        source = BUNDLED_SOURCE
    else:
        if not path.is_file():
            raise CatalogLoadError("CATALOG_NOT_FOUND", f"Catalog file not found: {path}")
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise CatalogLoadError("CATALOG_INVALID", f"Cannot read catalog {path}: {exc}") from exc
        source = str(path)

    domains, duplicates = parse_catalog(text)
    warnings: list[str] = []
    for dup in duplicates:
        logger.info("Dropped duplicate catalog entry %s from %s", dup, source)
        warnings.append(f"Duplicate catalog entry ignored: {dup}")

    catalog = Catalog(domains=tuple(domains), source=source)
    logger.debug("Loaded %d domains from %s", len(catalog), source)
    return catalog, warnings
