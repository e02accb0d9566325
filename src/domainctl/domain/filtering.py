"""Filter engine — derive the visible subset of a catalog from a query.

Pure and synchronous. Matching is a case-insensitive substring test using
plain ``str.lower()``; the query is never trimmed.
"""

from __future__ import annotations

from collections.abc import Sequence


def filter_domains(catalog: Sequence[str], query: str) -> Sequence[str]:
    """Return the entries of *catalog* containing *query*, in catalog order.

    An empty query returns *catalog* itself. A query with no matches
    returns an empty list.

    Examples:
        >>> filter_domains(["aaa.com", "bbb.com", "mail.aaa.com"], "aaa")
        ['aaa.com', 'mail.aaa.com']
        >>> filter_domains(["aaa.com"], "zzz")
        []
    """
    if not query:
        return catalog
    needle = query.lower()
    return [domain for domain in catalog if needle in domain.lower()]

