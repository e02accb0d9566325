"""Operation-specific Rich renderers for ServiceResult and browse views.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from domainctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from domainctl.services.result import ServiceResult

NO_MATCHES = "No matching domains"
NO_MATCHES_HINT = "Try a different search term."
COPIED = "copied"


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(str(item) for item in items)
    if "domain" in result.data:
        return str(result.data["domain"])
    return f"OK: {result.op}"


def render_browse_view(view: dict[str, Any], *, page_size: int = 0) -> str:
    """Render a :meth:`BrowseSession.snapshot` for the interactive loop.

    Args:
        view: Snapshot dict with ``query``, ``items``, ``count``, ``total``.
        page_size: Maximum rows to draw; 0 draws all of them.
    """
    console = create_console()
    items: list[dict[str, Any]] = view.get("items", [])

    console.print(Text(f"{view.get('total', 0)} domains in catalog", style="dom.key"))
    if view.get("query"):
        console.print(Text(f"query: {view['query']}", style="dom.key"))

    if not items:
        console.print(Text(NO_MATCHES, style="dom.warning"))
        console.print(Text(NO_MATCHES_HINT, style="dom.hint"))
        return get_output(console).rstrip("\n")

    console.print(_match_header(view))
    shown = items[:page_size] if page_size else items
    table = Table(show_header=False, show_lines=False, pad_edge=False, box=None)
    table.add_column("#", style="dom.index", justify="right")
    table.add_column("Domain", style="dom.domain")
    table.add_column("State")
    for position, item in enumerate(shown, 1):
        state = Text(f"✓ {COPIED}", style="dom.copied") if item.get("copied") else Text("")
        table.add_row(str(position), str(item.get("domain", "")), state)
    console.print(table)

    hidden = len(items) - len(shown)
    if hidden > 0:
        console.print(Text(f"… {hidden} more, refine the query", style="dom.hint"))
    return get_output(console).rstrip("\n")


# ── Helpers ───────────────────────────────────────────────────────────


def _match_header(data: dict[str, Any]) -> Text:
    count = data.get("count", 0)
    if data.get("query"):
        return Text(f"Found {count} matching domains", style="dom.match")
    return Text("All domains", style="dom.match")


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="dom.ok")
    op = Text(f"  {result.op}", style="dom.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="dom.key")
    v = Text(str(value), style="dom.domain" if key == "domain" else "")
    console.print(k, v, sep="")


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    for key, value in result.meta.items():
        _field(console, key, value)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="dom.error")
    op = Text(f"  {result.op}", style="dom.op")
    sep = Text(" — ")
    console.print(label, op, sep, msg)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Catalog renderers ─────────────────────────────────────────────────


def _render_domain_table(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render list_domains / search results as a numbered table."""
    items: list[str] = result.data.get("items", [])
    if not items:
        console.print(Text(NO_MATCHES, style="dom.warning"))
        console.print(Text(NO_MATCHES_HINT, style="dom.hint"))
        return

    console.print(_match_header(result.data))
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("#", style="dom.index", justify="right")
    table.add_column("Domain", style="dom.domain", no_wrap=True)
    for position, domain in enumerate(items, 1):
        table.add_row(str(position), domain)
    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} domains")
    if verbose:
        _render_meta(console, result)


def _render_copy(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "domain", result.data.get("domain", ""))
    console.print(Text(f"  ✓ {COPIED}", style="dom.copied"))
    if verbose:
        _field(console, "confirm_ms", result.data.get("confirm_ms", ""))
        _render_meta(console, result)


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "list_domains": _render_domain_table,
    "search": _render_domain_table,
    "copy": _render_copy,
}
