"""Command: interactive search-and-copy loop.

Each line typed at the prompt becomes the new query; an empty line clears
it. ``#N`` copies the N-th visible domain, ``:q`` or end of input quits.
Prompts are read in a worker thread so confirmation timers keep running
on the event loop while the user types.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import click

from domainctl.commands._base import DomCommand
from domainctl.domain.types import CopyOutcome
from domainctl.output.renderers import render_browse_view
from domainctl.services.browse import BrowseSession
from domainctl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from domainctl.commands._context import AppContext
    from domainctl.domain.catalog import Catalog

QUIT = ":q"
_HELP = "Type to filter, empty line to clear, #N to copy entry N, :q to quit."


@click.command(
    cls=DomCommand,
    examples="""\
  domainctl browse
  domainctl browse --query mail
  domainctl --catalog ./domains.txt browse""",
)
@click.option("--query", "initial_query", default="", help="Initial search query.")
@click.pass_obj
def browse(app: AppContext, initial_query: str) -> None:
    """Interactively search the catalog and copy domains."""
    if app.settings.no_interact:
        app.emit(
            ServiceResult(
                ok=False,
                op="browse",
                error=ServiceError(
                    code="INTERACTIVE_DISABLED",
                    message="browse is interactive; use 'search' and 'copy' instead",
                ),
            )
        )
    asyncio.run(_browse(app, app.catalog, initial_query))


async def _browse(app: AppContext, catalog: Catalog, initial_query: str) -> None:
    page_size = app.settings.browse.page_size
    app.echo_warnings()
    click.echo(_HELP)
    async with BrowseSession(catalog, app.copy_session(), query=initial_query) as session:
        while True:
            click.echo(render_browse_view(session.snapshot(), page_size=page_size))
            line = await asyncio.to_thread(_read_line)
            if line is None or line.strip() == QUIT:
                break

            position = _parse_position(line)
            if position is None:
                session.query = line
                continue

            domain = session.entry(position)
            if domain is None:
                click.echo(f"No entry #{position} in the current view.", err=True)
                continue
            outcome = await session.request_copy(domain)
            if outcome is CopyOutcome.FAILED:
                click.echo(f"Could not copy {domain} to the clipboard.", err=True)


def _read_line() -> str | None:
    """Prompt for one line; None on end of input."""
    try:
        return click.prompt("search", default="", show_default=False, prompt_suffix="> ")
    except click.Abort:
        return None


def _parse_position(line: str) -> int | None:
    """``#3`` -> 3; anything else is a query."""
    text = line.strip()
    if text.startswith("#") and text[1:].isdigit():
        return int(text[1:])
    return None
