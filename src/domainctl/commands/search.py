"""Command: case-insensitive substring search over the catalog."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from domainctl.commands._base import DomCommand
from domainctl.services.catalog import CatalogService

if TYPE_CHECKING:
    from domainctl.commands._context import AppContext


@click.command(
    cls=DomCommand,
    examples="""\
  domainctl search mail
  domainctl search .io
  domainctl -q search temp
  domainctl --json search guerrilla""",
)
@click.argument("query_text")
@click.pass_obj
def search(app: AppContext, query_text: str) -> None:
    """Find domains containing QUERY_TEXT (case-insensitive)."""
    app.emit(CatalogService(app.catalog).search(query_text))
