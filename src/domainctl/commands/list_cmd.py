"""Command: list every domain in the catalog."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from domainctl.commands._base import DomCommand
from domainctl.services.catalog import CatalogService

if TYPE_CHECKING:
    from domainctl.commands._context import AppContext


@click.command(
    "list",
    cls=DomCommand,
    examples="""\
  domainctl list
  domainctl -q list
  domainctl --catalog ./domains.txt list
  domainctl --json list""",
)
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List all catalog domains."""
    app.emit(CatalogService(app.catalog).list_domains())
