"""Command: copy a single catalog domain to the clipboard."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import click

from domainctl.commands._base import DomCommand
from domainctl.services.copy import CopyService

if TYPE_CHECKING:
    from domainctl.commands._context import AppContext
    from domainctl.services.result import ServiceResult


@click.command(
    "copy",
    cls=DomCommand,
    examples="""\
  domainctl copy mailinator.com
  domainctl --json copy yopmail.com""",
)
@click.argument("domain")
@click.pass_obj
def copy_cmd(app: AppContext, domain: str) -> None:
    """Copy DOMAIN to the system clipboard."""
    catalog = app.catalog

    async def _run() -> ServiceResult:
        async with app.copy_session() as copier:
            return await CopyService(catalog, copier).copy(domain)

    app.emit(asyncio.run(_run()))
