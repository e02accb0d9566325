"""Subcommand modules for domainctl.

Provides register_commands() which uses deferred imports to keep
``domainctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from domainctl.commands.browse import browse
    from domainctl.commands.copy_cmd import copy_cmd
    from domainctl.commands.list_cmd import list_cmd
    from domainctl.commands.search import search

    cli.add_command(list_cmd)
    cli.add_command(search)
    cli.add_command(copy_cmd)
    cli.add_command(browse)
