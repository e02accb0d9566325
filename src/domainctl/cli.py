"""Root CLI group for domainctl with global flags and command registration."""

from __future__ import annotations

from pathlib import Path

import click

from domainctl import __version__
from domainctl.commands import register_commands
from domainctl.commands._base import DomGroup
from domainctl.commands._context import AppContext
from domainctl.config.settings import DomainSettings


@click.group(
    cls=DomGroup,
    invoke_without_command=True,
    examples="""\
  domainctl search mail
  domainctl --json list
  domainctl --catalog ./domains.txt browse""",
)
@click.version_option(version=__version__, prog_name="domainctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--no-interact", is_flag=True, help="Non-interactive mode (no prompts).")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "--catalog",
    "catalog_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Catalog file (one domain per line).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    no_interact: bool,
    config_path: str | None,
    catalog_path: Path | None,
) -> None:
    """domainctl — search disposable mail domains and copy them."""
    ctx.ensure_object(dict)
    settings = DomainSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        no_interact=no_interact,
        catalog_override=catalog_path,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
