"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy catalog loading, copy session
construction, and centralized result emission (stdout/stderr routing +
exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from domainctl.output.formatters import OutputSettings, format_result
from domainctl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from domainctl.config.settings import DomainSettings
    from domainctl.domain.catalog import Catalog
    from domainctl.services.copy_session import CopySession


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The catalog is loaded on first use so ``--help`` and ``--version``
    never touch the filesystem.
    """

    def __init__(self, settings: DomainSettings) -> None:
        self.settings = settings
        self._catalog: Catalog | None = None
        self._catalog_warnings: list[str] = []

        from domainctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    @property
    def catalog(self) -> Catalog:
        """The catalog (loaded lazily on first access).

        A missing or unreadable catalog file is emitted as an error result,
        which exits with code 1.
        """
        if self._catalog is not None:
            return self._catalog

        from domainctl.infrastructure.catalog_source import CatalogLoadError, load_catalog

        try:
            catalog, self._catalog_warnings = load_catalog(self.settings.catalog_path)
        except CatalogLoadError as exc:
            self.emit(
                ServiceResult(
                    ok=False,
                    op="load_catalog",
                    error=ServiceError(code=exc.code, message=exc.message),
                )
            )
            raise  # emit() exits on failure
        self._catalog = catalog
        return catalog

    def echo_warnings(self) -> None:
        """Write catalog warnings to stderr, for commands that never ``emit``."""
        for warning in self._catalog_warnings:
            click.echo(f"WARNING: {warning}", err=True)

    def copy_session(self) -> CopySession:
        """A new copy session wired to the system clipboard and feedback."""
        from domainctl.infrastructure.clipboard import SystemClipboard
        from domainctl.infrastructure.feedback import TerminalFeedback
        from domainctl.services.copy_session import CopySession

        cfg = self.settings.clipboard
        return CopySession(
            SystemClipboard(),
            TerminalFeedback(bell=self.settings.feedback.bell),
            confirm_ms=cfg.confirm_ms,
            success_pulse_ms=cfg.success_pulse_ms,
            failure_pulse_ms=cfg.failure_pulse_ms,
        )

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        if self._catalog_warnings:
            result = result.model_copy(
                update={"warnings": [*self._catalog_warnings, *result.warnings]}
            )
        settings = self.output_settings
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
