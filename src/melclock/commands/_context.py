"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy service construction and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from melclock.config.logging import configure_logging
from melclock.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from melclock.config.settings import MelSettings
    from melclock.services.deadline import DeadlineService
    from melclock.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.
    """

    def __init__(self, settings: MelSettings) -> None:
        self.settings = settings
        self._service: DeadlineService | None = None
        configure_logging(
            verbose=settings.verbose,
            quiet=settings.quiet,
            log_json=settings.log_json,
        )

    @property
    def service(self) -> DeadlineService:
        """The deadline service (created lazily on first access)."""
        if self._service is None:
            from melclock.services.deadline import DeadlineService

            self._service = DeadlineService(self.settings)
        return self._service

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    def emit_warnings(self, result: ServiceResult) -> None:
        """Write warnings to stderr unless they travel inside a JSON payload."""
        if self.settings.json_output:
            return
        for warning in result.warnings:
            click.echo(f"WARNING: {warning}", err=True)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        output = format_result(result, settings=self.output_settings)
        if result.ok:
            click.echo(output)
            self.emit_warnings(result)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
