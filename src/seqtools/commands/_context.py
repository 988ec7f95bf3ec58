"""AppContext: shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Owns logging setup, the service instance and
centralized result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from seqtools.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from seqtools.config.settings import SeqSettings
    from seqtools.services.result import ServiceResult
    from seqtools.services.sequence import SequenceService


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: SeqSettings, command: str | None = None) -> None:
        self.settings = settings
        self._service: SequenceService | None = None

        from seqtools.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose, log_json=settings.log_json, command=command
        )

        if settings.verbose:
            from seqtools.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def service(self) -> SequenceService:
        """The sequence service (created lazily on first access)."""
        if self._service is None:
            from seqtools.services.sequence import SequenceService

            self._service = SequenceService()
        return self._service

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout. Warnings go to stderr so they don't
          pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            no_color=self.settings.output.no_color,
            width=self.settings.output.width,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
