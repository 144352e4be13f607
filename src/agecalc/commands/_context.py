"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides the AgeService and centralized result
emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from agecalc.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from agecalc.config.settings import AgeCalcSettings
    from agecalc.services.age import AgeService
    from agecalc.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.
    """

    def __init__(self, settings: AgeCalcSettings) -> None:
        self.settings = settings
        self._service: AgeService | None = None

        from agecalc.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from agecalc.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def service(self) -> AgeService:
        """The AgeService instance (created on first access)."""
        if self._service is None:
            from agecalc.services.age import AgeService

            self._service = AgeService(self.settings)
        return self._service

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            thousands_separator=self.settings.output.thousands_separator,
        )

    def show(self, result: ServiceResult) -> None:
        """Write a result without exit semantics (successes to stdout, failures to stderr)."""
        output = format_result(result, settings=self.output_settings)
        click.echo(output, err=not result.ok)
        if result.ok and not self.settings.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        self.show(result)
        if not result.ok:
            raise SystemExit(1)
