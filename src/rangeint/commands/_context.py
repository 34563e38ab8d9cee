"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Configures logging and centralizes result emission
(stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from rangeint.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from rangeint.config.settings import RangeintSettings
    from rangeint.services.arithmetic import ArithmeticService
    from rangeint.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: RangeintSettings) -> None:
        self.settings = settings
        self._service: ArithmeticService | None = None

        from rangeint.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def service(self) -> ArithmeticService:
        """The arithmetic service (created lazily on first access)."""
        if self._service is None:
            from rangeint.services.arithmetic import ArithmeticService

            self._service = ArithmeticService()
        return self._service

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
