"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Owns the ExampleService and centralizes result
emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from idiomctl.output.formatters import OutputSettings, format_result
from idiomctl.services.examples import ExampleService

if TYPE_CHECKING:
    from idiomctl.config.settings import IdiomSettings
    from idiomctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.
    """

    def __init__(self, settings: IdiomSettings) -> None:
        self.settings = settings
        self.service = ExampleService()

        from idiomctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        # Timing spans are only collected under --verbose.
        from idiomctl.services.telemetry import disable_telemetry, enable_telemetry

        if settings.verbose:
            enable_telemetry()
        else:
            disable_telemetry()

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
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

    def emit_all(self, results: list[ServiceResult]) -> None:
        """Emit several results in order; the first failure ends the run.

        In JSON mode the successful results are written as one array so
        stdout stays a single parseable document.
        """
        if self.settings.json_output:
            passed = [r for r in results if r.ok]
            if passed:
                payload = ",\n".join(r.model_dump_json(indent=2) for r in passed)
                click.echo(f"[\n{payload}\n]")
            for result in results:
                if not result.ok:
                    click.echo(format_result(result, settings=self.output_settings), err=True)
                    raise SystemExit(1)
            return
        for result in results:
            self.emit(result)
