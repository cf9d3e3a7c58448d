"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Resolves the installation directory and centralizes
result emission (stdout/stderr routing and exit codes).
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import click

from jvmsctl.config.logging import configure_logging
from jvmsctl.infrastructure.installation import Installation
from jvmsctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from jvmsctl.config.settings import JvmsSettings
    from jvmsctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: JvmsSettings) -> None:
        self.settings = settings
        self._installation: Installation | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def installation(self) -> Installation:
        """The installation this process belongs to (resolved on first use)."""
        if self._installation is None:
            self._installation = Installation.current(sys.argv[0], self.settings.home)
        return self._installation

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
