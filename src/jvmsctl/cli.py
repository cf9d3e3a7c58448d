"""Root CLI group for jvmsctl with global flags and command registration."""

from __future__ import annotations

import click
from pydantic import ValidationError

from jvmsctl import __version__
from jvmsctl.commands import register_commands
from jvmsctl.commands._context import AppContext
from jvmsctl.config.settings import JvmsSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="jvmsctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option(
    "--home",
    default=None,
    help="Installation directory (default: directory of this executable).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    home: str | None,
) -> None:
    """jvmsctl — per-directory Java toolchain manager."""
    try:
        settings = JvmsSettings.from_cli(
            home=home,
            json_output=json_output,
            quiet=quiet,
            verbose=verbose,
            log_json=log_json,
        )
    except ValidationError as exc:
        raise click.UsageError(f"Invalid JVMSCTL_* environment: {exc}") from exc
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
