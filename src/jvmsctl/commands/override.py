"""Command group: pin toolchains to directories."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from jvmsctl.commands._base import JvmsGroup, force_option

if TYPE_CHECKING:
    from jvmsctl.commands._context import AppContext

_OVERRIDE_EXAMPLES = """\
  jvmsctl override set 8
  jvmsctl override set 11 --path ~/work/service
  jvmsctl override list
  jvmsctl override remove
  jvmsctl override clean"""


@click.group(cls=JvmsGroup, examples=_OVERRIDE_EXAMPLES)
@click.pass_obj
def override(app: AppContext) -> None:
    """Add, remove, or list directory overrides."""


@override.command(
    "set",
    examples="""\
  jvmsctl override set 8
  jvmsctl override set 11 --path ~/work/service""",
)
@click.argument("toolchain_name")
@click.option(
    "--path",
    "directory",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory to pin (default: current directory).",
)
@force_option
@click.pass_obj
def set_cmd(app: AppContext, toolchain_name: str, directory: Path | None, force: bool) -> None:
    """Use TOOLCHAIN_NAME in a directory and everything beneath it."""
    from jvmsctl.services.override import OverrideService

    app.emit(OverrideService(app.installation).set(toolchain_name, directory, force=force))


@override.command("list", examples="  jvmsctl override list\n  jvmsctl --json override list")
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List registered overrides."""
    from jvmsctl.services.override import OverrideService

    app.emit(OverrideService(app.installation).list_overrides())


@override.command(
    examples="""\
  jvmsctl override remove
  jvmsctl override remove ~/work/service"""
)
@click.argument("path", required=False, type=click.Path(path_type=Path))
@force_option
@click.pass_obj
def remove(app: AppContext, path: Path | None, force: bool) -> None:
    """Remove the override for PATH (default: current directory)."""
    from jvmsctl.services.override import OverrideService

    app.emit(OverrideService(app.installation).remove(path, force=force))


@override.command(examples="  jvmsctl override clean")
@force_option
@click.pass_obj
def clean(app: AppContext, force: bool) -> None:
    """Drop overrides whose directory no longer exists."""
    from jvmsctl.services.override import OverrideService

    app.emit(OverrideService(app.installation).clean(force=force))
