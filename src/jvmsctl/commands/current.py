"""Command: show which toolchain applies to a directory."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from jvmsctl.commands._base import JvmsCommand

if TYPE_CHECKING:
    from jvmsctl.commands._context import AppContext


@click.command(
    cls=JvmsCommand,
    examples="""\
  jvmsctl current
  jvmsctl current ~/work/legacy-app
  jvmsctl --json current""",
)
@click.argument("path", required=False, type=click.Path(path_type=Path))
@click.pass_obj
def current(app: AppContext, path: Path | None) -> None:
    """Show the toolchain a shim would use in PATH (default: current directory)."""
    from jvmsctl.services.toolchain import ToolchainService

    app.emit(ToolchainService(app.installation).current(path))
