"""Command: install jvmsctl and its Java shims into a directory."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click

from jvmsctl.commands._base import JvmsCommand
from jvmsctl.domain.paths import absolutize

if TYPE_CHECKING:
    from jvmsctl.commands._context import AppContext


@click.command(
    cls=JvmsCommand,
    examples="""\
  jvmsctl install ~/.jvms
  jvmsctl install /opt/jvms""",
)
@click.argument("destination", type=click.Path(file_okay=False, path_type=Path))
@click.pass_obj
def install(app: AppContext, destination: Path) -> None:
    """Copy this executable to DESTINATION and link the java, javac, ... shims.

    Put DESTINATION first on PATH afterwards.
    """
    from jvmsctl.services.install import InstallService

    app.emit(InstallService(absolutize(sys.argv[0])).install(destination))
