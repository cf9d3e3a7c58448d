"""Command: show or change the default toolchain."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from jvmsctl.commands._base import JvmsCommand, force_option

if TYPE_CHECKING:
    from jvmsctl.commands._context import AppContext


@click.command(
    cls=JvmsCommand,
    examples="""\
  jvmsctl default
  jvmsctl default 17
  jvmsctl --json default""",
)
@click.argument("toolchain_name", required=False)
@force_option
@click.pass_obj
def default(app: AppContext, toolchain_name: str | None, force: bool) -> None:
    """Show the default toolchain, or set it to TOOLCHAIN_NAME."""
    from jvmsctl.services.toolchain import ToolchainService

    svc = ToolchainService(app.installation)
    if toolchain_name is None:
        app.emit(svc.get_default())
    else:
        app.emit(svc.set_default(toolchain_name, force=force))
