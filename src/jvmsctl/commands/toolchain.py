"""Command group: register, list, and remove Java toolchains."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from jvmsctl.commands._base import JvmsGroup, force_option

if TYPE_CHECKING:
    from jvmsctl.commands._context import AppContext

_TOOLCHAIN_EXAMPLES = """\
  jvmsctl toolchain add 17 /usr/lib/jvm/java-17-openjdk
  jvmsctl toolchain list
  jvmsctl toolchain remove 8"""


@click.group(cls=JvmsGroup, examples=_TOOLCHAIN_EXAMPLES)
@click.pass_obj
def toolchain(app: AppContext) -> None:
    """Add, remove, or list registered Java toolchains."""


@toolchain.command(
    examples="""\
  jvmsctl toolchain add 17 /usr/lib/jvm/java-17-openjdk
  jvmsctl toolchain add 17 /opt/jdk-17.0.9 --replace
  jvmsctl toolchain add future /not/yet/there --force"""
)
@click.argument("toolchain_name")
@click.argument("java_home", type=click.Path(path_type=Path))
@click.option("--replace", is_flag=True, help="Overwrite an existing toolchain of the same name.")
@force_option
@click.pass_obj
def add(
    app: AppContext, toolchain_name: str, java_home: Path, replace: bool, force: bool
) -> None:
    """Register JAVA_HOME as TOOLCHAIN_NAME."""
    from jvmsctl.services.toolchain import ToolchainService

    app.emit(
        ToolchainService(app.installation).add(
            toolchain_name, java_home, replace=replace, force=force
        )
    )


@toolchain.command("list", examples="  jvmsctl toolchain list\n  jvmsctl --json toolchain list")
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List registered toolchains (* marks the default)."""
    from jvmsctl.services.toolchain import ToolchainService

    app.emit(ToolchainService(app.installation).list_toolchains())


@toolchain.command(examples="  jvmsctl toolchain remove 8\n  jvmsctl toolchain remove 8 --force")
@click.argument("toolchain_name")
@force_option
@click.pass_obj
def remove(app: AppContext, toolchain_name: str, force: bool) -> None:
    """Remove the toolchain registered as TOOLCHAIN_NAME."""
    from jvmsctl.services.toolchain import ToolchainService

    app.emit(ToolchainService(app.installation).remove(toolchain_name, force=force))
