"""Subcommand modules for jvmsctl."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register command groups and standalone commands on the root group."""
    from jvmsctl.commands.current import current
    from jvmsctl.commands.default import default
    from jvmsctl.commands.install import install
    from jvmsctl.commands.override import override
    from jvmsctl.commands.toolchain import toolchain

    cli.add_command(toolchain)
    cli.add_command(override)

    cli.add_command(default)
    cli.add_command(install)
    cli.add_command(current)
