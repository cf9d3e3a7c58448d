"""Click plumbing shared by the jvmsctl commands.

Commands carry their usage examples (``jvmsctl override set 8 --path
legacy/``) in an ``examples=`` keyword; ``--examples`` prints them so
``--help`` stays a one-screen summary. Mutating commands share
:data:`force_option`.
"""

from __future__ import annotations

from typing import Any

import click


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class _ExamplesMixin:
    """Accepts ``examples=`` and wires up ``--examples`` when given."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


class JvmsCommand(_ExamplesMixin, click.Command):
    pass


class JvmsGroup(_ExamplesMixin, click.Group):
    """Groups such as ``toolchain`` and ``override``; subcommands get examples too."""

    command_class = JvmsCommand


# Lets a save through validation, e.g. removing the toolchain that is
# still the default.
force_option = click.option(
    "-f",
    "--force",
    is_flag=True,
    help="Save configuration changes even if the configuration is invalid.",
)
