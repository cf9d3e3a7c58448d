"""Process entry point: pick shim or CLI mode from the invocation name.

The console script ``jvmsctl`` and every shim hard link (``java``,
``javac``, ...) start here. The mode is chosen once from ``argv[0]``.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click
from pydantic import ValidationError

from jvmsctl.config.logging import configure_logging
from jvmsctl.config.settings import JvmsSettings
from jvmsctl.domain.errors import JvmsError
from jvmsctl.domain.shims import ShimMode, detect_mode
from jvmsctl.infrastructure.installation import Installation
from jvmsctl.services.shim import ShimDispatcher

if TYPE_CHECKING:
    from collections.abc import Sequence

FAILURE_EXIT = 1


def run_shim(mode: ShimMode, argv: Sequence[str], cwd: Path | None = None) -> int:
    """Delegate to the real tool and return the exit status to use.

    ``argv[0]`` is the invocation token; the rest is forwarded untouched.
    Failures before the delegate starts are reported on stderr and map to
    exit status 1.
    """
    try:
        settings = JvmsSettings()
    except ValidationError as exc:
        click.echo(f"jvmsctl ({mode.tool}): invalid JVMSCTL_* environment: {exc}", err=True)
        return FAILURE_EXIT

    configure_logging(verbose=settings.verbose, log_json=settings.log_json, mode="shim")
    installation = Installation.current(argv[0], settings.home)
    try:
        return ShimDispatcher(installation).dispatch(mode, argv[1:], cwd=cwd)
    except JvmsError as exc:
        click.echo(f"jvmsctl ({mode.tool}): {exc.message}", err=True)
        return FAILURE_EXIT


def main(argv: Sequence[str] | None = None) -> None:
    """Console-script entry point."""
    argv = list(sys.argv if argv is None else argv)
    mode = detect_mode(argv[0])
    if isinstance(mode, ShimMode):
        raise SystemExit(run_shim(mode, argv))

    from jvmsctl.cli import cli

    cli.main(args=argv[1:], prog_name="jvmsctl")
