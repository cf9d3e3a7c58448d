"""ShimDispatcher — run the real Java tool for the active toolchain.

Dispatch protocol for a process started as a catalog name:

1. Load the configuration (errors abort; nothing is spawned).
2. Resolve the toolchain for the working directory: deepest matching
   override, else the default.
3. No toolchain -> :class:`ToolchainNotFoundError`; nothing is spawned.
4. Delegate is ``<java_home>/bin/<tool>`` (``.exe`` on Windows).
5. Spawn it with ``JAVA_HOME`` pointing at the toolchain and every
   argument after the invocation token, verbatim and in order.
6. Block until it exits and hand back its exit status. Interrupt and
   termination signals are ignored by the shim while it waits; the
   terminal delivers them to the delegate, which decides how to exit.
"""

from __future__ import annotations

import os
import signal
import subprocess
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING, Any

import structlog

from jvmsctl.domain.errors import DelegateLaunchError, ToolchainNotFoundError
from jvmsctl.domain.shims import delegate_path

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping, Sequence

    from jvmsctl.domain.configuration import Toolchain
    from jvmsctl.domain.shims import ShimMode
    from jvmsctl.infrastructure.installation import Installation

JAVA_HOME_VAR = "JAVA_HOME"

log = structlog.get_logger(__name__)

# SIGQUIT does not exist on Windows.
WAIT_SIGNALS = tuple(
    getattr(signal, name) for name in ("SIGINT", "SIGQUIT", "SIGTERM") if hasattr(signal, name)
)


def exit_status(returncode: int) -> int:
    """Map a child return code to our own exit status.

    A child killed by signal N reports ``-N``; shells report that as
    ``128 + N``, so we do too.
    """
    if returncode < 0:
        return 128 - returncode
    return returncode


@contextmanager
def ignoring_signals(signums: Sequence[int] = WAIT_SIGNALS) -> Iterator[None]:
    """Ignore *signums* in this process for the duration of the block.

    Previous handlers are restored on exit, even if the block raises.
    """
    previous: dict[int, Any] = {}
    try:
        for signum in signums:
            previous[signum] = signal.signal(signum, signal.SIG_IGN)
        yield
    finally:
        for signum, handler in previous.items():
            # None: the old handler was not installed from Python.
            signal.signal(signum, signal.SIG_DFL if handler is None else handler)


class ShimDispatcher:
    """Resolves and spawns delegates for one installation.

    Args:
        installation: Where ``jvms.conf`` lives.
        environ: Base environment for the delegate (default: ``os.environ``).
    """

    def __init__(
        self,
        installation: Installation,
        *,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self._installation = installation
        self._environ = environ

    def resolve(self, cwd: Path) -> Toolchain:
        """Load the configuration and pick the toolchain for *cwd*."""
        config = self._installation.store.load()
        toolchain = config.get_toolchain_for_directory(cwd)
        if toolchain is None:
            msg = f"Failed to find toolchain for {cwd} and default toolchain not configured."
            raise ToolchainNotFoundError(msg, directory=str(cwd))
        return toolchain

    def build_command(
        self, mode: ShimMode, toolchain: Toolchain, args: Sequence[str]
    ) -> tuple[list[str], dict[str, str]]:
        """Return ``(argv, env)`` for the delegate process."""
        executable = delegate_path(toolchain.java_home, mode.delegate)
        env = dict(os.environ if self._environ is None else self._environ)
        env[JAVA_HOME_VAR] = str(toolchain.java_home)
        return [str(executable), *args], env

    def dispatch(self, mode: ShimMode, args: Sequence[str], cwd: Path | None = None) -> int:
        """Run the delegate for *mode* and return its exit status.

        Raises:
            ConfigurationIOError: The configuration could not be read.
            MalformedConfigurationError: The configuration could not be parsed.
            ToolchainNotFoundError: No override or default applies.
            DelegateLaunchError: The delegate could not be started.
        """
        directory = cwd if cwd is not None else Path.cwd()
        toolchain = self.resolve(directory)
        argv, env = self.build_command(mode, toolchain, args)

        log.debug(
            "delegating",
            tool=mode.tool,
            toolchain=toolchain.name,
            executable=argv[0],
            argc=len(args),
        )
        try:
            process = subprocess.Popen(argv, env=env)
        except OSError as exc:
            msg = f"Failed to launch {argv[0]}: {exc}"
            raise DelegateLaunchError(msg, executable=argv[0], toolchain=toolchain.name) from exc

        # Spawned before ignoring: SIG_IGN would be inherited across exec.
        with ignoring_signals():
            returncode = process.wait()

        status = exit_status(returncode)
        log.debug("delegate exited", tool=mode.tool, status=status)
        return status
