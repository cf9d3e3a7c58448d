"""Installation directory layout and binary installation.

An installation directory holds the primary executable, one hard link per
shim name (all sharing the same content), and ``jvms.conf``::

    <dir>/jvmsctl
    <dir>/java      -> same inode as jvmsctl
    <dir>/javac     -> same inode as jvmsctl
    ...
    <dir>/jvms.conf
"""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path

from jvmsctl.domain.errors import InstallError
from jvmsctl.domain.paths import absolutize
from jvmsctl.domain.shims import EXECUTABLE_SUFFIX, SHIM_CATALOG
from jvmsctl.infrastructure.store import CONFIG_FILENAME, ConfigurationStore

PRIMARY_BINARY = "jvmsctl"

logger = logging.getLogger(__name__)


class Installation:
    """A jvmsctl installation rooted at *path*."""

    def __init__(self, path: Path) -> None:
        self.path = path

    @classmethod
    def current(cls, argv0: str, home: Path | None = None) -> Installation:
        """Locate the running installation.

        An explicit *home* (``--home`` / ``JVMSCTL_HOME``) wins; otherwise
        the directory containing the invoked executable is used.
        """
        if home is not None:
            return cls(absolutize(home))
        return cls(absolutize(argv0).parent)

    @property
    def config_file_path(self) -> Path:
        return self.path / CONFIG_FILENAME

    @property
    def store(self) -> ConfigurationStore:
        return ConfigurationStore(self.config_file_path)

    @property
    def binary_path(self) -> Path:
        return self.path / f"{PRIMARY_BINARY}{EXECUTABLE_SUFFIX}"

    def shim_paths(self) -> list[Path]:
        return [self.path / f"{name}{EXECUTABLE_SUFFIX}" for name in SHIM_CATALOG]

    def install_binaries(self, source: Path) -> list[Path]:
        """Copy *source* in as the primary binary and hard-link every shim.

        Stale shim entries from an earlier install are replaced. Returns the
        shim paths created.

        Raises:
            InstallError: Any copy or link step failed.
        """
        try:
            self.path.mkdir(parents=True, exist_ok=True)
            if source != self.binary_path:
                logger.info("Copying %s to %s", source, self.binary_path)
                shutil.copy2(source, self.binary_path)

            linked: list[Path] = []
            for shim in self.shim_paths():
                if shim.exists() or shim.is_symlink():
                    shim.unlink()
                logger.info("Linking %s to %s", shim, self.binary_path)
                os.link(self.binary_path, shim)
                linked.append(shim)
        except OSError as exc:
            msg = f"Failed to install binaries into {self.path}: {exc}"
            raise InstallError(msg, path=str(self.path)) from exc
        return linked
