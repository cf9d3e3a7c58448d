"""Lay out a new installation directory."""

from __future__ import annotations

from pathlib import Path

from jvmsctl.domain.paths import absolutize
from jvmsctl.infrastructure.installation import Installation
from jvmsctl.services.base import run_action
from jvmsctl.services.result import ServiceResult


class InstallService:
    """Copies *source* (the running executable) into new installations.

    Unlike the configuration services this one has no installation of its
    own: it only writes to the destination, and never loads or creates a
    ``jvms.conf``. An existing one at the destination is left untouched.
    """

    def __init__(self, source: Path) -> None:
        self._source = source

    def install(self, destination: str | Path) -> ServiceResult:
        def action() -> ServiceResult:
            target = Installation(absolutize(destination))
            shims = target.install_binaries(self._source)
            return ServiceResult(
                ok=True,
                op="install",
                data={
                    "path": str(target.path),
                    "binary": str(target.binary_path),
                    "shims": [p.name for p in shims],
                    "config": str(target.config_file_path),
                },
            )

        return run_action("install", action)
