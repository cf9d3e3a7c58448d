"""Pin toolchains to directories."""

from __future__ import annotations

from pathlib import Path

from jvmsctl.domain.paths import absolutize
from jvmsctl.services.base import BaseService
from jvmsctl.services.result import ServiceResult


class OverrideService(BaseService):
    """Set, list, remove, and clean directory overrides."""

    def set(
        self,
        toolchain: str,
        directory: str | Path | None = None,
        *,
        force: bool = False,
    ) -> ServiceResult:
        """Pin *toolchain* to *directory* (default: cwd), replacing any pin there."""

        def action() -> ServiceResult:
            config = self._load()
            if not config.has_toolchain(toolchain):
                return self._unknown_toolchain("override_set", toolchain)
            target = absolutize(directory if directory is not None else Path.cwd())
            replaced = config.remove_override(target)
            config.add_override(target, toolchain)
            self._save(config, force=force)

            warnings: list[str] = []
            if not target.is_dir():
                warnings.append(f"{target} does not exist; 'override clean' will drop it")
            return ServiceResult(
                ok=True,
                op="override_set",
                data={"path": str(target), "toolchain": toolchain, "replaced": replaced},
                warnings=warnings,
            )

        return self._run("override_set", action)

    def list_overrides(self) -> ServiceResult:
        def action() -> ServiceResult:
            config = self._load()
            items = [
                {"path": str(o.path), "toolchain": o.toolchain}
                for o in config.get_overrides()
            ]
            return ServiceResult(
                ok=True,
                op="override_list",
                data={"items": items, "count": len(items)},
            )

        return self._run("override_list", action)

    def remove(self, directory: str | Path | None = None, *, force: bool = False) -> ServiceResult:
        def action() -> ServiceResult:
            config = self._load()
            target = absolutize(directory if directory is not None else Path.cwd())
            removed = config.remove_override(target)
            self._save(config, force=force)

            warnings: list[str] = []
            if removed == 0:
                warnings.append(f"No override registered for {target}")
            return ServiceResult(
                ok=True,
                op="override_remove",
                data={"path": str(target), "removed": removed},
                warnings=warnings,
            )

        return self._run("override_remove", action)

    def clean(self, *, force: bool = False) -> ServiceResult:
        """Drop overrides for directories that no longer exist."""

        def action() -> ServiceResult:
            config = self._load()
            removed = config.clean_overrides()
            self._save(config, force=force)
            return ServiceResult(
                ok=True,
                op="override_clean",
                data={
                    "removed": [
                        {"path": str(o.path), "toolchain": o.toolchain} for o in removed
                    ],
                    "count": len(removed),
                },
            )

        return self._run("override_clean", action)
