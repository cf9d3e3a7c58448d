"""ToolchainService — register, list, and remove toolchains; manage the default."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jvmsctl.domain.paths import absolutize
from jvmsctl.services.base import BaseService
from jvmsctl.services.result import ServiceResult

TOOLCHAIN_EXISTS = "TOOLCHAIN_EXISTS"
NO_TOOLCHAIN = "NO_TOOLCHAIN"


class ToolchainService(BaseService):
    """Toolchain CRUD plus default selection and directory resolution."""

    # ------------------------------------------------------------------
    # Toolchains
    # ------------------------------------------------------------------

    def add(
        self,
        name: str,
        java_home: str | Path,
        *,
        replace: bool = False,
        force: bool = False,
    ) -> ServiceResult:
        """Register *name*. An existing name is refused unless *replace*."""

        def action() -> ServiceResult:
            config = self._load()
            existed = config.has_toolchain(name)
            if existed and not replace:
                return ServiceResult.failure(
                    "toolchain_add",
                    TOOLCHAIN_EXISTS,
                    f"Toolchain already registered for name: {name}",
                    name=name,
                )
            toolchain = config.add_toolchain(name, java_home)
            self._save(config, force=force)

            warnings: list[str] = []
            if not toolchain.java_home.is_dir():
                warnings.append(f"{toolchain.java_home} is not a directory")
            return ServiceResult(
                ok=True,
                op="toolchain_add",
                data={
                    "name": name,
                    "java_home": str(toolchain.java_home),
                    "replaced": existed,
                },
                warnings=warnings,
            )

        return self._run("toolchain_add", action)

    def list_toolchains(self) -> ServiceResult:
        def action() -> ServiceResult:
            config = self._load()
            default = config.get_default()
            items: list[dict[str, Any]] = [
                {
                    "name": tc.name,
                    "java_home": str(tc.java_home),
                    "default": tc.name == default,
                }
                for tc in sorted(config.iter_toolchains(), key=lambda tc: tc.name)
            ]
            return ServiceResult(
                ok=True,
                op="toolchain_list",
                data={"items": items, "count": len(items), "default": default},
            )

        return self._run("toolchain_list", action)

    def remove(self, name: str, *, force: bool = False) -> ServiceResult:
        def action() -> ServiceResult:
            config = self._load()
            if not config.has_toolchain(name):
                return self._unknown_toolchain("toolchain_remove", name)
            config.remove_toolchain(name)
            self._save(config, force=force)
            return ServiceResult(ok=True, op="toolchain_remove", data={"name": name})

        return self._run("toolchain_remove", action)

    # ------------------------------------------------------------------
    # Default
    # ------------------------------------------------------------------

    def get_default(self) -> ServiceResult:
        def action() -> ServiceResult:
            config = self._load()
            toolchain = config.get_default_toolchain()
            return ServiceResult(
                ok=True,
                op="default_get",
                data={
                    "default": config.get_default(),
                    "java_home": str(toolchain.java_home) if toolchain else None,
                },
            )

        return self._run("default_get", action)

    def set_default(self, name: str, *, force: bool = False) -> ServiceResult:
        def action() -> ServiceResult:
            config = self._load()
            if not config.has_toolchain(name):
                return self._unknown_toolchain("default_set", name)
            previous = config.get_default()
            config.set_default(name)
            self._save(config, force=force)
            return ServiceResult(
                ok=True,
                op="default_set",
                data={"default": name, "previous": previous},
            )

        return self._run("default_set", action)

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def current(self, directory: str | Path | None = None) -> ServiceResult:
        """Report which toolchain a shim would use in *directory* (default: cwd)."""

        def action() -> ServiceResult:
            target = absolutize(directory if directory is not None else Path.cwd())
            config = self._load()
            toolchain = config.get_override_toolchain(target)
            override = config.resolve_override(target) if toolchain else None
            source = "override"
            if toolchain is None:
                toolchain = config.get_default_toolchain()
                source = "default"
            if toolchain is None:
                return ServiceResult.failure(
                    "current",
                    NO_TOOLCHAIN,
                    f"No override matches {target} and no default toolchain is configured.",
                    directory=str(target),
                )
            return ServiceResult(
                ok=True,
                op="current",
                data={
                    "directory": str(target),
                    "toolchain": toolchain.name,
                    "java_home": str(toolchain.java_home),
                    "source": source,
                    "override_path": str(override.path) if override else None,
                },
            )

        return self._run("current", action)
