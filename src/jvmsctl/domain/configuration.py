"""Configuration model: toolchains, default, and directory overrides.

The model is a plain in-memory aggregate. Mutations never validate; the
invariants are checked only by :meth:`Configuration.validate_configuration`
so callers can deliberately persist an invalid state (``--force``).

Two uniqueness rules are intentionally NOT enforced:

- ``add_toolchain`` overwrites an existing entry with the same name.
- ``add_override`` appends even when an override for the same path exists.
  Resolution then picks the last registered duplicate. Callers wanting
  replace semantics call ``remove_override`` first.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field, field_validator

from jvmsctl.domain.errors import InvalidConfigurationError
from jvmsctl.domain.paths import absolutize, is_within

if TYPE_CHECKING:
    from collections.abc import Iterator

# Invariant codes, in the order validate_configuration() checks them.
NO_TOOLCHAINS = "NO_TOOLCHAINS"
MISSING_JAVA_HOME = "MISSING_JAVA_HOME"
NO_DEFAULT = "NO_DEFAULT"
UNKNOWN_DEFAULT = "UNKNOWN_DEFAULT"
UNKNOWN_OVERRIDE_TOOLCHAIN = "UNKNOWN_OVERRIDE_TOOLCHAIN"


class Toolchain(BaseModel):
    """A named Java installation.

    ``name`` mirrors the key in :attr:`Configuration.toolchains` and is not
    written to disk.
    """

    model_config = {"frozen": True}

    name: str = Field(default="", exclude=True)
    java_home: Path


class Override(BaseModel):
    """Directory-scoped pin of a toolchain (applies to descendants too)."""

    model_config = {"frozen": True}

    path: Path
    toolchain: str


class Configuration(BaseModel):
    """Root aggregate persisted as ``jvms.conf``."""

    toolchains: dict[str, Toolchain] = Field(default_factory=dict)
    default: str | None = None
    overrides: list[Override] = Field(default_factory=list)

    @field_validator("toolchains", mode="before")
    @classmethod
    def _null_toolchains(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator("overrides", mode="before")
    @classmethod
    def _null_overrides(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("toolchains")
    @classmethod
    def _stamp_names(cls, value: dict[str, Toolchain]) -> dict[str, Toolchain]:
        return {
            name: tc if tc.name == name else tc.model_copy(update={"name": name})
            for name, tc in value.items()
        }

    # ------------------------------------------------------------------
    # Toolchains
    # ------------------------------------------------------------------

    def add_toolchain(self, name: str, java_home: str | os.PathLike[str]) -> Toolchain:
        """Register *name*, replacing any existing entry of the same name.

        The home directory is absolutized but not checked for existence.
        """
        toolchain = Toolchain(name=name, java_home=absolutize(java_home))
        self.toolchains[name] = toolchain
        return toolchain

    def remove_toolchain(self, name: str) -> None:
        self.toolchains.pop(name, None)

    def get_toolchain(self, name: str) -> Toolchain | None:
        return self.toolchains.get(name)

    def has_toolchain(self, name: str) -> bool:
        return name in self.toolchains

    def iter_toolchains(self) -> Iterator[Toolchain]:
        yield from self.toolchains.values()

    # ------------------------------------------------------------------
    # Default
    # ------------------------------------------------------------------

    def set_default(self, name: str) -> None:
        self.default = name

    def get_default(self) -> str | None:
        return self.default

    def get_default_toolchain(self) -> Toolchain | None:
        if self.default is None:
            return None
        return self.get_toolchain(self.default)

    # ------------------------------------------------------------------
    # Overrides
    # ------------------------------------------------------------------

    def add_override(self, path: str | os.PathLike[str], toolchain: str) -> Override:
        """Append an override for *path* (absolutized). Never deduplicates."""
        override = Override(path=absolutize(path), toolchain=toolchain)
        self.overrides.append(override)
        return override

    def remove_override(self, path: str | os.PathLike[str]) -> int:
        """Drop every override whose path equals *path*; return the count."""
        target = absolutize(path)
        kept = [o for o in self.overrides if o.path != target]
        removed = len(self.overrides) - len(kept)
        self.overrides = kept
        return removed

    def clean_overrides(self) -> list[Override]:
        """Drop overrides whose directory no longer exists.

        Survivors keep their relative order. Returns the removed entries.
        """
        kept: list[Override] = []
        removed: list[Override] = []
        for override in self.overrides:
            (kept if override.path.exists() else removed).append(override)
        self.overrides = kept
        return removed

    def get_overrides(self) -> list[Override]:
        return list(self.overrides)

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def resolve_override(self, directory: str | os.PathLike[str]) -> Override | None:
        """Return the most specific override covering *directory*.

        Matching is component-wise, so ``/foo`` never covers ``/foobar``.
        Candidates all lie on *directory*'s ancestor chain, so the deepest
        one is within every other. For duplicate paths the last entry wins.
        """
        target = absolutize(directory)
        best: Override | None = None
        for override in self.overrides:
            if not is_within(target, override.path):
                continue
            if best is None or is_within(override.path, best.path):
                best = override
        return best

    def get_override_toolchain(self, directory: str | os.PathLike[str]) -> Toolchain | None:
        """Toolchain pinned by the matching override, if it names a known one."""
        override = self.resolve_override(directory)
        if override is None:
            return None
        return self.get_toolchain(override.toolchain)

    def get_toolchain_for_directory(self, directory: str | os.PathLike[str]) -> Toolchain | None:
        """Override toolchain for *directory*, falling back to the default."""
        toolchain = self.get_override_toolchain(directory)
        if toolchain is not None:
            return toolchain
        return self.get_default_toolchain()

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def validate_configuration(self) -> None:
        """Check the invariants in order, raising on the first violation.

        1. At least one toolchain is registered.
        2. Every toolchain's ``java_home`` exists.
        3. A default is set and names a registered toolchain.
        4. Every override names a registered toolchain.

        Raises:
            InvalidConfigurationError: ``code`` identifies the rule,
                ``entity`` the offending toolchain or override path.
        """
        if not self.toolchains:
            raise InvalidConfigurationError(
                "Configuration has no toolchains.", code=NO_TOOLCHAINS
            )

        for toolchain in self.toolchains.values():
            if not toolchain.java_home.exists():
                msg = (
                    f"Toolchain {toolchain.name} does not point to a valid java home: "
                    f"{toolchain.java_home}"
                )
                raise InvalidConfigurationError(
                    msg, code=MISSING_JAVA_HOME, entity=toolchain.name
                )

        if self.default is None:
            raise InvalidConfigurationError(
                "Configuration does not have a default toolchain.", code=NO_DEFAULT
            )
        if not self.has_toolchain(self.default):
            msg = f"Default toolchain references an unknown toolchain: {self.default}"
            raise InvalidConfigurationError(msg, code=UNKNOWN_DEFAULT, entity=self.default)

        for override in self.overrides:
            if not self.has_toolchain(override.toolchain):
                msg = (
                    f"Override at {override.path} references an unknown toolchain: "
                    f"{override.toolchain}"
                )
                raise InvalidConfigurationError(
                    msg,
                    code=UNKNOWN_OVERRIDE_TOOLCHAIN,
                    entity=str(override.path),
                    toolchain=override.toolchain,
                )
