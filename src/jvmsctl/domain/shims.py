"""Shim catalog and invocation-mode detection.

An installation holds one executable under many names. The name the
process was started under decides, once at start-up, whether it runs the
management CLI (:class:`PrimaryMode`) or impersonates a Java tool
(:class:`ShimMode`).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path, PurePath

# Invocation name -> binary name inside ``<java_home>/bin``.
SHIM_CATALOG: dict[str, str] = {
    "jar": "jar",
    "java": "java",
    "javac": "javac",
    "javadoc": "javadoc",
    "javah": "javah",
    "javap": "javap",
    "javaw": "javaw",
}

EXECUTABLE_SUFFIX = ".exe" if os.name == "nt" else ""


@dataclass(frozen=True)
class PrimaryMode:
    """Run the jvmsctl management CLI."""


@dataclass(frozen=True)
class ShimMode:
    """Impersonate *tool*, delegating to *delegate* in the active toolchain."""

    tool: str
    delegate: str


InvocationMode = PrimaryMode | ShimMode


def detect_mode(argv0: str) -> InvocationMode:
    """Classify the process by the file stem of its invocation token.

    ``/opt/jvms/javac`` and, on Windows, ``javac.exe`` both select the
    ``javac`` shim; anything outside the catalog is the primary CLI.
    """
    stem = PurePath(argv0).stem
    delegate = SHIM_CATALOG.get(stem)
    if delegate is None:
        return PrimaryMode()
    return ShimMode(tool=stem, delegate=delegate)


def delegate_path(java_home: Path, delegate: str) -> Path:
    """Path of *delegate* inside a toolchain: ``<java_home>/bin/<delegate>``."""
    return java_home / "bin" / f"{delegate}{EXECUTABLE_SUFFIX}"
