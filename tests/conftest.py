"""Shared pytest fixtures and test helpers for jvmsctl tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from jvmsctl.domain.configuration import Configuration
from jvmsctl.infrastructure.installation import Installation


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """configure_logging() replaces root handlers; undo that after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    jvms = logging.getLogger("jvmsctl")
    jvms_level = jvms.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    jvms.setLevel(jvms_level)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's JVMSCTL_* variables out of the tests."""
    for var in (
        "JVMSCTL_HOME",
        "JVMSCTL_VERBOSE",
        "JVMSCTL_JSON_OUTPUT",
        "JVMSCTL_QUIET",
        "JVMSCTL_LOG_JSON",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def install_dir(tmp_path: Path) -> Path:
    """Empty installation directory."""
    path = tmp_path / "jvms"
    path.mkdir()
    return path


@pytest.fixture
def installation(install_dir: Path) -> Installation:
    return Installation(install_dir)


@pytest.fixture
def workdir(tmp_path: Path) -> Path:
    """A project directory outside the installation."""
    path = tmp_path / "work"
    path.mkdir()
    return path


@pytest.fixture
def make_java_home(tmp_path: Path) -> Callable[[str], Path]:
    """Factory creating a fake JAVA_HOME (with a ``bin`` dir) under tmp_path."""

    def _make(name: str) -> Path:
        home = tmp_path / "jdks" / name
        (home / "bin").mkdir(parents=True)
        return home

    return _make


@pytest.fixture
def _isolated_home(
    install_dir: Path, workdir: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Point the CLI at a temp installation and run it from a temp workdir.

    Use via ``@pytest.mark.usefixtures("_isolated_home")`` on command test
    classes.
    """
    monkeypatch.setenv("JVMSCTL_HOME", str(install_dir))
    monkeypatch.chdir(workdir)


@pytest.fixture
def seed(installation: Installation) -> Callable[..., Configuration]:
    """Factory writing a configuration to the test installation (unvalidated)."""
    return lambda *args, **kwargs: seed_config(installation, *args, **kwargs)


def seed_config(
    installation: Installation,
    toolchains: dict[str, Path],
    *,
    default: str | None = None,
    overrides: list[tuple[Path, str]] | None = None,
) -> Configuration:
    """Write a configuration to *installation* without validating it."""
    config = Configuration()
    for name, home in toolchains.items():
        config.add_toolchain(name, home)
    if default is not None:
        config.set_default(default)
    for path, name in overrides or []:
        config.add_override(path, name)
    installation.store.save(config, skip_validation=True)
    return config
