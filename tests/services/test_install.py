"""Tests for InstallService."""

from __future__ import annotations

from pathlib import Path

import pytest

from jvmsctl.domain.shims import SHIM_CATALOG
from jvmsctl.services.install import InstallService


@pytest.fixture
def source(tmp_path: Path) -> Path:
    path = tmp_path / "jvmsctl-build"
    path.write_text("binary")
    return path


class TestInstall:
    def test_install(self, source: Path, tmp_path: Path) -> None:
        dest = tmp_path / "dest"

        result = InstallService(source).install(dest)

        assert result.ok is True
        assert result.data["path"] == str(dest)
        assert sorted(Path(s).stem for s in result.data["shims"]) == sorted(SHIM_CATALOG)
        assert (dest / "java").read_text() == "binary"

    def test_does_not_create_config(self, source: Path, tmp_path: Path) -> None:
        result = InstallService(source).install(tmp_path / "dest")
        assert not Path(result.data["config"]).exists()

    def test_failure_is_reported(self, tmp_path: Path) -> None:
        result = InstallService(tmp_path / "missing").install(tmp_path / "dest")
        assert result.ok is False
        assert result.error.code == "INSTALL_FAILED"
