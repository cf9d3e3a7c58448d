"""Tests for the install CLI command."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest
from click.testing import CliRunner

from jvmsctl.cli import cli
from jvmsctl.domain.shims import SHIM_CATALOG


@pytest.mark.usefixtures("_isolated_home")
class TestInstallCommand:
    def test_install(
        self, cli_runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        source = tmp_path / "dist" / "jvmsctl"
        source.parent.mkdir()
        source.write_text("#!/bin/sh\n")
        monkeypatch.setattr(sys, "argv", [str(source)])
        dest = tmp_path / "dest"

        result = cli_runner.invoke(cli, ["--json", "install", str(dest)])

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)["data"]
        assert data["path"] == str(dest)
        for name in SHIM_CATALOG:
            assert any(Path(s).stem == name for s in data["shims"])

    def test_install_failure(
        self, cli_runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(sys, "argv", [str(tmp_path / "gone")])
        result = cli_runner.invoke(cli, ["--json", "install", str(tmp_path / "dest")])
        assert result.exit_code == 1
        assert json.loads(result.stderr)["error"]["code"] == "INSTALL_FAILED"

    def test_ignores_broken_current_config(
        self,
        cli_runner: CliRunner,
        install_dir: Path,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        (install_dir / "jvms.conf").write_text("{broken")
        source = tmp_path / "jvmsctl"
        source.write_text("#!/bin/sh\n")
        monkeypatch.setattr(sys, "argv", [str(source)])

        result = cli_runner.invoke(cli, ["install", str(tmp_path / "dest")])

        assert result.exit_code == 0, result.output
