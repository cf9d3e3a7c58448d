"""Tests for the current CLI command."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner

from jvmsctl.cli import cli
from jvmsctl.domain.configuration import Configuration


@pytest.mark.usefixtures("_isolated_home")
class TestCurrentCommand:
    def test_nothing_configured(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["current"])
        assert result.exit_code == 1
        assert "no default toolchain" in result.stderr

    def test_override_in_cwd(
        self, cli_runner: CliRunner, seed: Callable[..., Configuration], workdir: Path
    ) -> None:
        seed({"8": Path("/opt/jdk8"), "17": Path("/opt/jdk17")}, default="17",
             overrides=[(workdir, "8")])
        result = cli_runner.invoke(cli, ["--json", "current"])
        data = json.loads(result.stdout)["data"]
        assert data["toolchain"] == "8"
        assert data["source"] == "override"

    def test_human_output(
        self, cli_runner: CliRunner, seed: Callable[..., Configuration], tmp_path: Path
    ) -> None:
        seed({"17": Path("/opt/jdk17")}, default="17")
        result = cli_runner.invoke(cli, ["current", str(tmp_path)])
        assert result.exit_code == 0
        assert "17" in result.stdout
        assert "(default)" in result.stdout
        assert "/opt/jdk17" in result.stdout
