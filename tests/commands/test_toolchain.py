"""Tests for toolchain CLI commands."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner

from jvmsctl.cli import cli


@pytest.mark.usefixtures("_isolated_home")
class TestToolchainCommands:
    def test_add_without_default_fails(
        self, cli_runner: CliRunner, make_java_home: Callable[[str], Path]
    ) -> None:
        result = cli_runner.invoke(cli, ["--json", "toolchain", "add", "17", str(make_java_home("17"))])
        assert result.exit_code == 1
        assert result.stdout == ""
        payload = json.loads(result.stderr)
        assert payload["op"] == "toolchain_add"
        assert payload["error"]["code"] == "NO_DEFAULT"

    def test_add_force_then_list(
        self, cli_runner: CliRunner, make_java_home: Callable[[str], Path]
    ) -> None:
        home = make_java_home("17")
        added = cli_runner.invoke(cli, ["--json", "toolchain", "add", "17", str(home), "-f"])
        assert added.exit_code == 0, added.output

        result = cli_runner.invoke(cli, ["--json", "toolchain", "list"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["data"]["items"] == [{"name": "17", "java_home": str(home), "default": False}]

    def test_add_duplicate_refused(
        self, cli_runner: CliRunner, make_java_home: Callable[[str], Path]
    ) -> None:
        home = str(make_java_home("17"))
        cli_runner.invoke(cli, ["toolchain", "add", "17", home, "--force"])
        result = cli_runner.invoke(cli, ["toolchain", "add", "17", home, "--force"])
        assert result.exit_code == 1
        assert "already registered" in result.stderr

    def test_list_human(
        self, cli_runner: CliRunner, make_java_home: Callable[[str], Path]
    ) -> None:
        cli_runner.invoke(cli, ["toolchain", "add", "17", str(make_java_home("17")), "--force"])
        cli_runner.invoke(cli, ["default", "17"])
        result = cli_runner.invoke(cli, ["toolchain", "list"])
        assert result.exit_code == 0
        assert "Toolchains" in result.stdout
        assert "17" in result.stdout
        assert "*" in result.stdout

    def test_list_empty_human(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["toolchain", "list"])
        assert result.exit_code == 0
        assert "No toolchains registered." in result.stdout

    def test_remove_unknown(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "toolchain", "remove", "8"])
        assert result.exit_code == 1
        assert result.stderr.startswith("ERROR: toolchain_remove")

    def test_quiet_success(
        self, cli_runner: CliRunner, make_java_home: Callable[[str], Path]
    ) -> None:
        home = str(make_java_home("17"))
        result = cli_runner.invoke(cli, ["-q", "toolchain", "add", "17", home, "--force"])
        assert result.stdout.strip() == "OK: toolchain_add"
