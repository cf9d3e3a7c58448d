"""Tests for format_result and the Rich renderers."""

import json

from jvmsctl.output.formatters import OutputSettings, format_result
from jvmsctl.services.result import ServiceError, ServiceResult


def _ok(op: str = "test", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "test", msg: str = "fail") -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code="ERR", message=msg, detail={"entity": "17"}),
    )


class TestFormatResultJSON:
    def test_success(self) -> None:
        output = format_result(_ok("toolchain_add", name="17"), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is True
        assert data["data"]["name"] == "17"

    def test_error(self) -> None:
        output = format_result(_err(msg="Bad"), settings=OutputSettings(json_output=True))
        assert json.loads(output)["error"]["message"] == "Bad"


class TestFormatResultQuiet:
    def test_success(self) -> None:
        assert format_result(_ok("default_set"), settings=OutputSettings(quiet=True)) == (
            "OK: default_set"
        )

    def test_error(self) -> None:
        output = format_result(_err("default_set", "Bad input"), settings=OutputSettings(quiet=True))
        assert output.startswith("ERROR: default_set")
        assert "Bad input" in output


class TestRichRendering:
    def test_generic(self) -> None:
        output = format_result(_ok("override_set", path="/work", toolchain="8", replaced=0))
        assert output.splitlines()[0].startswith("OK")
        assert "path: /work" in output
        assert "toolchain: 8" in output

    def test_generic_none_and_lists(self) -> None:
        output = format_result(_ok("install", shims=["java", "javac"], config=None))
        assert "shims: java, javac" in output
        assert "config: -" in output

    def test_error_verbose_shows_code(self) -> None:
        output = format_result(_err(msg="boom"), settings=OutputSettings(verbose=True))
        assert "ERROR" in output
        assert "boom" in output
        assert "code: ERR" in output
        assert "entity: 17" in output

    def test_error_plain_hides_code(self) -> None:
        assert "code: ERR" not in format_result(_err(msg="boom"))

    def test_toolchain_table(self) -> None:
        items = [
            {"name": "17", "java_home": "/opt/jdk17", "default": True},
            {"name": "8", "java_home": "/opt/jdk8", "default": False},
        ]
        output = format_result(_ok("toolchain_list", items=items, count=2, default="17"))
        assert "Toolchains" in output
        assert "/opt/jdk17" in output
        assert "/opt/jdk8" in output

    def test_override_table_empty(self) -> None:
        output = format_result(_ok("override_list", items=[], count=0))
        assert output == "No overrides registered."

    def test_default_get(self) -> None:
        output = format_result(_ok("default_get", default="17", java_home="/opt/jdk17"))
        assert output == "Default toolchain: 17"
