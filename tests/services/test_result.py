"""Tests for ServiceResult and ServiceError."""

import json

import pytest

from jvmsctl.domain.errors import InvalidConfigurationError
from jvmsctl.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="toolchain_add", data={"name": "17"})
        assert result.ok is True
        assert result.data == {"name": "17"}
        assert result.warnings == []
        assert result.error is None

    def test_failure_helper(self) -> None:
        result = ServiceResult.failure("default_set", "UNKNOWN_TOOLCHAIN", "nope", name="21")
        assert result.ok is False
        assert result.error.code == "UNKNOWN_TOOLCHAIN"
        assert result.error.detail == {"name": "21"}

    def test_json_serialization(self) -> None:
        parsed = json.loads(ServiceResult(ok=True, op="test", data={"k": "v"}).model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["k"] == "v"

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="test")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]


class TestServiceError:
    def test_from_exception(self) -> None:
        exc = InvalidConfigurationError("bad default", code="UNKNOWN_DEFAULT", entity="21")
        error = ServiceError.from_exception(exc)
        assert error.code == "UNKNOWN_DEFAULT"
        assert error.message == "bad default"
        assert error.detail == {"entity": "21"}
