"""Tests for ServiceResult and ServiceError."""

import json

import pytest

from melclock.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="calculate", data={"categories": {}})
        assert result.ok is True
        assert result.op == "calculate"
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="INVALID_DISCOVERY", message="bad date")
        result = ServiceResult(ok=False, op="calculate", error=error)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "INVALID_DISCOVERY"
        assert result.error.detail == {}

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="calculate", data={"current_time": "x"}, warnings=["w"])
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["current_time"] == "x"
        assert parsed["warnings"] == ["w"]

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="calculate")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]
