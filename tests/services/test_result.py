"""Tests for ServiceResult and ServiceError."""

import json

import pytest

from romanctl.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="decode", data={"numeral": "XLII", "value": 42})
        assert result.ok is True
        assert result.op == "decode"
        assert result.data == {"numeral": "XLII", "value": 42}
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="OUT_OF_RANGE", message="0 not in range 1..3999")
        result = ServiceResult(ok=False, op="encode", error=error)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "OUT_OF_RANGE"

    def test_failure_shorthand(self) -> None:
        result = ServiceResult.failure("decode", "INVALID_NUMERAL", "bad", remainder="I")
        assert result.ok is False
        assert result.op == "decode"
        assert result.data == {}
        assert result.error == ServiceError(
            code="INVALID_NUMERAL", message="bad", detail={"remainder": "I"}
        )

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="table", data={"count": 30}, meta={"max": 3999})
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["op"] == "table"
        assert parsed["data"]["count"] == 30
        assert parsed["meta"]["max"] == 3999

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="test")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]


class TestServiceError:
    def test_default_detail(self) -> None:
        error = ServiceError(code="E001", message="bad")
        assert error.detail == {}
