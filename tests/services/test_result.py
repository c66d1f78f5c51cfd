"""Tests for ToolResult and ToolError."""

import json

import pytest
from pydantic import ValidationError

from medea.services.errors import ErrorCode, InvocationError
from medea.services.result import ToolError, ToolResult


class TestToolResult:
    def test_success_construction(self) -> None:
        result = ToolResult(ok=True, op="hash", data={"text": ["abc"]})
        assert result.ok is True
        assert result.op == "hash"
        assert result.error is None
        assert result.exit_code == 0

    def test_failure_from_exception(self) -> None:
        exc = InvocationError(ErrorCode.DECODE_ERROR, "bad input", position=3)
        result = ToolResult.failure("base", exc)
        assert result.ok is False
        assert result.error == ToolError(code="DECODE_ERROR", message="bad input", detail={"position": 3})
        assert result.exit_code == 1

    def test_usage_failure_exit_code(self) -> None:
        exc = InvocationError(ErrorCode.MISSING_OPTION, "missing")
        assert ToolResult.failure("rnd", exc).exit_code == 2

    def test_ok_with_error_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ToolResult(ok=True, op="x", error=ToolError(code="DECODE_ERROR", message="m"))

    def test_failure_with_data_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ToolResult(ok=False, op="x", data={"text": ["a"]})

    def test_json_serialization(self) -> None:
        result = ToolResult(ok=True, op="uuid", data={"text": ["a", "b"], "version": 4})
        parsed = json.loads(result.model_dump_json())
        assert parsed == {
            "ok": True,
            "op": "uuid",
            "data": {"text": ["a", "b"], "version": 4},
            "error": None,
        }

    def test_bytes_serialize_as_text(self) -> None:
        result = ToolResult(ok=True, op="random", data={"raw": b"\x00\x01\x02"})
        parsed = json.loads(result.model_dump_json())
        assert isinstance(parsed["data"]["raw"], str)

    def test_frozen(self) -> None:
        result = ToolResult(ok=True, op="test")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]
