"""Tests for single-value constraint checks."""

from __future__ import annotations

from projctl.domain.validation import Constraint, NumberValue
from projctl.services.check import check_value


class TestCheckValue:
    def test_valid_value(self) -> None:
        result = check_value(Constraint(value="hello", required=True, min_length=5))
        assert result.ok
        assert result.op == "check_value"
        assert result.data["kind"] == "text"
        assert result.data["rules"] == {"required": True, "min_length": 5}

    def test_invalid_value(self) -> None:
        result = check_value(Constraint(value=NumberValue(number=9), max=5))
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "CONSTRAINT_FAILED"
        assert result.error.detail["kind"] == "number"
        assert result.error.detail["value"] == "9"

    def test_no_rules(self) -> None:
        result = check_value(Constraint(value=""))
        assert result.ok
        assert result.data["rules"] == {}
