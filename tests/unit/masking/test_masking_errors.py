"""Unit tests for masking rule errors."""

from __future__ import annotations

import json

from sqlmask.kernel.errors import ConflictError, NotFoundError, ValidationError
from sqlmask.masking import (
    AliasTarget,
    ColumnTarget,
    DuplicateTargetError,
    InvalidIntervalError,
    InvalidRuleInputError,
    MaskingRuleError,
    MissingMaskingFunctionError,
    RuleAlreadyExistsError,
    RuleNotFoundError,
)


class TestHierarchy:
    def test_all_are_masking_rule_errors(self) -> None:
        for cls in (
            DuplicateTargetError,
            InvalidIntervalError,
            InvalidRuleInputError,
            MissingMaskingFunctionError,
            RuleAlreadyExistsError,
            RuleNotFoundError,
        ):
            assert issubclass(cls, MaskingRuleError)

    def test_kernel_categories(self) -> None:
        assert issubclass(DuplicateTargetError, ConflictError)
        assert issubclass(RuleAlreadyExistsError, ConflictError)
        assert issubclass(InvalidIntervalError, ValidationError)
        assert issubclass(InvalidRuleInputError, ValidationError)
        assert issubclass(RuleNotFoundError, NotFoundError)


class TestMessages:
    def test_duplicate_column_message(self) -> None:
        err = DuplicateTargetError(ColumnTarget("Orders", "Card"), "4")
        assert err.message == "A data masking rule for table 'Orders' and column 'Card' already exists"
        assert err.code == "duplicate_target"

    def test_duplicate_alias_message(self) -> None:
        err = DuplicateTargetError(AliasTarget("card"), "4")
        assert err.message == "A data masking rule for alias 'card' already exists"

    def test_interval_error_serialises(self) -> None:
        payload = json.loads(str(InvalidIntervalError(3.0, 1.0)))
        assert payload["code"] == "invalid_interval"
        assert payload["detail"] == {"number_from": 3.0, "number_to": 1.0}
        assert payload["errors"][0]["field"] == "number_from"

    def test_not_found_message(self) -> None:
        err = RuleNotFoundError("7")
        assert err.message == "Data masking rule '7' not found"
        assert err.rule_id == "7"
        assert err.to_dict() == {"code": "rule_not_found", "message": err.message, "rule_id": "7"}

    def test_duplicate_carries_rule_and_target(self) -> None:
        err = DuplicateTargetError(ColumnTarget("Orders", "Card"), "4", rule_id="9")
        payload = err.to_dict()
        assert payload["rule_id"] == "9"
        assert payload["target"] == "Orders.Card"
        assert payload["detail"] == {"existing_rule_id": "4"}

    def test_missing_function_carries_target(self) -> None:
        payload = MissingMaskingFunctionError("3", AliasTarget("card")).to_dict()
        assert (payload["rule_id"], payload["target"]) == ("3", "card")
        assert payload["errors"] == [{"field": "masking_function", "msg": "required"}]
