"""Masking rule errors."""
from __future__ import annotations

from typing import Any

from sqlmask.kernel.errors import ConflictError, DomainError, NotFoundError, ValidationError
from sqlmask.masking.rules import AliasTarget, Target


class MaskingRuleError(DomainError):
    """Base for every error the rule builder reports."""

    default_code = "masking_rule_error"


class DuplicateTargetError(MaskingRuleError, ConflictError):
    """The table/column pair or alias is already used by a different rule.

    ``rule_id`` is the rule being built, ``existing_rule_id`` the rule that
    already owns ``target``.
    """

    default_code = "duplicate_target"

    def __init__(self, target: Target, existing_rule_id: str, rule_id: str | None = None) -> None:
        if isinstance(target, AliasTarget):
            msg = f"A data masking rule for alias '{target.alias_name}' already exists"
        else:
            msg = (
                f"A data masking rule for table '{target.table_name}' "
                f"and column '{target.column_name}' already exists"
            )
        super().__init__(msg, rule_id=rule_id, target=target, detail={"existing_rule_id": existing_rule_id})
        self.existing_rule_id = existing_rule_id


class InvalidIntervalError(MaskingRuleError, ValidationError):
    """The number masking interval has ``number_from > number_to``."""

    default_code = "invalid_interval"

    def __init__(
        self,
        number_from: float,
        number_to: float,
        *,
        rule_id: str | None = None,
        target: Target | None = None,
    ) -> None:
        super().__init__(
            f"Invalid number masking interval: NumberFrom ({number_from}) "
            f"must not be greater than NumberTo ({number_to})",
            errors=[{"field": "number_from", "msg": "greater than number_to"}],
            rule_id=rule_id,
            target=target,
            detail={"number_from": number_from, "number_to": number_to},
        )
        self.number_from = number_from
        self.number_to = number_to


class InvalidRuleInputError(MaskingRuleError, ValidationError):
    """User-supplied or wire-supplied rule fields are malformed."""

    default_code = "invalid_rule_input"

    def __init__(self, message: str, *, errors: list[dict[str, Any]], rule_id: str | None = None) -> None:
        super().__init__(message, errors=errors, rule_id=rule_id)


class MissingMaskingFunctionError(MaskingRuleError, ValidationError):
    """A new rule was requested without a masking function."""

    default_code = "missing_masking_function"

    def __init__(self, rule_id: str, target: Target | None = None) -> None:
        super().__init__(
            f"A masking function is required to create data masking rule '{rule_id}'",
            errors=[{"field": "masking_function", "msg": "required"}],
            rule_id=rule_id,
            target=target,
        )


class RuleAlreadyExistsError(MaskingRuleError, ConflictError):
    default_code = "rule_already_exists"

    def __init__(self, rule_id: str) -> None:
        super().__init__(f"A data masking rule with id '{rule_id}' already exists", rule_id=rule_id)


class RuleNotFoundError(MaskingRuleError, NotFoundError):
    default_code = "rule_not_found"

    def __init__(self, rule_id: str) -> None:
        super().__init__(f"Data masking rule '{rule_id}' not found", rule_id=rule_id)


__all__ = [
    "DuplicateTargetError",
    "InvalidIntervalError",
    "InvalidRuleInputError",
    "MaskingRuleError",
    "MissingMaskingFunctionError",
    "RuleAlreadyExistsError",
    "RuleNotFoundError",
]
