"""Rule placements – how the builder finds its rule and puts it back.

A placement is chosen by the calling use-case: :class:`CreateRule` for a new
rule, :class:`UpdateRule` for an existing one.
"""
from __future__ import annotations

import abc

from sqlmask.masking.errors import (
    MaskingRuleError,
    MissingMaskingFunctionError,
    RuleAlreadyExistsError,
    RuleNotFoundError,
)
from sqlmask.masking.inputs import RuleInput
from sqlmask.masking.rules import MaskingRule, find_rule


class RulePlacement(abc.ABC):
    """Strategy: locate the rule to operate on and splice it back."""

    def check(self, rules: list[MaskingRule], rule_id: str, user_input: RuleInput) -> MaskingRuleError | None:  # noqa: ARG002
        """Use-case specific validation; runs before anything is located."""
        return None

    @abc.abstractmethod
    def locate(self, rules: list[MaskingRule], rule_id: str) -> MaskingRule: ...

    @abc.abstractmethod
    def splice(self, rules: list[MaskingRule], rule: MaskingRule) -> list[MaskingRule]: ...


class CreateRule(RulePlacement):
    """Place a brand-new rule at the end of the rule set."""

    def check(self, rules: list[MaskingRule], rule_id: str, user_input: RuleInput) -> MaskingRuleError | None:
        if find_rule(rules, rule_id) is not None:
            return RuleAlreadyExistsError(rule_id)
        if not user_input.masking_function:
            return MissingMaskingFunctionError(rule_id, user_input.target())
        return None

    def locate(self, rules: list[MaskingRule], rule_id: str) -> MaskingRule:  # noqa: ARG002
        return MaskingRule(rule_id=rule_id)

    def splice(self, rules: list[MaskingRule], rule: MaskingRule) -> list[MaskingRule]:
        return [*rules, rule]


class UpdateRule(RulePlacement):
    """Replace an existing rule in place, keeping its position."""

    def check(self, rules: list[MaskingRule], rule_id: str, user_input: RuleInput) -> MaskingRuleError | None:  # noqa: ARG002
        if find_rule(rules, rule_id) is None:
            return RuleNotFoundError(rule_id)
        return None

    def locate(self, rules: list[MaskingRule], rule_id: str) -> MaskingRule:
        rule = find_rule(rules, rule_id)
        if rule is None:
            raise RuleNotFoundError(rule_id)
        return rule

    def splice(self, rules: list[MaskingRule], rule: MaskingRule) -> list[MaskingRule]:
        return [rule if r.rule_id == rule.rule_id else r for r in rules]


__all__ = ["CreateRule", "RulePlacement", "UpdateRule"]
