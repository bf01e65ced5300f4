"""Masking – data masking rules and the rule builder."""
from sqlmask.masking.builder import apply_update, build_updated_rule_set, validate_target
from sqlmask.masking.errors import (
    DuplicateTargetError,
    InvalidIntervalError,
    InvalidRuleInputError,
    MaskingRuleError,
    MissingMaskingFunctionError,
    RuleAlreadyExistsError,
    RuleNotFoundError,
)
from sqlmask.masking.functions import MaskingFunction, resolve_masking_function
from sqlmask.masking.inputs import RuleInput
from sqlmask.masking.placement import CreateRule, RulePlacement, UpdateRule
from sqlmask.masking.rules import AliasTarget, ColumnTarget, MaskingRule, Target, find_rule

__all__ = [
    "AliasTarget",
    "ColumnTarget",
    "CreateRule",
    "DuplicateTargetError",
    "InvalidIntervalError",
    "InvalidRuleInputError",
    "MaskingFunction",
    "MaskingRule",
    "MaskingRuleError",
    "MissingMaskingFunctionError",
    "RuleAlreadyExistsError",
    "RuleInput",
    "RuleNotFoundError",
    "RulePlacement",
    "Target",
    "UpdateRule",
    "apply_update",
    "build_updated_rule_set",
    "find_rule",
    "resolve_masking_function",
    "validate_target",
]
