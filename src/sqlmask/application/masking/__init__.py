"""Application masking – commands, queries and ports for data masking rules."""
from sqlmask.application.masking.commands import (
    MaskingRuleCommand,
    MaskingRuleCommandHandler,
    NewMaskingRule,
    NewMaskingRuleHandler,
    SetMaskingRule,
    SetMaskingRuleHandler,
)
from sqlmask.application.masking.ports import DatabaseRef, MaskingRuleAdapter
from sqlmask.application.masking.queries import GetMaskingRules, GetMaskingRulesHandler

__all__ = [
    "DatabaseRef",
    "GetMaskingRules",
    "GetMaskingRulesHandler",
    "MaskingRuleAdapter",
    "MaskingRuleCommand",
    "MaskingRuleCommandHandler",
    "NewMaskingRule",
    "NewMaskingRuleHandler",
    "SetMaskingRule",
    "SetMaskingRuleHandler",
]
