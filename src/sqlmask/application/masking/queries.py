"""Data masking queries."""
from __future__ import annotations

import dataclasses

from sqlmask.application.masking.ports import DatabaseRef, MaskingRuleAdapter
from sqlmask.masking import MaskingRule, RuleNotFoundError, find_rule


@dataclasses.dataclass(frozen=True)
class GetMaskingRules:
    """All rules of *database*, or only *rule_id* when given."""

    database: DatabaseRef
    rule_id: str | None = None


class GetMaskingRulesHandler:
    def __init__(self, adapter: MaskingRuleAdapter) -> None:
        self._adapter = adapter

    async def handle(self, query: GetMaskingRules) -> list[MaskingRule]:
        rules = await self._adapter.get_rules(query.database)
        if query.rule_id is None:
            return rules
        rule = find_rule(rules, query.rule_id)
        if rule is None:
            raise RuleNotFoundError(query.rule_id)
        return [rule]


__all__ = ["GetMaskingRules", "GetMaskingRulesHandler"]
