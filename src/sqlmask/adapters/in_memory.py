"""Adapters – InMemoryMaskingRuleAdapter."""
from __future__ import annotations

from sqlmask.application.masking.ports import DatabaseRef, MaskingRuleAdapter
from sqlmask.masking.rules import MaskingRule


class InMemoryMaskingRuleAdapter(MaskingRuleAdapter):
    """Dict-backed rule store for tests and local runs.

    Rules are copied on the way in and out, so callers never share objects
    with the store.
    """

    def __init__(self) -> None:
        self._rules: dict[DatabaseRef, list[MaskingRule]] = {}
        self.requests: list[tuple[str, str]] = []

    def seed(self, database: DatabaseRef, rules: list[MaskingRule]) -> None:
        self._rules[database] = [r.copy() for r in rules]

    async def get_rules(self, database: DatabaseRef) -> list[MaskingRule]:
        return [r.copy() for r in self._rules.get(database, [])]

    async def set_rule(self, database: DatabaseRef, rule: MaskingRule, client_request_id: str) -> None:
        stored = self._rules.setdefault(database, [])
        for i, existing in enumerate(stored):
            if existing.rule_id == rule.rule_id:
                stored[i] = rule.copy()
                break
        else:
            stored.append(rule.copy())
        self.requests.append((rule.rule_id, client_request_id))


__all__ = ["InMemoryMaskingRuleAdapter"]
