"""Data masking commands – create or update one rule of a database.

Each handler runs the same pipeline: fetch the database's rules, build the
updated rule set, submit the single changed rule with the current
correlation id, and hand the rule back when ``pass_thru`` is set.
"""
from __future__ import annotations

import abc
import dataclasses
from typing import Generic, TypeVar

from sqlmask.application.masking.ports import DatabaseRef, MaskingRuleAdapter
from sqlmask.config.settings import MaskingDefaults
from sqlmask.kernel.result import Err
from sqlmask.masking import (
    CreateRule,
    MaskingRule,
    RuleInput,
    RuleNotFoundError,
    RulePlacement,
    UpdateRule,
    build_updated_rule_set,
    find_rule,
)
from sqlmask.observability import CorrelationContext, get_logger

log = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class MaskingRuleCommand:
    """Change rule *rule_id* of *database* using the fields in *user_input*."""

    database: DatabaseRef
    rule_id: str
    user_input: RuleInput
    pass_thru: bool = False


@dataclasses.dataclass(frozen=True)
class NewMaskingRule(MaskingRuleCommand):
    """Create rule *rule_id*; a masking function token is required."""


@dataclasses.dataclass(frozen=True)
class SetMaskingRule(MaskingRuleCommand):
    """Update the existing rule *rule_id* with the supplied fields."""


C = TypeVar("C", bound=MaskingRuleCommand)


class MaskingRuleCommandHandler(abc.ABC, Generic[C]):
    """Fetch, build and submit one rule; subclasses pick the placement."""

    @property
    @abc.abstractmethod
    def placement(self) -> RulePlacement: ...

    def __init__(self, adapter: MaskingRuleAdapter, defaults: MaskingDefaults | None = None) -> None:
        self._adapter = adapter
        self._defaults = defaults or MaskingDefaults()

    async def handle(self, command: C) -> MaskingRule | None:
        """Submit the changed rule; return it when ``command.pass_thru`` is set.

        Raises:
            MaskingRuleError: the change was rejected.  Nothing is submitted.
        """
        rules = await self._adapter.get_rules(command.database)
        result = build_updated_rule_set(
            rules, command.rule_id, command.user_input, self.placement, self._defaults
        )
        if isinstance(result, Err):
            log.warning(
                "masking_rule.rejected",
                database=str(command.database),
                **result.error.to_dict(),
            )
            raise result.error

        rule = find_rule(result.unwrap(), command.rule_id)
        if rule is None:
            raise RuleNotFoundError(command.rule_id)

        client_request_id = CorrelationContext.get_or_new().correlation_id
        await self._adapter.set_rule(command.database, rule, client_request_id)
        log.info(
            "masking_rule.saved",
            database=str(command.database),
            rule_id=rule.rule_id,
            target=str(rule.target),
            masking_function=rule.masking_function.value,
            client_request_id=client_request_id,
        )
        return rule if command.pass_thru else None


class NewMaskingRuleHandler(MaskingRuleCommandHandler[NewMaskingRule]):
    placement = CreateRule()


class SetMaskingRuleHandler(MaskingRuleCommandHandler[SetMaskingRule]):
    placement = UpdateRule()


__all__ = [
    "MaskingRuleCommand",
    "MaskingRuleCommandHandler",
    "NewMaskingRule",
    "NewMaskingRuleHandler",
    "SetMaskingRule",
    "SetMaskingRuleHandler",
]
