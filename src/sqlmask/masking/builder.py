"""Masking rule builder.

Validates a requested change against the database's rule set and merges
the user's fields into the rule, filling unset text / number fields from
:class:`~sqlmask.config.settings.MaskingDefaults`.

The builder never mutates what it is given: :func:`apply_update` works on a
copy and :func:`build_updated_rule_set` returns a new list.  When the
number interval check fails nothing the caller holds has changed.
"""
from __future__ import annotations

from sqlmask.config.settings import MaskingDefaults
from sqlmask.kernel.result import Err, Ok, Result
from sqlmask.masking.errors import (
    DuplicateTargetError,
    InvalidIntervalError,
    InvalidRuleInputError,
    MaskingRuleError,
)
from sqlmask.masking.functions import MaskingFunction, resolve_masking_function
from sqlmask.masking.inputs import RuleInput
from sqlmask.masking.placement import RulePlacement
from sqlmask.masking.rules import AliasTarget, MaskingRule, Target
from sqlmask.observability.logging import get_logger

log = get_logger(__name__)


def validate_target(
    rules: list[MaskingRule], candidate: Target, rule_id: str
) -> DuplicateTargetError | None:
    """Return an error if another rule already uses *candidate*.

    The rule identified by *rule_id* is excluded, so a rule may keep its own
    target.
    """
    for rule in rules:
        if rule.rule_id == rule_id:
            continue
        if isinstance(candidate, AliasTarget):
            if rule.alias_name == candidate.alias_name:
                return DuplicateTargetError(candidate, rule.rule_id, rule_id)
        elif rule.table_name == candidate.table_name and rule.column_name == candidate.column_name:
            return DuplicateTargetError(candidate, rule.rule_id, rule_id)
    return None


def apply_update(
    existing: MaskingRule,
    user_input: RuleInput,
    defaults: MaskingDefaults | None = None,
) -> MaskingRule:
    """Return a copy of *existing* with *user_input* merged in.

    Only supplied fields overwrite the rule; text / number fields still unset
    afterwards receive their defaults.

    Raises:
        InvalidRuleInputError: neither the input nor the rule has a target.
        InvalidIntervalError: the resulting ``number_from > number_to``.
    """
    defaults = defaults or MaskingDefaults()
    rule = existing.copy()

    target = user_input.target()
    if target is not None:
        rule.retarget(target)
    elif rule.target is None:
        raise InvalidRuleInputError(
            f"Data masking rule '{rule.rule_id}' needs a table and column or an alias",
            errors=[{"field": "target", "msg": "required"}],
            rule_id=rule.rule_id,
        )

    if user_input.masking_function:
        rule.masking_function = resolve_masking_function(user_input.masking_function)

    if rule.masking_function is MaskingFunction.TEXT:
        _merge_text_fields(rule, user_input, defaults)

    if rule.masking_function is MaskingFunction.NUMBER:
        _merge_number_fields(rule, user_input, defaults)
        if rule.number_from > rule.number_to:  # type: ignore[operator]
            raise InvalidIntervalError(
                rule.number_from, rule.number_to, rule_id=rule.rule_id, target=rule.target  # type: ignore[arg-type]
            )

    log.debug(
        "masking_rule.merged",
        rule_id=rule.rule_id,
        target=str(rule.target),
        masking_function=rule.masking_function.value,
    )
    return rule


def _merge_text_fields(rule: MaskingRule, user_input: RuleInput, defaults: MaskingDefaults) -> None:
    if user_input.prefix_size is not None:
        rule.prefix_size = user_input.prefix_size
    if user_input.replacement_string:
        rule.replacement_string = user_input.replacement_string
    if user_input.suffix_size is not None:
        rule.suffix_size = user_input.suffix_size

    if rule.prefix_size is None:
        rule.prefix_size = defaults.prefix_size
    if not rule.replacement_string:
        rule.replacement_string = defaults.replacement_string
    if rule.suffix_size is None:
        rule.suffix_size = defaults.suffix_size


def _merge_number_fields(rule: MaskingRule, user_input: RuleInput, defaults: MaskingDefaults) -> None:
    if user_input.number_from is not None:
        rule.number_from = user_input.number_from
    if user_input.number_to is not None:
        rule.number_to = user_input.number_to

    if rule.number_from is None:
        rule.number_from = defaults.number_from
    if rule.number_to is None:
        rule.number_to = defaults.number_to


def build_updated_rule_set(
    rules: list[MaskingRule],
    rule_id: str,
    user_input: RuleInput,
    placement: RulePlacement,
    defaults: MaskingDefaults | None = None,
) -> Result[list[MaskingRule], MaskingRuleError]:
    """Validate and apply *user_input* to the rule *rule_id*.

    Returns ``Ok(new_rule_list)`` or ``Err(error)``.  On ``Err`` neither
    *rules* nor any rule in it has been modified.
    """
    candidate = user_input.target()
    error: MaskingRuleError | None = None
    if candidate is not None:
        error = validate_target(rules, candidate, rule_id)
    if error is None:
        error = placement.check(rules, rule_id, user_input)
    if error is not None:
        log.debug("masking_rule.rejected", rule_id=rule_id, code=error.code)
        return Err(error)

    try:
        rule = apply_update(placement.locate(rules, rule_id), user_input, defaults)
    except MaskingRuleError as exc:
        log.debug("masking_rule.rejected", rule_id=rule_id, code=exc.code)
        return Err(exc)
    return Ok(placement.splice(rules, rule))


__all__ = ["apply_update", "build_updated_rule_set", "validate_target"]
