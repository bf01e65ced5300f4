"""Property-based tests for the masking rule builder."""

from __future__ import annotations

import copy

import hypothesis.strategies as st
import pytest
from hypothesis import assume, given

from sqlmask.kernel.result import Err
from sqlmask.masking import (
    AliasTarget,
    ColumnTarget,
    DuplicateTargetError,
    InvalidIntervalError,
    MaskingFunction,
    MaskingRule,
    RuleInput,
    UpdateRule,
    apply_update,
    build_updated_rule_set,
    validate_target,
)

names = st.sampled_from(["T1", "T2", "C1", "C2", "A1", "A2", "A3"])
sizes = st.integers(min_value=0, max_value=50)
bounds = st.floats(min_value=-1e6, max_value=1e6, allow_nan=False)

column_targets = st.builds(ColumnTarget, names, names)
alias_targets = st.builds(AliasTarget, names)
targets = st.one_of(column_targets, alias_targets)


@st.composite
def rule_sets(draw: st.DrawFn) -> list[MaskingRule]:
    drawn = draw(st.lists(targets, max_size=6, unique=True))
    rules = []
    for i, target in enumerate(drawn):
        rule = MaskingRule(rule_id=str(i))
        rule.retarget(target)
        rules.append(rule)
    return rules


@st.composite
def text_rules(draw: st.DrawFn) -> MaskingRule:
    rule = MaskingRule(
        rule_id="r",
        masking_function=MaskingFunction.TEXT,
        prefix_size=draw(st.none() | sizes),
        replacement_string=draw(st.none() | st.text(max_size=5)),
        suffix_size=draw(st.none() | sizes),
    )
    rule.retarget(draw(targets))
    return rule


class TestValidateTargetProperties:
    @given(rule_sets(), st.data())
    def test_target_of_another_rule_is_rejected(self, rules: list[MaskingRule], data: st.DataObject) -> None:
        assume(rules)
        owner = data.draw(st.sampled_from(rules))
        err = validate_target(rules, owner.target, "someone-else")
        assert isinstance(err, DuplicateTargetError)
        assert err.existing_rule_id == owner.rule_id

    @given(rule_sets(), st.data())
    def test_rule_may_keep_its_own_target(self, rules: list[MaskingRule], data: st.DataObject) -> None:
        assume(rules)
        owner = data.draw(st.sampled_from(rules))
        assert validate_target(rules, owner.target, owner.rule_id) is None


class TestApplyUpdateProperties:
    @given(text_rules(), st.none() | sizes, st.none() | st.text(max_size=5), st.none() | sizes)
    def test_text_fields_never_left_unset(self, rule, prefix, replacement, suffix) -> None:
        updated = apply_update(
            rule, RuleInput(prefix_size=prefix, replacement_string=replacement, suffix_size=suffix)
        )
        assert updated.prefix_size is not None
        assert updated.replacement_string
        assert updated.suffix_size is not None
        assert updated.prefix_size == (prefix if prefix is not None else rule.prefix_size or 0)
        if replacement:
            assert updated.replacement_string == replacement
        elif rule.replacement_string:
            assert updated.replacement_string == rule.replacement_string

    @given(text_rules())
    def test_empty_input_on_complete_text_rule_is_identity(self, rule: MaskingRule) -> None:
        complete = apply_update(rule, RuleInput())
        assert apply_update(complete, RuleInput()) == complete

    @given(bounds, bounds)
    def test_interval_order_decides_success(self, low: float, high: float) -> None:
        rule = MaskingRule("n", alias_name="A", masking_function=MaskingFunction.NUMBER, number_from=0.0, number_to=0.0)
        snapshot = copy.deepcopy(rule)
        user_input = RuleInput(number_from=low, number_to=high)
        if low > high:
            with pytest.raises(InvalidIntervalError):
                apply_update(rule, user_input)
        else:
            updated = apply_update(rule, user_input)
            assert (updated.number_from, updated.number_to) == (low, high)
        assert rule == snapshot


class TestBuildUpdatedRuleSetProperties:
    @given(rule_sets(), st.data())
    def test_failure_never_mutates_rule_set(self, rules: list[MaskingRule], data: st.DataObject) -> None:
        assume(len(rules) >= 2)
        rule, other = data.draw(st.permutations(rules))[:2]
        snapshot = copy.deepcopy(rules)
        other_target = other.target
        if isinstance(other_target, AliasTarget):
            user_input = RuleInput(alias_name=other_target.alias_name)
        else:
            user_input = RuleInput(table_name=other_target.table_name, column_name=other_target.column_name)
        result = build_updated_rule_set(rules, rule.rule_id, user_input, UpdateRule())
        assert isinstance(result, Err)
        assert rules == snapshot
