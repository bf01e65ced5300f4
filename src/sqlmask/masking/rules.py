"""Masking rule model and rule-set helpers."""
from __future__ import annotations

import dataclasses
from typing import Any

from sqlmask.masking.functions import MaskingFunction


@dataclasses.dataclass(frozen=True)
class ColumnTarget:
    """A rule target addressed by table and column name."""

    table_name: str
    column_name: str

    def __str__(self) -> str:
        return f"{self.table_name}.{self.column_name}"


@dataclasses.dataclass(frozen=True)
class AliasTarget:
    """A rule target addressed by column alias."""

    alias_name: str

    def __str__(self) -> str:
        return self.alias_name


type Target = ColumnTarget | AliasTarget

# Model attribute -> wire key.
_WIRE_KEYS: dict[str, str] = {
    "rule_id": "ruleId",
    "table_name": "tableName",
    "column_name": "columnName",
    "alias_name": "aliasName",
    "masking_function": "maskingFunction",
    "prefix_size": "prefixSize",
    "replacement_string": "replacementString",
    "suffix_size": "suffixSize",
    "number_from": "numberFrom",
    "number_to": "numberTo",
}


@dataclasses.dataclass
class MaskingRule:
    """One entry of a database's data masking rule set.

    Exactly one target form is populated: ``table_name``/``column_name`` or
    ``alias_name``.  The text fields only matter for
    ``MaskingFunction.TEXT`` and the number fields only for
    ``MaskingFunction.NUMBER``.
    """

    rule_id: str
    table_name: str | None = None
    column_name: str | None = None
    alias_name: str | None = None
    masking_function: MaskingFunction = MaskingFunction.DEFAULT
    prefix_size: int | None = None
    replacement_string: str | None = None
    suffix_size: int | None = None
    number_from: float | None = None
    number_to: float | None = None

    @property
    def target(self) -> Target | None:
        if self.alias_name:
            return AliasTarget(self.alias_name)
        if self.table_name is not None and self.column_name is not None:
            return ColumnTarget(self.table_name, self.column_name)
        return None

    def retarget(self, target: Target) -> None:
        """Point the rule at *target*, clearing the other target form."""
        if isinstance(target, AliasTarget):
            self.alias_name = target.alias_name
            self.table_name = None
            self.column_name = None
        else:
            self.table_name = target.table_name
            self.column_name = target.column_name
            self.alias_name = None

    def copy(self) -> "MaskingRule":
        return dataclasses.replace(self)

    def to_dict(self) -> dict[str, Any]:
        """Wire representation; unset fields are omitted."""
        payload: dict[str, Any] = {}
        for attr, key in _WIRE_KEYS.items():
            value = getattr(self, attr)
            if value is None:
                continue
            payload[key] = value.value if isinstance(value, MaskingFunction) else value
        return payload

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "MaskingRule":
        """Parse the wire representation; unknown keys are ignored.

        Raises:
            InvalidRuleInputError: ``ruleId`` is missing or ``maskingFunction``
                names no known function.
        """
        from sqlmask.masking.errors import InvalidRuleInputError

        kwargs = {attr: payload[key] for attr, key in _WIRE_KEYS.items() if payload.get(key) is not None}
        if "rule_id" not in kwargs:
            raise InvalidRuleInputError(
                "Data masking rule payload has no ruleId",
                errors=[{"field": "ruleId", "msg": "required"}],
            )
        if "masking_function" in kwargs:
            try:
                kwargs["masking_function"] = MaskingFunction(kwargs["masking_function"])
            except ValueError as exc:
                raise InvalidRuleInputError(
                    f"Unknown masking function {kwargs['masking_function']!r}",
                    errors=[{"field": "maskingFunction", "msg": "unknown masking function"}],
                    rule_id=kwargs["rule_id"],
                ) from exc
        return cls(**kwargs)


def find_rule(rules: list[MaskingRule], rule_id: str) -> MaskingRule | None:
    """Return the rule with *rule_id*, or ``None``."""
    return next((r for r in rules if r.rule_id == rule_id), None)


__all__ = ["AliasTarget", "ColumnTarget", "MaskingRule", "Target", "find_rule"]
