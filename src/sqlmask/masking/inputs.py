"""User-supplied rule fields."""
from __future__ import annotations

import dataclasses
import math

from sqlmask.masking.errors import InvalidRuleInputError
from sqlmask.masking.rules import AliasTarget, ColumnTarget, Target


@dataclasses.dataclass(frozen=True)
class RuleInput:
    """Optional fields a user supplies when creating or updating a rule.

    ``None`` means "not supplied".  An empty ``alias_name``,
    ``masking_function`` or ``replacement_string`` is treated the same way.
    """

    table_name: str | None = None
    column_name: str | None = None
    alias_name: str | None = None
    masking_function: str | None = None
    prefix_size: int | None = None
    replacement_string: str | None = None
    suffix_size: int | None = None
    number_from: float | None = None
    number_to: float | None = None

    def __post_init__(self) -> None:
        errors = []
        for name in ("prefix_size", "suffix_size"):
            value = getattr(self, name)
            if value is not None and value < 0:
                errors.append({"field": name, "msg": "must not be negative"})
        for name in ("number_from", "number_to"):
            value = getattr(self, name)
            if value is not None and not math.isfinite(value):
                errors.append({"field": name, "msg": "must be a finite number"})
        if not self.alias_name and (self.table_name is None) != (self.column_name is None):
            errors.append({"field": "table_name/column_name", "msg": "both must be given together"})
        if errors:
            raise InvalidRuleInputError("Invalid data masking rule input", errors=errors)

    def target(self) -> Target | None:
        """The requested target, or ``None`` when none was supplied."""
        if self.alias_name:
            return AliasTarget(self.alias_name)
        if self.table_name is not None and self.column_name is not None:
            return ColumnTarget(self.table_name, self.column_name)
        return None


__all__ = ["RuleInput"]
