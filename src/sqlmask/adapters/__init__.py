"""Adapters – implementations of the masking rule port."""
from sqlmask.adapters.in_memory import InMemoryMaskingRuleAdapter

__all__ = ["InMemoryMaskingRuleAdapter"]
