"""Data masking ports – the remote rule store, seen from the use-cases."""
from __future__ import annotations

import abc
import dataclasses

from sqlmask.masking.rules import MaskingRule


@dataclasses.dataclass(frozen=True)
class DatabaseRef:
    """Identifies the database whose masking rules are managed."""

    resource_group: str
    server_name: str
    database_name: str

    def __str__(self) -> str:
        return f"{self.resource_group}/{self.server_name}/{self.database_name}"


class MaskingRuleAdapter(abc.ABC):
    """Port: fetch and store a database's data masking rules.

    Concrete implementations talk to the management API; see
    :class:`~sqlmask.adapters.in_memory.InMemoryMaskingRuleAdapter` for a
    dict-backed one.
    """

    @abc.abstractmethod
    async def get_rules(self, database: DatabaseRef) -> list[MaskingRule]: ...

    @abc.abstractmethod
    async def set_rule(self, database: DatabaseRef, rule: MaskingRule, client_request_id: str) -> None: ...


__all__ = ["DatabaseRef", "MaskingRuleAdapter"]
