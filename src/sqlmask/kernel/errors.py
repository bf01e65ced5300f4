"""Error hierarchy shared by the masking builder and the config layer.

Hierarchy::

    BaseError
    ├── DomainError
    │   ├── ValidationError
    │   ├── NotFoundError
    │   └── ConflictError
    └── ConfigError          (sqlmask.config.errors)

Errors about one masking rule carry its ``rule_id`` and, once known, its
``target``, so a rejected operation can be traced back to the rule in logs
and API responses.
"""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """Root of the error hierarchy.

    Args:
        message: Human-readable description.
        code: Machine-readable slug (defaults to ``default_code``).
        rule_id: Id of the masking rule the error is about.
        target: Table/column or alias the rule points at.
        detail: Extra serialisable context.
    """

    default_code: str = "error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        rule_id: str | None = None,
        target: object | None = None,
        detail: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.rule_id = rule_id
        self.target = target
        self.detail: dict[str, Any] = dict(detail or {})

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, rule_id={self.rule_id!r})"

    def to_dict(self) -> dict[str, Any]:
        """Plain dict for log events and API error bodies; unset keys are left out."""
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.rule_id is not None:
            payload["rule_id"] = self.rule_id
        if self.target is not None:
            payload["target"] = str(self.target)
        if self.detail:
            payload["detail"] = self.detail
        if self.__cause__ is not None:
            payload["cause"] = repr(self.__cause__)
        return payload


class DomainError(BaseError):
    """A masking rule invariant does not hold."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Supplied values were rejected; ``errors`` lists one entry per field."""

    default_code = "validation_error"

    def __init__(self, message: str, *, errors: list[dict[str, Any]] | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload["errors"] = self.errors
        return payload


class NotFoundError(DomainError):
    default_code = "not_found"


class ConflictError(DomainError):
    default_code = "conflict"


__all__ = ["BaseError", "ConflictError", "DomainError", "NotFoundError", "ValidationError"]
