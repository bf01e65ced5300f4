"""Config settings – masking defaults and logging settings.

Both read from the environment through :class:`EnvSettingsLoader`::

    SQLMASK_REPLACEMENT_STRING=****  ->  MaskingDefaults.replacement_string
    SQLMASK_LOG_LEVEL=DEBUG          ->  LoggingSettings.level
"""
from __future__ import annotations

import dataclasses
import logging
import math
from typing import ClassVar

from sqlmask.config.errors import InvalidSettingValueError
from sqlmask.config.settings.base import Settings


@dataclasses.dataclass
class MaskingDefaults(Settings):
    """Values given to text / number masking fields the user left unset."""

    _prefix: ClassVar[str] = "SQLMASK"

    prefix_size: int = 0
    replacement_string: str = "xxxx"
    suffix_size: int = 0
    number_from: float = 0.0
    number_to: float = 0.0

    def _validate(self) -> None:
        if self.prefix_size < 0:
            raise InvalidSettingValueError("prefix_size", self.prefix_size, "must not be negative")
        if self.suffix_size < 0:
            raise InvalidSettingValueError("suffix_size", self.suffix_size, "must not be negative")
        if not self.replacement_string:
            raise InvalidSettingValueError(
                "replacement_string", self.replacement_string, "must not be empty"
            )
        for name in ("number_from", "number_to"):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise InvalidSettingValueError(name, value, "must be a finite number")
        if self.number_from > self.number_to:
            raise InvalidSettingValueError(
                "number_from", self.number_from, f"must not exceed number_to ({self.number_to})"
            )


@dataclasses.dataclass
class LoggingSettings(Settings):
    """Log level and renderer selection."""

    _prefix: ClassVar[str] = "SQLMASK_LOG"

    level: str = "INFO"
    json: bool = True

    def _validate(self) -> None:
        if not isinstance(logging.getLevelName(self.level.upper()), int):
            raise InvalidSettingValueError("level", self.level, "unknown log level")

    @property
    def level_number(self) -> int:
        return logging.getLevelName(self.level.upper())


__all__ = ["LoggingSettings", "MaskingDefaults"]
