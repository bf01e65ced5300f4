"""Config errors – raised while loading or validating settings."""
from __future__ import annotations

from sqlmask.kernel.errors import BaseError


class ConfigError(BaseError):
    """Settings could not be loaded.  ``setting`` names the offending key."""

    default_code = "config_error"

    def __init__(self, message: str, *, setting: str | None = None) -> None:
        super().__init__(message, detail={"setting": setting} if setting else None)
        self.setting = setting


class MissingRequiredSettingError(ConfigError):
    default_code = "missing_required_setting"

    def __init__(self, env_key: str) -> None:
        super().__init__(f"Environment variable '{env_key}' must be set", setting=env_key)


class InvalidSettingValueError(ConfigError):
    """A masking default or log option has an unusable value."""

    default_code = "invalid_setting_value"

    def __init__(self, setting: str, value: object, reason: str) -> None:
        super().__init__(f"{setting}={value!r} {reason}", setting=setting)
        self.value = value
        self.reason = reason
        self.detail.update(value=value, reason=reason)


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
