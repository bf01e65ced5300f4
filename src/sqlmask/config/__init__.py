"""Config – env-based settings, loaders, and masking defaults."""

from sqlmask.config.errors import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from sqlmask.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    LoggingSettings,
    MaskingDefaults,
    Settings,
    SettingsLoader,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "LoggingSettings",
    "MaskingDefaults",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
