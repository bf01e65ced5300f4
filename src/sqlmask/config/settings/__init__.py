"""Config settings – env-based configuration."""
from sqlmask.config.settings.app import LoggingSettings, MaskingDefaults
from sqlmask.config.settings.base import Settings
from sqlmask.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "LoggingSettings",
    "MaskingDefaults",
    "Settings",
    "SettingsLoader",
]
