"""Config – 12-factor settings, loaders, and validation errors."""

from tripwire.config.settings import EnvSettingsLoader, Settings, SettingsLoader
from tripwire.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
