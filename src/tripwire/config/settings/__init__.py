"""Config settings – 12-factor env-based configuration."""
from tripwire.config.settings.base import Settings
from tripwire.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "Settings", "SettingsLoader"]
