"""Config settings – 12-factor env-based configuration."""
from mailprobe.config.settings.base import Environment, MailProbeSettings, Settings
from mailprobe.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "Environment",
    "MailProbeSettings",
    "Settings",
    "SettingsLoader",
]
