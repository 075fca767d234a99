"""Config – explicit, env-loaded settings for conformance runs."""
from mailprobe.config.errors import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from mailprobe.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    Environment,
    MailProbeSettings,
    Settings,
    SettingsLoader,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "Environment",
    "InvalidSettingValueError",
    "MailProbeSettings",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
