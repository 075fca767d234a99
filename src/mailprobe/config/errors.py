"""Config errors."""
from __future__ import annotations

from mailprobe.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Configuration could not be loaded or failed validation."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A setting the run depends on was never provided.

    ``source`` names where it was looked up (an environment variable, a
    settings attribute) so the message tells the operator what to export.
    """
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str, source: str | None = None) -> None:
        where = f" (set {source})" if source else ""
        super().__init__(f"Required setting '{setting_name}' is not defined{where}")
        self.setting_name = setting_name
        self.source = source


class InvalidSettingValueError(ConfigError):
    """A setting is present but its value cannot be used."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(f"Setting '{setting_name}' = {value!r} is invalid: {reason}")
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
