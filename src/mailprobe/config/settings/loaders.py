"""Config settings – building MailProbeSettings from the process environment or a .env file."""
from __future__ import annotations

import abc
import dataclasses
import os
from typing import Any, TypeVar

from dotenv import load_dotenv

from mailprobe.config.errors import ConfigError, InvalidSettingValueError, MissingRequiredSettingError
from mailprobe.config.settings.base import Settings
from mailprobe.observability.logging import get_logger

S = TypeVar("S", bound=Settings)

logger = get_logger(__name__)


class SettingsLoader(abc.ABC):
    """Builds a :class:`Settings` subclass from somewhere outside the code."""

    @abc.abstractmethod
    def load(self, settings_class: type[S]) -> S: ...


class EnvSettingsLoader(SettingsLoader):
    """Load settings from OS environment variables.

    Each dataclass field ``name`` is read from ``<PREFIX>_<NAME>``; fields
    with a default may be omitted.
    """

    def __init__(self, environ: dict[str, str] | None = None) -> None:
        self._environ = environ

    def load(self, settings_class: type[S]) -> S:
        environ = self._environ if self._environ is not None else os.environ
        prefix = getattr(settings_class, "_prefix", "").upper()
        kwargs: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            env_key = f"{prefix}_{field.name}".upper().lstrip("_")
            raw = environ.get(env_key)

            if raw is None:
                if (
                    field.default is dataclasses.MISSING
                    and field.default_factory is dataclasses.MISSING  # type: ignore[misc]
                ):
                    raise MissingRequiredSettingError(field.name, source=env_key)
                continue

            kwargs[field.name] = self._coerce(field.name, raw, field.type)

        try:
            settings = settings_class(**kwargs)
        except ConfigError:
            raise
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"Failed to load {settings_class.__name__}: {exc}") from exc
        logger.debug("settings.loaded", settings=settings_class.__name__, keys=sorted(kwargs))
        return settings

    def _coerce(self, name: str, value: str, type_hint: Any) -> Any:  # noqa: PLR0911
        # Annotations arrive as strings under ``from __future__ import annotations``.
        hint = type_hint if isinstance(type_hint, str) else getattr(type_hint, "__name__", str(type_hint))
        base = hint.split("|")[0].strip()
        if "None" in hint and value == "":
            return None
        try:
            if base == "bool":
                return value.strip().lower() in {"1", "true", "yes", "on"}
            if base == "int":
                return int(value)
            if base == "float":
                return float(value)
        except ValueError as exc:
            raise InvalidSettingValueError(name, value, f"expected {base}") from exc
        return value


class DotenvSettingsLoader(SettingsLoader):
    """Merge a ``.env`` file into ``os.environ`` (existing variables win unless *override*), then read the environment."""

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def load(self, settings_class: type[S]) -> S:
        found = load_dotenv(self._env_file, override=self._override)
        logger.debug("settings.dotenv", env_file=self._env_file, found=found)
        return EnvSettingsLoader().load(settings_class)


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader"]
