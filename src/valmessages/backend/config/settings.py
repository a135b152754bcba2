"""Settings loader wrapping the localisation schema models."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import ValidationError

from valmessages.backend.resources import (
    ConfigurationError,
    Language,
    LanguageManager,
    load_language_file,
)

from .schema import LanguageSource, LocalizationSettings

SETTINGS_ENV = "VALMESSAGES_SETTINGS"
ENABLED_ENV = "VALMESSAGES_LOCALIZATION_ENABLED"
UI_LOCALE_ENV = "VALMESSAGES_UI_LOCALE"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}

logger = logging.getLogger(__name__)


def _load_yaml(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ConfigurationError("Settings file must define a mapping at the top level")
    return data


def _parse_bool(value: str | None, *, env: str) -> bool | None:
    if value is None or not value.strip():
        return None
    normalised = value.strip().lower()
    if normalised in _TRUE_VALUES:
        return True
    if normalised in _FALSE_VALUES:
        return False
    logger.warning("Ignoring invalid value for %s: %s", env, value)
    return None


def _apply_environment(raw: dict[str, Any], environ: Mapping[str, str]) -> dict[str, Any]:
    enabled = _parse_bool(environ.get(ENABLED_ENV), env=ENABLED_ENV)
    if enabled is not None:
        raw["enabled"] = enabled

    ui_locale = environ.get(UI_LOCALE_ENV)
    if ui_locale and ui_locale.strip():
        raw["ui_locale"] = ui_locale.strip()

    return raw


def build_settings(
    raw: Mapping[str, Any] | None = None,
    *,
    base_path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> LocalizationSettings:
    """Validate a raw settings mapping after applying environment overrides."""

    data = dict(raw or {})
    data = _apply_environment(data, os.environ if environ is None else environ)
    if base_path is not None:
        data["base_path"] = base_path

    try:
        return LocalizationSettings.model_validate(data)
    except ValidationError as error:
        raise ConfigurationError(f"Localisation settings validation failed: {error}") from error


def load_settings(
    path: str | Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> LocalizationSettings:
    """Load settings from ``path`` or the file named by ``VALMESSAGES_SETTINGS``.

    Without either, the defaults (plus environment overrides) are returned.
    """

    env = os.environ if environ is None else environ
    location = path or env.get(SETTINGS_ENV)
    if not location:
        return build_settings(environ=env)

    settings_file = Path(location).expanduser()
    if not settings_file.exists():
        raise FileNotFoundError(f"Localisation settings not found: {settings_file}")

    raw = _load_yaml(settings_file)
    return build_settings(raw, base_path=settings_file.resolve().parent, environ=env)


def _materialise(settings: LocalizationSettings, source: LanguageSource) -> Language:
    if source.path is not None:
        return load_language_file(settings.resolve_path(source.path), name=source.name)
    return Language(name=source.name or "", translations=source.translations or {})


def configure_language_manager(
    settings: LocalizationSettings,
    manager: LanguageManager | None = None,
) -> LanguageManager:
    """Apply ``settings`` to ``manager`` (a fresh one when omitted)."""

    target = manager or LanguageManager()

    if settings.clear_bundled:
        target.clear()

    for source in settings.languages:
        target.add_language(_materialise(settings, source))

    if settings.fallback_locale is not None:
        target.set_fallback_language(settings.fallback_locale)

    target.enabled = settings.enabled
    logger.debug(
        "Configured %d languages (fallback '%s', enabled=%s)",
        len(target.get_supported_languages()),
        target.fallback_language.name,
        target.enabled,
    )
    return target


__all__ = [
    "ENABLED_ENV",
    "SETTINGS_ENV",
    "UI_LOCALE_ENV",
    "build_settings",
    "configure_language_manager",
    "load_settings",
]
