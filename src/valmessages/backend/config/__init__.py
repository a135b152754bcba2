"""Localisation settings, option wiring and translation validation."""

from .options import ValidatorOptions
from .schema import LanguageSource, LocalizationSettings
from .settings import build_settings, configure_language_manager, load_settings

__all__ = [
    "LanguageSource",
    "LocalizationSettings",
    "ValidatorOptions",
    "build_settings",
    "configure_language_manager",
    "load_settings",
]
