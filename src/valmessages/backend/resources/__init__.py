"""Default validation message resources with culture-aware fallback."""

from .catalog import BASE_LOCALE, bundled_locales, load_bundled_language, load_language_file
from .legacy import (
    LegacyResourceError,
    LegacyResourceProvider,
    ResourceAccessorProvider,
    remap_legacy_key,
)
from .locale import Locale, get_current_ui_locale, set_current_ui_locale, ui_locale
from .manager import LanguageManager
from .models import ConfigurationError, InvalidLanguageError, Language

__all__ = [
    "BASE_LOCALE",
    "ConfigurationError",
    "InvalidLanguageError",
    "Language",
    "LanguageManager",
    "LegacyResourceError",
    "LegacyResourceProvider",
    "Locale",
    "ResourceAccessorProvider",
    "bundled_locales",
    "get_current_ui_locale",
    "load_bundled_language",
    "load_language_file",
    "remap_legacy_key",
    "set_current_ui_locale",
    "ui_locale",
]
