"""Registry of validation message languages with culture fallback."""

from __future__ import annotations

import logging
from functools import singledispatchmethod
from threading import Lock
from typing import Any, Callable, Iterable

from .catalog import BASE_LOCALE, load_bundled_languages
from .legacy import LegacyResourceProvider, remap_legacy_key
from .locale import Locale, get_current_ui_locale
from .models import ConfigurationError, InvalidLanguageError, Language

logger = logging.getLogger(__name__)


class LanguageManager:
    """Manage the default validation message translations.

    The manager maps culture codes to :class:`Language` tables and keeps a
    separate reference to the fallback language used when a culture (or a
    key within it) is unavailable. Bundled languages are registered on
    construction with English as the fallback.
    """

    def __init__(
        self,
        languages: Iterable[Language] | None = None,
        *,
        resource_provider: LegacyResourceProvider | None = None,
        current_locale: Callable[[], Locale] | None = None,
    ) -> None:
        seed = tuple(load_bundled_languages() if languages is None else languages)
        self._languages: dict[str, Language] = {}
        for language in seed:
            self._guard(language)
            self._languages[language.name] = language

        if BASE_LOCALE in self._languages:
            default = self._languages[BASE_LOCALE]
        elif seed:
            default = seed[0]
        else:
            raise ConfigurationError("A language manager requires at least one language")

        self._default: Language = default
        self._lock = Lock()
        self.enabled = True
        self.resource_provider = resource_provider
        self.current_locale = current_locale or get_current_ui_locale

    @staticmethod
    def _guard(language: Language | None) -> Language:
        if language is None:
            raise InvalidLanguageError("language must not be None")
        if not isinstance(language, Language):
            raise InvalidLanguageError(f"Expected a Language, received {type(language).__name__}")
        if not language.name or not language.name.strip():
            raise InvalidLanguageError("Language must specify a valid culture code as its name")
        return language

    @property
    def fallback_language(self) -> Language:
        return self._default

    def get_supported_languages(self) -> tuple[Language, ...]:
        """Return a snapshot of the registered languages."""

        with self._lock:
            return tuple(self._languages.values())

    def add_language(self, language: Language) -> None:
        """Register ``language``, replacing any table for the same code."""

        self._guard(language)
        with self._lock:
            replaced = language.name in self._languages
            self._languages[language.name] = language
        logger.debug(
            "%s language '%s' with %d translations",
            "Replaced" if replaced else "Registered",
            language.name,
            len(language.translations),
        )

    def clear(self) -> None:
        """Remove every registered language; the fallback language is kept."""

        with self._lock:
            self._languages.clear()
        logger.debug("Cleared registered languages; fallback remains '%s'", self._default.name)

    @singledispatchmethod
    def set_fallback_language(self, locale: Locale | str) -> None:
        """Use a registered language as the fallback.

        Specific cultures that are not registered fall back to their neutral
        parent. Passing a :class:`Language` instead installs it directly,
        whether or not it is registered.
        """

        if locale is None:
            raise InvalidLanguageError("language must not be None")
        if not isinstance(locale, (Locale, str)):
            raise InvalidLanguageError(
                f"Expected a Locale, culture code or Language, received {type(locale).__name__}"
            )

        culture = Locale.parse(locale)
        with self._lock:
            code = self._registered_code(culture)
            language = self._languages.get(code)
            if language is None:
                raise ConfigurationError(
                    f"Could not set language to '{code}' as this language is not registered. "
                    "Please ensure this language is registered by calling add_language."
                )
            self._default = language
        logger.debug("Fallback language set to '%s'", code)

    @set_fallback_language.register
    def _(self, language: Language) -> None:
        self._guard(language)
        with self._lock:
            self._default = language
        logger.debug("Fallback language replaced with '%s'", language.name)

    def _registered_code(self, culture: Locale) -> str:
        code = culture.code
        if not culture.is_neutral and code not in self._languages:
            code = culture.parent_code
        return code

    def get_string(self, key: str, locale: Locale | str | None = None) -> str:
        """Return the translation of ``key`` for ``locale``.

        When the culture is specific and not registered its neutral parent is
        tried instead. Keys missing from the selected language are looked up
        in the fallback language; an empty string means no translation exists.
        """

        provider = self.resource_provider
        if provider is not None:
            legacy_key = remap_legacy_key(key)
            try:
                return provider.get_string(legacy_key)
            except Exception as exc:  # noqa: BLE001
                logger.debug("Legacy resource provider failed for '%s': %s", legacy_key, exc)

        culture = self.current_locale() if locale is None else Locale.parse(locale)

        with self._lock:
            code = self._registered_code(culture)
            default = self._default
            language = self._languages.get(code) if self.enabled else None

        language_to_use = language if language is not None else default
        value = language_to_use.get(key)
        if value is None and language_to_use is not default:
            value = default.get(key)
            if value is not None:
                logger.debug(
                    "Key '%s' missing for '%s'; using fallback '%s'",
                    key,
                    language_to_use.name,
                    default.name,
                )

        return value if value is not None else ""

    def get_string_for_validator(self, validator: Any, locale: Locale | str | None = None) -> str:
        """Return the default message for a validator class or instance."""

        validator_type = validator if isinstance(validator, type) else type(validator)
        return self.get_string(validator_type.__name__, locale)


__all__ = ["LanguageManager"]
