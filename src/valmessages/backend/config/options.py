"""Explicitly owned configuration consumed by the validation engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import partial
from typing import Any, Callable

from valmessages.backend.resources import (
    LanguageManager,
    LegacyResourceProvider,
    Locale,
    get_current_ui_locale,
)

from .schema import LocalizationSettings
from .settings import configure_language_manager


@dataclass
class ValidatorOptions:
    """Bundle of the language manager, the legacy provider and the UI locale source.

    Instances are created per application (or per test) and handed to the
    validation engine instead of living in module globals.
    """

    language_manager: LanguageManager = field(default_factory=LanguageManager)
    current_locale: Callable[[], Locale] = get_current_ui_locale

    def __post_init__(self) -> None:
        self.language_manager.current_locale = self.current_locale

    @property
    def resource_provider(self) -> LegacyResourceProvider | None:
        return self.language_manager.resource_provider

    @resource_provider.setter
    def resource_provider(self, provider: LegacyResourceProvider | None) -> None:
        self.language_manager.resource_provider = provider

    @classmethod
    def from_settings(
        cls,
        settings: LocalizationSettings,
        *,
        resource_provider: LegacyResourceProvider | None = None,
    ) -> "ValidatorOptions":
        """Build options whose ambient locale defaults to ``settings.ui_locale``."""

        current_locale = partial(get_current_ui_locale, Locale.parse(settings.ui_locale))
        options = cls(
            language_manager=configure_language_manager(settings),
            current_locale=current_locale,
        )
        options.resource_provider = resource_provider
        return options

    def get_message(self, key: str, locale: Locale | str | None = None) -> str:
        """Resolve ``key`` through the configured language manager."""

        return self.language_manager.get_string(key, locale)

    def get_message_for_validator(self, validator: Any, locale: Locale | str | None = None) -> str:
        return self.language_manager.get_string_for_validator(validator, locale)


__all__ = ["ValidatorOptions"]
