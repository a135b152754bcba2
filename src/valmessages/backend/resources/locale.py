"""Culture identifiers and the ambient UI locale."""

from __future__ import annotations

import contextvars
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

_DEFAULT_UI_LOCALE = "en"


@dataclass(frozen=True)
class Locale:
    """Opaque culture identifier such as ``en``, ``fr-FR`` or ``zh-Hans-CN``.

    A locale is *neutral* when it only carries a language subtag. The empty
    code stands for the invariant culture, which is neither neutral nor has a
    distinct parent.
    """

    code: str

    @classmethod
    def parse(cls, value: "Locale | str | None") -> "Locale":
        """Normalise user input into a :class:`Locale`.

        Underscores are accepted as separators, the language subtag is
        lower-cased, four-letter script subtags are title-cased and region
        subtags are upper-cased (``pt_br`` becomes ``pt-BR``).
        """

        if isinstance(value, Locale):
            return value
        if value is None:
            return cls("")

        parts = [part for part in value.strip().replace("_", "-").split("-") if part]
        if not parts:
            return cls("")

        normalised = [parts[0].lower()]
        for part in parts[1:]:
            if len(part) == 4 and part.isalpha():
                normalised.append(part.title())
            else:
                normalised.append(part.upper())
        return cls("-".join(normalised))

    @property
    def subtags(self) -> tuple[str, ...]:
        return tuple(self.code.split("-")) if self.code else ()

    @property
    def is_invariant(self) -> bool:
        return not self.code

    @property
    def is_neutral(self) -> bool:
        return len(self.subtags) == 1

    @property
    def language(self) -> str:
        subtags = self.subtags
        return subtags[0] if subtags else ""

    @property
    def parent_code(self) -> str:
        """Return the code with its last subtag stripped (``pt-BR`` -> ``pt``).

        Neutral and invariant locales are their own parent.
        """

        subtags = self.subtags
        if len(subtags) <= 1:
            return self.code
        return "-".join(subtags[:-1])

    @property
    def parent(self) -> "Locale":
        return Locale(self.parent_code)

    def __str__(self) -> str:
        return self.code


# Per-context UI locale so concurrent requests and tasks don't overwrite each other.
_CURRENT_UI_LOCALE: contextvars.ContextVar[Locale] = contextvars.ContextVar("valmessages_ui_locale")


def get_current_ui_locale(default: Locale | None = None) -> Locale:
    """Return the UI locale active in the current context.

    ``default`` (English when omitted) applies when no locale was set.
    """

    return _CURRENT_UI_LOCALE.get(default or Locale(_DEFAULT_UI_LOCALE))


def set_current_ui_locale(locale: Locale | str) -> contextvars.Token[Locale]:
    """Set the UI locale for the current context and return a reset token."""

    return _CURRENT_UI_LOCALE.set(Locale.parse(locale))


def reset_current_ui_locale(token: contextvars.Token[Locale]) -> None:
    _CURRENT_UI_LOCALE.reset(token)


@contextmanager
def ui_locale(locale: Locale | str) -> Iterator[Locale]:
    """Temporarily switch the ambient UI locale within a ``with`` block."""

    token = set_current_ui_locale(locale)
    try:
        yield get_current_ui_locale()
    finally:
        reset_current_ui_locale(token)


__all__ = [
    "Locale",
    "get_current_ui_locale",
    "reset_current_ui_locale",
    "set_current_ui_locale",
    "ui_locale",
]
