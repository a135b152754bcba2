"""Bundled translation tables backed by packaged JSON resources."""

from __future__ import annotations

import json
import logging
from functools import cache
from importlib import resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .models import ConfigurationError, Language

BASE_LOCALE = "en"
_TRANSLATIONS_PACKAGE = "valmessages.translations"

logger = logging.getLogger(__name__)


@cache
def bundled_locales() -> tuple[str, ...]:
    """Return the culture codes with a packaged translation table."""

    try:
        root = resources.files(_TRANSLATIONS_PACKAGE)
    except ModuleNotFoundError:  # pragma: no cover - broken installation
        return (BASE_LOCALE,)

    locales = sorted(
        entry.name.removesuffix(".json")
        for entry in root.iterdir()
        if entry.name.endswith(".json")
    )
    return tuple(locales) or (BASE_LOCALE,)


@cache
def _read_bundled_payload(locale: str) -> dict[str, Any]:
    """Load the raw translation payload for a packaged locale."""

    try:
        resource = resources.files(_TRANSLATIONS_PACKAGE).joinpath(f"{locale}.json")
    except ModuleNotFoundError:  # pragma: no cover - broken installation
        return {"messages": {}}

    if not resource.is_file():
        return {"messages": {}}

    with resource.open("r", encoding="utf-8") as handle:
        payload = json.load(handle)

    messages = payload.get("messages") or {}
    if not isinstance(messages, dict):
        raise ConfigurationError(f"Bundled translations for '{locale}' must define a mapping")

    return {"messages": messages}


@cache
def load_bundled_language(locale: str) -> Language:
    """Return the immutable packaged :class:`Language` for ``locale``."""

    payload = _read_bundled_payload(locale)
    return Language(name=locale, translations=payload["messages"])


def load_bundled_languages() -> tuple[Language, ...]:
    """Return every packaged language, English first."""

    ordered = sorted(bundled_locales(), key=lambda code: (code != BASE_LOCALE, code))
    return tuple(load_bundled_language(code) for code in ordered)


def _read_mapping(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        if path.suffix.lower() == ".json":
            data = json.load(handle)
        else:
            data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Translation file {path.name} must define a mapping at the top level")
    return data


def load_language_file(path: str | Path, *, name: str | None = None) -> Language:
    """Read a YAML or JSON translation table from disk.

    The file holds a ``name`` (or ``code``) and a ``translations`` (or
    ``messages``) mapping. ``name`` overrides the code stored in the file;
    when neither is present the file stem is used.
    """

    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"Translation file not found: {file_path}")

    payload = _read_mapping(file_path)
    if name is not None:
        payload.pop("code", None)
        payload["name"] = name
    elif "name" not in payload and "code" not in payload:
        payload["name"] = file_path.stem

    try:
        language = Language.model_validate(payload)
    except ValidationError as error:
        raise ConfigurationError(f"Invalid translation file {file_path.name}: {error}") from error

    logger.debug("Loaded %d translations for '%s' from %s", len(language.translations), language.name, file_path)
    return language


__all__ = [
    "BASE_LOCALE",
    "bundled_locales",
    "load_bundled_language",
    "load_bundled_languages",
    "load_language_file",
]
