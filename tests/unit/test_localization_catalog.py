"""Tests for the packaged translation tables and translation file loading."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from valmessages.backend.resources import (
    ConfigurationError,
    LanguageManager,
    bundled_locales,
    load_bundled_language,
    load_language_file,
)
from valmessages.backend.resources.catalog import load_bundled_languages

TRANSLATIONS_ROOT = Path(__file__).resolve().parents[2] / "src" / "valmessages" / "translations"


def _read_message(locale: str, key: str) -> str:
    payload = json.loads(TRANSLATIONS_ROOT.joinpath(f"{locale}.json").read_text(encoding="utf-8"))
    return str(payload["messages"][key])


def test_bundled_locales_match_packaged_files() -> None:
    expected = sorted(path.stem for path in TRANSLATIONS_ROOT.glob("*.json"))

    assert list(bundled_locales()) == expected
    assert "en" in bundled_locales()


def test_bundled_language_loads_shared_table() -> None:
    language = load_bundled_language("fr")

    assert language.name == "fr"
    assert language.get("NotNullValidator") == _read_message("fr", "NotNullValidator")


def test_bundled_languages_list_english_first() -> None:
    languages = load_bundled_languages()

    assert languages[0].name == "en"
    assert len(languages) == len(bundled_locales())


def test_bundled_languages_are_immutable() -> None:
    language = load_bundled_language("en")

    with pytest.raises(ValueError):
        language.name = "xx"  # type: ignore[misc]


def test_load_language_file_reads_yaml(tmp_path: Path) -> None:
    path = tmp_path / "pt-BR.yaml"
    path.write_text(
        "translations:\n  NotNullValidator: \"'{PropertyName}' não pode ser nulo.\"\n",
        encoding="utf-8",
    )

    language = load_language_file(path)

    assert language.name == "pt-BR"
    assert language.get("NotNullValidator") == "'{PropertyName}' não pode ser nulo."


def test_load_language_file_reads_json_with_explicit_code(tmp_path: Path) -> None:
    path = tmp_path / "custom.json"
    path.write_text(json.dumps({"code": "da", "messages": {"NotEmptyValidator": "tom"}}), encoding="utf-8")

    assert load_language_file(path).name == "da"
    assert load_language_file(path, name="da-DK").name == "da-DK"


def test_load_language_file_rejects_non_mapping(tmp_path: Path) -> None:
    path = tmp_path / "broken.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ConfigurationError):
        load_language_file(path)


def test_load_language_file_rejects_invalid_translations(tmp_path: Path) -> None:
    path = tmp_path / "broken.yaml"
    path.write_text("name: fr\ntranslations: nope\n", encoding="utf-8")

    with pytest.raises(ConfigurationError):
        load_language_file(path)


def test_load_language_file_requires_existing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_language_file(tmp_path / "missing.yaml")


def test_region_specific_bundled_table_is_resolved_by_full_code() -> None:
    manager = LanguageManager()
    chinese = load_bundled_language("zh-CN")

    assert chinese.name == "zh-CN"
    assert manager.get_string("NotNullValidator", "zh_cn") == chinese.get("NotNullValidator")
    assert manager.get_string("NotNullValidator", "zh-TW") == load_bundled_language("en").get("NotNullValidator")
