from pathlib import Path

from valmessages.backend.config.validator import (
    main,
    placeholders,
    validate_bundled_languages,
    validate_language,
)
from valmessages.backend.resources import Language, load_bundled_language


def test_current_bundled_translations_are_valid() -> None:
    results = validate_bundled_languages()
    assert all(not issues for issues in results.values()), results


def test_placeholders_are_extracted() -> None:
    assert placeholders("'{PropertyName}' must be between {From} and {To}.") == {
        "PropertyName",
        "From",
        "To",
    }


def test_validator_flags_placeholder_mismatch() -> None:
    english = load_bundled_language("en")
    broken = Language(
        name="xx",
        translations={**english.translations, "LessThanValidator": "'{PropertyName}' < '{Other}'"},
    )

    errors = validate_language(broken, english)

    assert any("LessThanValidator" in error and "placeholders" in error for error in errors)


def test_validator_reports_missing_keys_only_in_strict_mode() -> None:
    english = load_bundled_language("en")
    partial = Language(name="xx", translations={"NotNullValidator": "'{PropertyName}' !"})

    strict_errors = validate_language(partial, english)
    lenient_errors = validate_language(partial, english, strict=False)

    assert any("missing" in error for error in strict_errors)
    assert lenient_errors == []


def test_validator_flags_unknown_and_empty_messages() -> None:
    english = load_bundled_language("en")
    odd = Language(name="xx", translations={"NotNullValidator": " ", "Custom": "x"})

    errors = validate_language(odd, english, strict=False)

    assert any("languages.xx" in error and "Custom" in error for error in errors)
    assert any("empty message for 'NotNullValidator'" in error for error in errors)


def test_main_reports_bundled_languages(capsys) -> None:
    assert main(["en", "fr"]) == 0

    output = capsys.readouterr().out
    assert "[en] OK" in output
    assert "[fr] OK" in output


def test_main_rejects_unknown_bundled_locale(capsys) -> None:
    assert main(["xx"]) == 1
    assert "Unknown bundled locales" in capsys.readouterr().out


def test_main_validates_extra_files(tmp_path: Path, capsys) -> None:
    path = tmp_path / "xx.yaml"
    path.write_text("translations:\n  NotNullValidator: \"{Wrong}\"\n", encoding="utf-8")

    assert main(["--lenient", "--file", str(path)]) == 1
    assert "[xx]" in capsys.readouterr().out


def test_main_reports_unreadable_files(tmp_path: Path, capsys) -> None:
    assert main(["--file", str(tmp_path / "missing.yaml")]) == 1
    assert "failed to load translations" in capsys.readouterr().out
