"""Utilities for validating translation tables and surfacing issues."""

from __future__ import annotations

import argparse
import re
from typing import Iterable, Mapping, Sequence

from valmessages.backend.resources import (
    BASE_LOCALE,
    Language,
    bundled_locales,
    load_bundled_language,
    load_language_file,
)

PLACEHOLDER_PATTERN = re.compile(r"{\s*([A-Za-z0-9_.]+)\s*}")


def _format_scope(scope: str, message: str) -> str:
    return f"{scope}: {message}"


def placeholders(message: str) -> frozenset[str]:
    """Return the ``{Name}`` placeholders used by ``message``."""

    return frozenset(PLACEHOLDER_PATTERN.findall(message))


def _validate_keys(scope: str, language: Language, reference: Language, *, strict: bool) -> list[str]:
    errors: list[str] = []

    expected = set(reference.translations)
    present = set(language.translations)

    missing = expected - present
    if missing and strict:
        errors.append(
            _format_scope(scope, f"missing {len(missing)} keys: {', '.join(sorted(missing))}")
        )

    unknown = present - expected
    if unknown:
        errors.append(
            _format_scope(scope, f"keys unknown to '{reference.name}': {', '.join(sorted(unknown))}")
        )

    return errors


def _validate_messages(scope: str, language: Language, reference: Language) -> list[str]:
    errors: list[str] = []

    for key, message in sorted(language.translations.items()):
        if not message.strip():
            errors.append(_format_scope(scope, f"empty message for '{key}'"))
            continue

        expected = reference.get(key)
        if expected is None:
            continue

        found = placeholders(message)
        wanted = placeholders(expected)
        if found != wanted:
            errors.append(
                _format_scope(
                    scope,
                    (
                        f"placeholders for '{key}' differ: "
                        f"expected {{{', '.join(sorted(wanted))}}}, "
                        f"found {{{', '.join(sorted(found))}}}"
                    ),
                )
            )

    return errors


def validate_language(language: Language, reference: Language, *, strict: bool = True) -> list[str]:
    """Return human-readable issues for ``language`` compared to ``reference``.

    Missing keys are only reported in ``strict`` mode since they fall back to
    the reference language at resolution time.
    """

    scope = f"languages.{language.name}"
    errors: list[str] = []
    errors.extend(_validate_keys(scope, language, reference, strict=strict))
    errors.extend(_validate_messages(scope, language, reference))
    return errors


def validate_languages(
    languages: Iterable[Language],
    reference: Language | None = None,
    *,
    strict: bool = True,
) -> dict[str, list[str]]:
    """Validate several languages and return issues keyed by culture code."""

    base = reference or load_bundled_language(BASE_LOCALE)
    return {
        language.name: validate_language(language, base, strict=strict)
        for language in languages
    }


def validate_bundled_languages(
    locales: Sequence[str] | None = None,
    *,
    strict: bool = True,
) -> dict[str, list[str]]:
    """Validate the packaged translation tables."""

    targets = locales or bundled_locales()
    return validate_languages((load_bundled_language(code) for code in targets), strict=strict)


def _print_results(results: Mapping[str, list[str]]) -> int:
    exit_code = 0
    for code, issues in results.items():
        if issues:
            exit_code = 1
            print(f"[{code}] {len(issues)} issue(s) detected:")
            for issue in issues:
                print(f"  - {issue}")
        else:
            print(f"[{code}] OK")
    return exit_code


def _build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Validate validation message translations against the base language."
    )
    parser.add_argument(
        "locales",
        nargs="*",
        help="Bundled culture codes to validate (defaults to all bundled languages)",
    )
    parser.add_argument(
        "--file",
        dest="files",
        action="append",
        default=[],
        help="Additional YAML/JSON translation file to validate (repeatable)",
    )
    parser.add_argument(
        "--lenient",
        action="store_true",
        help="Do not report keys missing relative to the base language",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for running validations from the command line."""

    parser = _build_argument_parser()
    args = parser.parse_args(argv)
    strict = not args.lenient

    unknown = [code for code in args.locales if code not in bundled_locales()]
    if unknown:
        print(f"Unknown bundled locales: {', '.join(unknown)}")
        return 1

    exit_code = 0
    results: dict[str, list[str]] = {}
    if args.locales or not args.files:
        results.update(validate_bundled_languages(args.locales or None, strict=strict))

    for path in args.files:
        try:
            language = load_language_file(path)
        except (FileNotFoundError, ValueError) as error:
            print(f"[{path}] failed to load translations: {error}")
            exit_code = 1
            continue
        results.update(validate_languages([language], strict=strict))

    return max(exit_code, _print_results(results))


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    raise SystemExit(main())
