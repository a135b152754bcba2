"""Expose registered languages and their translation tables."""

from __future__ import annotations

from flask import Blueprint, jsonify

from valmessages.backend.app.http import get_options, problem_response
from valmessages.backend.resources import Locale

blueprint = Blueprint("languages", __name__, url_prefix="/api/v1/languages")
translations_blueprint = Blueprint("translations", __name__, url_prefix="/api/v1/translations")


@blueprint.get("/")
def list_languages():
    """Return the registered culture codes and the fallback language."""

    manager = get_options().language_manager
    languages = manager.get_supported_languages()
    payload = {
        "languages": sorted(language.name for language in languages),
        "fallback": manager.fallback_language.name,
        "enabled": manager.enabled,
    }
    return jsonify(payload), 200


@translations_blueprint.get("/<locale>")
def get_translations(locale: str):
    """Return the table registered for ``locale`` or its neutral parent."""

    manager = get_options().language_manager
    culture = Locale.parse(locale)
    registered = {language.name: language for language in manager.get_supported_languages()}

    language = registered.get(culture.code)
    if language is None and not culture.is_neutral:
        language = registered.get(culture.parent_code)

    if language is None:
        return problem_response(
            "not_found",
            status=404,
            message=f"Language '{culture.code}' is not registered",
        ).to_response()

    payload = {
        "locale": language.name,
        "translations": dict(language.translations),
        "fallback": {
            "locale": manager.fallback_language.name,
            "translations": dict(manager.fallback_language.translations),
        },
    }
    return jsonify(payload), 200
