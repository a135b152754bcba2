"""Resolve individual validation messages."""

from __future__ import annotations

from flask import Blueprint, jsonify, request

from valmessages.backend.app.http import get_options
from valmessages.backend.resources import Locale

blueprint = Blueprint("messages", __name__, url_prefix="/api/v1/messages")


@blueprint.get("/<key>")
def get_message(key: str):
    """Return the message for ``key`` in the requested (or ambient) locale.

    Unknown keys resolve to an empty message rather than an error.
    """

    options = get_options()
    locale_hint = request.args.get("locale")
    locale = Locale.parse(locale_hint) if locale_hint else options.current_locale()

    message = options.get_message(key, locale)
    return jsonify({"key": key, "locale": locale.code, "message": message}), 200
