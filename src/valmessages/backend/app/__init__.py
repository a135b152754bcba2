"""Application factory exposing validation messages over HTTP."""

from __future__ import annotations

from flask import Flask, jsonify
from werkzeug.exceptions import BadRequest

from valmessages.backend.config import ValidatorOptions, load_settings
from valmessages.backend.version import get_project_version

from .http import OPTIONS_EXTENSION, problem_response
from .routes import register_routes


def create_app(options: ValidatorOptions | None = None) -> Flask:
    """Create and configure the Flask application instance.

    Without explicit ``options`` the settings file named by
    ``VALMESSAGES_SETTINGS`` (or the defaults) configures the language manager.
    """

    app = Flask(__name__)
    app.extensions[OPTIONS_EXTENSION] = options or ValidatorOptions.from_settings(load_settings())

    register_routes(app)

    @app.route("/health", methods=["GET"])
    def health_check():
        """Simple health check endpoint for infrastructure monitoring."""

        manager = app.extensions[OPTIONS_EXTENSION].language_manager
        payload = {
            "status": "ok",
            "version": get_project_version(),
            "languages": len(manager.get_supported_languages()),
            "fallback": manager.fallback_language.name,
        }
        return jsonify(payload)

    @app.errorhandler(BadRequest)
    def handle_bad_request(error: BadRequest):
        """Return consistent JSON responses for malformed requests."""

        message = error.description or "Invalid request"
        return problem_response("bad_request", status=400, message=message).to_response()

    @app.errorhandler(ValueError)
    def handle_value_error(error: ValueError):
        """Surface configuration and argument errors as problem payloads."""

        return problem_response(
            "validation_error", status=400, message=str(error)
        ).to_response()

    return app
