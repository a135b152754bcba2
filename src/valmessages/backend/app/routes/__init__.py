"""Blueprint registrations for application routes."""

from flask import Flask

from .languages import blueprint as languages_blueprint
from .languages import translations_blueprint
from .messages import blueprint as messages_blueprint


def register_routes(app: Flask) -> None:
    """Register all Flask blueprints with the provided application."""

    app.register_blueprint(languages_blueprint)
    app.register_blueprint(translations_blueprint)
    app.register_blueprint(messages_blueprint)
