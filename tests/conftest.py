"""Test configuration utilities and shared fixtures."""

import sys
from pathlib import Path

# Ensure the ``src`` directory is importable when tests are executed without an
# editable install.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import pytest  # noqa: E402
from flask import Flask  # noqa: E402
from flask.testing import FlaskClient  # noqa: E402

from valmessages.backend.app import create_app  # noqa: E402
from valmessages.backend.config import ValidatorOptions  # noqa: E402
from valmessages.backend.resources import Language, LanguageManager  # noqa: E402


@pytest.fixture()
def english() -> Language:
    return Language(name="en", translations={"notnull_error": "must not be null"})


@pytest.fixture()
def french() -> Language:
    return Language(name="fr", translations={"notnull_error": "ne doit pas être nul"})


@pytest.fixture()
def manager(english: Language, french: Language) -> LanguageManager:
    """Return a manager seeded with small English and French tables."""

    language_manager = LanguageManager([english])
    language_manager.add_language(french)
    return language_manager


@pytest.fixture()
def options() -> ValidatorOptions:
    """Return options backed by the bundled languages."""

    return ValidatorOptions()


@pytest.fixture()
def app(options: ValidatorOptions) -> Flask:
    """Return a configured Flask application for integration tests."""

    application = create_app(options)
    application.config.update(TESTING=True)
    return application


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    """Provide a test client bound to the configured Flask app."""

    return app.test_client()
