"""Tests for legacy resource names and provider overrides."""

from __future__ import annotations

import pytest

from valmessages.backend.resources import (
    Language,
    LanguageManager,
    LegacyResourceError,
    ResourceAccessorProvider,
    remap_legacy_key,
)
from valmessages.backend.resources.legacy import LegacyResourceProvider, legacy_keys


class LegacyMessages:
    notnull_error = "Legacy: required"
    length_error = "Legacy: bad length"

    @staticmethod
    def email_error() -> str:
        return "Legacy: bad email"

    regex_error = 42


def test_length_validators_share_one_legacy_key() -> None:
    assert (
        remap_legacy_key("MinimumLengthValidator")
        == remap_legacy_key("MaximumLengthValidator")
        == remap_legacy_key("LengthValidator")
        == "length_error"
    )


def test_unknown_names_are_returned_unchanged() -> None:
    assert remap_legacy_key("UnknownXyz") == "UnknownXyz"
    assert remap_legacy_key("notnull_error") == "notnull_error"


def test_legacy_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        legacy_keys()["NotNullValidator"] = "changed"  # type: ignore[index]


def test_accessor_provider_reads_attributes() -> None:
    provider = ResourceAccessorProvider(LegacyMessages)

    assert isinstance(provider, LegacyResourceProvider)
    assert provider.get_string("notnull_error") == "Legacy: required"
    assert provider.get_string("email_error") == "Legacy: bad email"


@pytest.mark.parametrize("key", ["missing_error", "regex_error"])
def test_accessor_provider_raises_for_unusable_resources(key: str) -> None:
    provider = ResourceAccessorProvider(LegacyMessages)

    with pytest.raises(LegacyResourceError):
        provider.get_string(key)


def test_manager_consults_provider_with_legacy_key(manager: LanguageManager) -> None:
    manager.resource_provider = ResourceAccessorProvider(LegacyMessages)

    assert manager.get_string("NotNullValidator", "fr") == "Legacy: required"
    assert manager.get_string("MaximumLengthValidator", "fr") == "Legacy: bad length"


def test_provider_failures_fall_through_to_languages() -> None:
    english = Language(name="en", translations={"RegularExpressionValidator": "bad format"})
    manager = LanguageManager([english], resource_provider=ResourceAccessorProvider(LegacyMessages))

    assert manager.get_string("RegularExpressionValidator", "en") == "bad format"
    assert manager.get_string("CreditCardValidator", "en") == ""


def test_any_provider_error_is_swallowed(manager: LanguageManager) -> None:
    class BrokenProvider:
        def get_string(self, key: str) -> str:
            raise RuntimeError("boom")

    manager.resource_provider = BrokenProvider()

    assert manager.get_string("notnull_error", "fr-FR") == "ne doit pas être nul"
