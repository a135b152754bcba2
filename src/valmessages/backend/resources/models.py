"""Pydantic models describing translation tables and resource errors."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .locale import Locale


class InvalidLanguageError(ValueError):
    """Raised when a language is missing or does not carry a culture code."""


class ConfigurationError(ValueError):
    """Raised when localisation settings reference unavailable languages or data."""


class Language(BaseModel):
    """A complete key to message table for a single culture code.

    The code is stored in canonical form (``pt-br`` becomes ``pt-BR``) and the
    table is a read-only copy of the mapping it was built from.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    name: str = Field(alias="code")
    translations: Mapping[str, str] = Field(
        default_factory=dict, alias="messages", validate_default=True
    )

    @field_validator("name", mode="after")
    @classmethod
    def _canonical_code(cls, value: str) -> str:
        return Locale.parse(value).code

    @field_validator("translations", mode="before")
    @classmethod
    def _coerce_messages(cls, value: Any) -> Mapping[str, str]:
        if value is None:
            return {}
        if isinstance(value, Mapping):
            return {str(key): "" if text is None else str(text) for key, text in value.items()}
        raise ConfigurationError("Translations must be provided as a key to message mapping")

    @field_validator("translations", mode="after")
    @classmethod
    def _freeze_messages(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))

    def get(self, key: str) -> str | None:
        """Return the message stored for ``key`` or ``None`` when absent."""

        return self.translations.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self.translations


__all__ = ["ConfigurationError", "InvalidLanguageError", "Language"]
