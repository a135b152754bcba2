"""Pydantic models describing the localisation settings file."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping, Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing_extensions import Self

from valmessages.backend.resources import ConfigurationError


class ImmutableModel(BaseModel):
    """Base class that freezes instances and rejects unknown fields."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)


class LanguageSource(ImmutableModel):
    """A translation table given inline or as a path to a YAML/JSON file."""

    path: Path | None = None
    name: str | None = Field(default=None, alias="code")
    translations: Mapping[str, str] | None = Field(default=None, alias="messages")

    @field_validator("translations", mode="before")
    @classmethod
    def _coerce_messages(cls, value: Any) -> Mapping[str, str] | None:
        if value is None:
            return None
        if isinstance(value, Mapping):
            return {str(key): "" if text is None else str(text) for key, text in value.items()}
        raise ConfigurationError("Inline translations must be provided as a mapping")

    @model_validator(mode="after")
    def _validate_source(self) -> Self:
        if self.path is None and self.translations is None:
            raise ConfigurationError("Language sources require either a path or inline translations")
        if self.path is not None and self.translations is not None:
            raise ConfigurationError("Language sources cannot combine a path with inline translations")
        if self.path is None and not (self.name and self.name.strip()):
            raise ConfigurationError("Inline language sources must specify a culture code")
        return self


class LocalizationSettings(ImmutableModel):
    """Top-level localisation settings."""

    enabled: bool = True
    fallback_locale: str | None = None
    ui_locale: str = "en"
    clear_bundled: bool = False
    languages: Sequence[LanguageSource] = Field(default_factory=tuple)
    base_path: Path | None = Field(default=None, exclude=True)

    @field_validator("fallback_locale", "ui_locale", mode="before")
    @classmethod
    def _strip_codes(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip()
        return value

    @model_validator(mode="after")
    def _validate_codes(self) -> Self:
        if self.fallback_locale is not None and not self.fallback_locale:
            raise ConfigurationError("fallback_locale must not be blank when provided")
        return self

    def resolve_path(self, path: Path) -> Path:
        """Resolve ``path`` relative to the settings file location."""

        expanded = path.expanduser()
        if expanded.is_absolute() or self.base_path is None:
            return expanded
        return self.base_path / expanded


__all__ = ["ImmutableModel", "LanguageSource", "LocalizationSettings"]
