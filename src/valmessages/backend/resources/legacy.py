"""Compatibility helpers for message resources predating validator-named keys.

Older releases identified default messages with resource names such as
``notnull_error`` rather than the validator name (``NotNullValidator``).
Custom resource providers written against those names are still honoured
through :class:`LegacyResourceProvider`.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping, Protocol, runtime_checkable

_LEGACY_KEYS: Mapping[str, str] = MappingProxyType(
    {
        "EnumValidator": "enum_error",
        "NullValidator": "null_error",
        "EmptyValidator": "empty_error",
        "ScalePrecisionValidator": "scale_precision_error",
        "CreditCardValidator": "CreditCardError",
        "ExclusiveBetweenValidator": "exclusivebetween_error",
        "InclusiveBetweenValidator": "inclusivebetween_error",
        "ExactLengthValidator": "exact_length_error",
        "EqualValidator": "equal_error",
        "RegularExpressionValidator": "regex_error",
        "PredicateValidator": "predicate_error",
        "AsyncPredicateValidator": "predicate_error",
        "NotNullValidator": "notnull_error",
        "NotEqualValidator": "notequal_error",
        "NotEmptyValidator": "notempty_error",
        "LessThanValidator": "lessthan_error",
        "LessThanOrEqualValidator": "lessthanorequal_error",
        # The three length validators historically shared a single message.
        "LengthValidator": "length_error",
        "MinimumLengthValidator": "length_error",
        "MaximumLengthValidator": "length_error",
        "GreaterThanValidator": "greaterthan_error",
        "GreaterThanOrEqualValidator": "greaterthanorequal_error",
        "EmailValidator": "email_error",
    }
)


def remap_legacy_key(name: str) -> str:
    """Return the historical resource name for ``name`` or ``name`` itself."""

    return _LEGACY_KEYS.get(name, name)


def legacy_keys() -> Mapping[str, str]:
    """Expose the read-only validator name to resource name table."""

    return _LEGACY_KEYS


class LegacyResourceError(LookupError):
    """Raised when a legacy resource provider cannot supply a message."""


@runtime_checkable
class LegacyResourceProvider(Protocol):
    """Override consulted before the bundled languages, keyed by legacy names."""

    def get_string(self, key: str) -> str:  # pragma: no cover - protocol definition
        ...


class ResourceAccessorProvider:
    """Serve legacy messages from attributes of a resource holder.

    The holder is typically a class exposing one string attribute or property
    per resource name (``Messages.notnull_error``), mirroring generated
    resource accessors.
    """

    def __init__(self, resources: Any) -> None:
        if resources is None:
            raise ValueError("A resource holder is required")
        self._resources = resources

    @property
    def resources(self) -> Any:
        return self._resources

    def get_string(self, key: str) -> str:
        try:
            value = getattr(self._resources, key)
        except AttributeError as exc:
            raise LegacyResourceError(
                f"Resource holder {self._resources!r} has no resource named '{key}'"
            ) from exc

        if callable(value):
            value = value()
        if not isinstance(value, str):
            raise LegacyResourceError(f"Resource '{key}' must be a string")
        return value


__all__ = [
    "LegacyResourceError",
    "LegacyResourceProvider",
    "ResourceAccessorProvider",
    "legacy_keys",
    "remap_legacy_key",
]
