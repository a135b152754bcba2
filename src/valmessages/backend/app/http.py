"""HTTP helpers shared across the message blueprints."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from flask import current_app, jsonify

from valmessages.backend.config import ValidatorOptions

OPTIONS_EXTENSION = "valmessages"


@dataclass(frozen=True)
class ProblemResponse:
    """RFC 7807-style error payload."""

    error: str
    status: int
    message: str | None = None
    extra: Mapping[str, Any] | None = None

    def as_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.error, "status": self.status}
        if self.message:
            payload["message"] = self.message
        if self.extra:
            payload.update(self.extra)
        return payload

    def to_response(self) -> tuple[Any, int]:
        return jsonify(self.as_dict()), self.status


def problem_response(
    error: str,
    *,
    status: int,
    message: str | None = None,
    **extra: Any,
) -> ProblemResponse:
    return ProblemResponse(error=error, status=status, message=message, extra=extra or None)


def get_options() -> ValidatorOptions:
    """Return the :class:`ValidatorOptions` bound to the running application."""

    return current_app.extensions[OPTIONS_EXTENSION]


__all__ = ["OPTIONS_EXTENSION", "ProblemResponse", "get_options", "problem_response"]
