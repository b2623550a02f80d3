"""Wren exception hierarchy.

Shared across Router, Route, App, and the body parsers so every module
raises and catches the same types.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


class WrenError(Exception):
    """Base for all wren-specific errors."""


class ConfigurationError(WrenError):
    """Raised when app configuration is invalid.

    Malformed route patterns raise this at registration time, never
    while a request is being served.
    """


class ResponseFinalizedError(WrenError, RuntimeError):
    """Raised when a response is modified after ``end()``."""


@dataclass(frozen=True, slots=True, eq=False)
class HTTPError(WrenError):
    """An error that maps directly to an HTTP status code.

    Raised by the body parsers, route handlers, or the route wrapper.
    ``App.start`` catches these and renders the JSON error envelope,
    merging ``headers`` into the error response. ``details`` may be
    ``None``; the envelope then carries an empty object.
    """

    status: int
    message: str = ""
    details: Mapping[str, Any] | None = field(default_factory=dict)
    headers: Mapping[str, str] = field(default_factory=dict)

    def __str__(self) -> str:
        if self.message:
            return f"{self.status}: {self.message}"
        return str(self.status)


class UnsupportedMediaType(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """415 — no registered body parser accepts the request's content type.

    ``details["allowed_content_types"]`` lists every content type the
    registered parsers accept, for client diagnostics.
    """

    def __init__(self, content_type: str, allowed: tuple[str, ...] = ()) -> None:
        message = (
            f"Unsupported content type: {content_type}"
            if content_type
            else "No content type given"
        )
        super().__init__(
            status=415,
            message=message,
            details={"allowed_content_types": list(allowed)},
        )


class InternalServerError(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """500 — a handler failed with something other than an HTTPError."""

    def __init__(self, message: str, details: Mapping[str, Any] | None = None) -> None:
        super().__init__(status=500, message=message, details=details or {})
