"""Perch exception hierarchy.

Shared across Router, App, renderers, and the ASGI handler so every
module raises and catches the same types.
"""

from dataclasses import dataclass


class PerchError(Exception):
    """Base for all perch-specific errors."""


class ConfigurationError(PerchError):
    """Raised when app configuration is invalid.

    Typically raised during ``App._freeze()`` at startup: a missing or
    malformed layout or template stops the server before it serves.
    """


@dataclass(frozen=True, slots=True)
class HTTPError(PerchError):
    """An error that maps directly to an HTTP status code."""

    status: int
    detail: str = ""

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818
    """404 — no route matched the request path."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)


class TranslatorError(PerchError):
    """Raised by a translator that cannot produce its value.

    ``message`` becomes the plain-text response body.
    """

    status: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ParameterError(TranslatorError):
    """400 — captures or request parameters are missing or malformed."""

    status = 400


class TranslationError(TranslatorError):
    """500 — a downstream failure while producing the value."""

    status = 500
