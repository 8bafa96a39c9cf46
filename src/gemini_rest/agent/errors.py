"""Error types raised by the request agent."""

from __future__ import annotations

from typing import Any


class GeminiError(Exception):
    """Base class for all client errors."""


class UnauthenticatedError(GeminiError):
    """A private endpoint was called on a client without credentials."""

    def __init__(self, message: str = "api keys are required to access private endpoints"):
        super().__init__(message)


class UpstreamError(GeminiError):
    """The exchange answered with a non-2xx status.

    ``detail`` holds the most specific information available: the structured
    ``error`` field, then the body, then the response itself. Gemini's
    ``reason`` (or ``message``) is kept separately on ``reason``.
    """

    def __init__(self, status: int, body: Any = None, response: Any = None):
        self.status = status
        self.body = body
        self.response = response
        self.reason: str | None = None
        self.detail: Any = None

        if isinstance(body, dict):
            self.reason = body.get("reason") or body.get("message")
            self.detail = body.get("error") or None
        if self.detail is None:
            self.detail = body if body not in (None, "") else response

        super().__init__(f"HTTP {status}: {self.reason or self.detail}")


class TransportError(GeminiError):
    """Network failure or timeout before a response was received."""

    def __init__(self, message: str, original: BaseException | None = None):
        super().__init__(message)
        self.original = original
