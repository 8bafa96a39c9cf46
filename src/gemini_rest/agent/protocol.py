"""Shared types for the Gemini request agent."""

from __future__ import annotations

from typing import Any, Mapping, Protocol


class ApiAuth:
    """API credentials: a public key and the secret used for signing."""

    def __init__(self, public_key: str, private_key: str):
        self.public_key = public_key
        self.private_key = private_key

    def __repr__(self) -> str:
        return f"ApiAuth(public_key={self.public_key!r}, private_key='***')"


class Signature:
    """Base64 JSON payload and its HMAC-SHA384 hex digest."""

    def __init__(self, payload: str, digest: str):
        self.payload = payload
        self.digest = digest

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Signature):
            return NotImplemented
        return self.payload == other.payload and self.digest == other.digest

    def __repr__(self) -> str:
        return f"Signature(payload={self.payload!r}, digest={self.digest!r})"


class GeminiResponse:
    """Response returned by the agent once the body has been read."""

    def __init__(
        self,
        status: int,
        data: Any,
        headers: Mapping[str, str] | None = None,
        url: str | None = None,
    ):
        self.status = status
        self.data = data
        self.headers = dict(headers or {})
        self.url = url

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def __repr__(self) -> str:
        return f"GeminiResponse(status={self.status}, url={self.url!r})"


class RawAgentProtocol(Protocol):
    """Protocol for the request agent used by the client facade."""

    auth: ApiAuth | None

    def is_upgraded(self) -> bool:
        """Return True when credentials are present."""
        ...

    def upgrade(self, new_auth: ApiAuth) -> None:
        """Replace the stored credentials."""
        ...

    async def get_public_endpoint(
        self,
        endpoint: str,
        query_params: Mapping[str, Any] | None = None,
        config_override: Any = None,
    ) -> GeminiResponse:
        """Send an unauthenticated GET request."""
        ...

    async def post_to_private_endpoint(
        self,
        endpoint: str,
        data: Mapping[str, Any] | None = None,
        config_override: Any = None,
    ) -> GeminiResponse:
        """Send a signed POST request."""
        ...

    async def close(self) -> None:
        """Close the HTTP session."""
        ...
