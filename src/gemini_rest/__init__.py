"""gemini_rest: async client for the Gemini exchange REST API."""

from .agent import (
    ApiAuth,
    GeminiError,
    GeminiResponse,
    RawAgent,
    RequestConfig,
    Signature,
    TransportError,
    UnauthenticatedError,
    UpstreamError,
    sign_message,
)
from .client import GeminiClient
from .factory import create_client, create_client_from_settings
from .settings import Settings

__all__ = [
    "ApiAuth",
    "Signature",
    "GeminiResponse",
    "RawAgent",
    "RequestConfig",
    "sign_message",
    "GeminiClient",
    "create_client",
    "create_client_from_settings",
    "Settings",
    "GeminiError",
    "UnauthenticatedError",
    "UpstreamError",
    "TransportError",
]
