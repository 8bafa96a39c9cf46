"""Request agent: signing, transport and error handling."""

from .errors import GeminiError, TransportError, UnauthenticatedError, UpstreamError
from .normalization import normalize_currency, normalize_symbol
from .protocol import ApiAuth, GeminiResponse, RawAgentProtocol, Signature
from .raw import RawAgent
from .request_config import RequestConfig, default_config
from .signing import API_KEY_HEADER, PAYLOAD_HEADER, SIGNATURE_HEADER, sign_message

__all__ = [
    "ApiAuth",
    "Signature",
    "GeminiResponse",
    "RawAgentProtocol",
    "RawAgent",
    "RequestConfig",
    "default_config",
    "sign_message",
    "API_KEY_HEADER",
    "PAYLOAD_HEADER",
    "SIGNATURE_HEADER",
    "GeminiError",
    "UnauthenticatedError",
    "UpstreamError",
    "TransportError",
    "normalize_symbol",
    "normalize_currency",
]
