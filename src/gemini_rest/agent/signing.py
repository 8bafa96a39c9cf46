"""Request signing for private Gemini endpoints.

Exposed as a standalone utility so callers can inspect exactly what the
exchange expects in the payload and signature headers.
"""

from __future__ import annotations

import base64
import hashlib
import hmac
import json
import time
from typing import Any, Mapping

from .protocol import Signature

API_KEY_HEADER = "X-GEMINI-APIKEY"
PAYLOAD_HEADER = "X-GEMINI-PAYLOAD"
SIGNATURE_HEADER = "X-GEMINI-SIGNATURE"


def current_nonce() -> str:
    """Return the current wall-clock time in milliseconds, as a string."""
    return str(int(time.time() * 1000))


def sign_message(
    path: str,
    post_data: Mapping[str, Any] | None,
    secret: str,
    *,
    nonce: str | int | None = None,
) -> Signature:
    """Sign a private request.

    Args:
        path: Absolute request path, e.g. ``/v1/order/new``
        post_data: Request body fields (may be None)
        secret: API secret used as the HMAC key
        nonce: Fixed nonce; defaults to the current time in milliseconds

    Returns:
        Signature with the base64 payload and the hex digest
    """
    if nonce is None:
        nonce = current_nonce()

    body = {**(post_data or {}), "nonce": str(nonce), "request": path}
    payload = base64.b64encode(
        json.dumps(body, separators=(",", ":"), ensure_ascii=False).encode("utf-8")
    ).decode("ascii")
    digest = hmac.new(
        secret.encode("utf-8"),
        payload.encode("utf-8"),
        hashlib.sha384,
    ).hexdigest()
    return Signature(payload, digest)


def auth_headers(public_key: str, signature: Signature) -> dict[str, str]:
    """Build the three authentication headers for a signed request."""
    return {
        API_KEY_HEADER: public_key,
        PAYLOAD_HEADER: signature.payload,
        SIGNATURE_HEADER: signature.digest,
    }
