"""Request agent for the Gemini REST API."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Mapping

import aiohttp

from .errors import TransportError, UnauthenticatedError, UpstreamError
from .protocol import ApiAuth, GeminiResponse, Signature
from .request_config import RequestConfig
from .signing import auth_headers, sign_message

logger = logging.getLogger(__name__)


def _encode_query(params: Mapping[str, Any] | None) -> dict[str, str]:
    """Drop unset values and render booleans the way the exchange expects."""
    encoded: dict[str, str] = {}
    for key, value in (params or {}).items():
        if value is None:
            continue
        if isinstance(value, bool):
            encoded[key] = "true" if value else "false"
        else:
            encoded[key] = str(value)
    return encoded


def _override_headers(config_override: RequestConfig | dict[str, Any] | None) -> dict[str, str]:
    if config_override is None:
        return {}
    if isinstance(config_override, RequestConfig):
        if "headers" not in config_override.model_fields_set:
            return {}
        return dict(config_override.headers)
    return dict(config_override.get("headers") or {})


async def _read_response(resp: Any) -> GeminiResponse:
    text = await resp.text()
    try:
        data: Any = json.loads(text) if text else None
    except ValueError:
        data = text
    return GeminiResponse(resp.status, data, headers=resp.headers, url=str(resp.url))


class RawAgent:
    """Sends public and signed private requests to the exchange."""

    def __init__(
        self,
        auth: ApiAuth | None = None,
        *,
        config: RequestConfig | dict[str, Any] | None = None,
        session: aiohttp.ClientSession | None = None,
    ):
        """Initialize the agent.

        Args:
            auth: API credentials; omit for a public-only agent
            config: Instance-level overrides applied over the defaults
            session: Existing aiohttp session to reuse (not closed by the agent)
        """
        self.auth = auth
        self.config = RequestConfig().merge(config)
        self.session = session
        self._owns_session = session is None

    sign_message = staticmethod(sign_message)

    def is_upgraded(self) -> bool:
        return self.auth is not None

    def upgrade(self, new_auth: ApiAuth) -> None:
        """Replace the stored credentials wholesale."""
        self.auth = new_auth

    async def _ensure_session(self) -> aiohttp.ClientSession:
        if self.session is None:
            connector = aiohttp.TCPConnector()
            self.session = aiohttp.ClientSession(connector=connector)
            self._owns_session = True
        return self.session

    def _resolve_config(self, config_override: RequestConfig | dict[str, Any] | None) -> RequestConfig:
        return self.config.merge(config_override)

    async def get_public_endpoint(
        self,
        endpoint: str,
        query_params: Mapping[str, Any] | None = None,
        config_override: RequestConfig | dict[str, Any] | None = None,
    ) -> GeminiResponse:
        """Fetch data from a public (unauthenticated) endpoint.

        Network errors from aiohttp propagate unchanged; non-2xx answers
        raise UpstreamError.
        """
        if not endpoint:
            raise ValueError("endpoint must not be empty")

        config = self._resolve_config(config_override)
        url = config.public_url(endpoint)
        params = _encode_query(query_params)
        session = await self._ensure_session()

        logger.debug("GET %s", url)
        async with session.get(
            url,
            params=params,
            headers=config.headers,
            timeout=aiohttp.ClientTimeout(total=config.timeout),
        ) as resp:
            response = await _read_response(resp)

        if not response.ok:
            logger.warning("GET %s failed with status %s", url, response.status)
            raise UpstreamError(response.status, response.data, response)

        return response

    async def post_to_private_endpoint(
        self,
        endpoint: str,
        data: Mapping[str, Any] | None = None,
        config_override: RequestConfig | dict[str, Any] | None = None,
    ) -> GeminiResponse:
        """Post to a private endpoint, signing the request with the stored secret.

        Raises:
            UnauthenticatedError: No credentials; no request is sent
            UpstreamError: The exchange answered with a non-2xx status
            TransportError: The request failed before a response arrived
        """
        if not self.is_upgraded():
            raise UnauthenticatedError()
        if not endpoint:
            raise ValueError("endpoint must not be empty")

        auth = self.auth
        config = self._resolve_config(config_override)
        path = config.request_path(endpoint)
        url = f"{config.root_url.rstrip('/')}{path}"

        signature: Signature = sign_message(path, data, auth.private_key)
        body = json.dumps(dict(data or {}), separators=(",", ":"), ensure_ascii=False).encode("utf-8")

        headers = {
            **config.headers,
            **auth_headers(auth.public_key, signature),
        }
        # caller-supplied headers win over the computed ones, except the length
        headers.update(_override_headers(config_override))
        headers["Content-Length"] = str(len(body))

        session = await self._ensure_session()

        logger.debug("POST %s", path)
        try:
            async with session.post(
                url,
                data=body,
                headers=headers,
                timeout=aiohttp.ClientTimeout(total=config.timeout),
            ) as resp:
                response = await _read_response(resp)
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            logger.warning("POST %s failed: %s", path, exc)
            raise TransportError(f"Request to {path} failed: {exc}", exc) from exc

        if not response.ok:
            logger.warning("POST %s failed with status %s", path, response.status)
            raise UpstreamError(response.status, response.data, response)

        return response

    async def close(self) -> None:
        """Close the HTTP session if the agent created it."""
        if self.session is not None and self._owns_session:
            await self.session.close()
            self.session = None

    async def __aenter__(self) -> "RawAgent":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()
