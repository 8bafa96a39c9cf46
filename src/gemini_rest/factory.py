"""Client construction from keys or loaded settings."""

from __future__ import annotations

import logging
from typing import Any

from .agent.protocol import ApiAuth
from .agent.raw import RawAgent
from .agent.request_config import default_config
from .client import GeminiClient
from .logging import redact_secrets
from .settings import Settings

logger = logging.getLogger(__name__)


def create_client(
    api_key: str | None = None,
    api_secret: str | None = None,
    *,
    sandbox: bool = False,
    config: dict[str, Any] | None = None,
) -> GeminiClient:
    """Create a Gemini client.

    Args:
        api_key: Public API key (omit for a public-only client)
        api_secret: API secret
        sandbox: Use the sandbox environment
        config: Request config overrides (root_url, version, timeout, headers)

    Raises:
        ValueError: If only one of api_key/api_secret is given
    """
    if bool(api_key) != bool(api_secret):
        raise ValueError("api_key and api_secret must be provided together")

    auth = ApiAuth(api_key, api_secret) if api_key and api_secret else None
    agent = RawAgent(auth, config=default_config(sandbox=sandbox).merge(config))
    return GeminiClient(raw_agent=agent)


def create_client_from_settings(settings: Settings) -> GeminiClient:
    """Create a client from loaded settings, upgraded when credentials exist."""
    api_key = api_secret = None
    if settings.credentials:
        api_key = settings.credentials.api_key.get_secret_value()
        api_secret = settings.credentials.api_secret.get_secret_value()
        redact_secrets(api_key, api_secret)
    else:
        logger.info("No credentials configured, private endpoints are unavailable")

    client = create_client(
        api_key,
        api_secret,
        sandbox=settings.sandbox,
        config=settings.request_overrides(),
    )
    logger.info("Initialized Gemini client (env=%s, sandbox=%s)", settings.env, settings.sandbox)
    return client
