"""Tests for client construction."""

import pytest

from gemini_rest.agent.request_config import SANDBOX_ROOT_URL
from gemini_rest.client import GeminiClient
from gemini_rest.factory import create_client, create_client_from_settings
from gemini_rest.settings import Settings


class TestCreateClient:
    """Tests for create_client."""

    def test_public_client(self):
        client = create_client()
        assert isinstance(client, GeminiClient)
        assert client.is_upgraded() is False

    def test_authenticated_client(self, api_key, api_secret):
        client = create_client(api_key, api_secret)
        assert client.is_upgraded() is True
        assert client.raw_agent.auth.public_key == api_key
        assert client.raw_agent.auth.private_key == api_secret

    def test_sandbox(self):
        client = create_client(sandbox=True)
        assert client.raw_agent.config.root_url == SANDBOX_ROOT_URL

    def test_config_overrides(self):
        client = create_client(sandbox=True, config={"root_url": "http://localhost:8080", "timeout": 1})
        assert client.raw_agent.config.root_url == "http://localhost:8080"
        assert client.raw_agent.config.timeout == 1

    def test_partial_credentials_rejected(self, api_key):
        with pytest.raises(ValueError, match="together"):
            create_client(api_key, None)


class TestCreateFromSettings:
    """Tests for create_client_from_settings."""

    def test_with_credentials(self):
        settings = Settings.model_validate(
            {
                "sandbox": True,
                "credentials": {"api_key": "k", "api_secret": "s"},
                "request": {"timeout": 3},
            }
        )
        client = create_client_from_settings(settings)
        assert client.is_upgraded() is True
        assert client.raw_agent.auth.private_key == "s"
        assert client.raw_agent.config.root_url == SANDBOX_ROOT_URL
        assert client.raw_agent.config.timeout == 3

    def test_without_credentials(self):
        client = create_client_from_settings(Settings())
        assert client.is_upgraded() is False
