"""Tests for logging configuration and redaction."""

import logging
import logging.handlers

import pytest

from gemini_rest import logging as gemini_logging
from gemini_rest.factory import create_client_from_settings
from gemini_rest.logging import RedactingFilter, configure_logging, redact, redact_secrets
from gemini_rest.settings import Settings


@pytest.fixture(autouse=True)
def clear_secrets():
    gemini_logging._secrets.clear()
    yield
    gemini_logging._secrets.clear()


def test_auth_headers_masked():
    message = "headers={'X-GEMINI-APIKEY': 'account-abc', 'X-GEMINI-SIGNATURE': 'deadbeef'}"
    masked = redact(message)
    assert "account-abc" not in masked
    assert "deadbeef" not in masked
    assert "X-GEMINI-APIKEY': '***'" in masked


def test_registered_secrets_masked():
    redact_secrets("my-secret", None)
    assert redact("secret is my-secret") == "secret is ***"


def test_filter_formats_args():
    redact_secrets("key-123")
    record = logging.LogRecord("gemini_rest", logging.INFO, __file__, 1, "using %s on %s", ("key-123", "v1"), None)
    assert RedactingFilter().filter(record) is True
    assert record.getMessage() == "using *** on v1"


def test_settings_credentials_registered():
    settings = Settings.model_validate({"credentials": {"api_key": "account-k1", "api_secret": "s3cr3t-value"}})
    create_client_from_settings(settings)
    assert redact("account-k1 / s3cr3t-value") == "*** / ***"


def test_configure_logging_file(tmp_path, monkeypatch):
    monkeypatch.setenv("GEMINI_LOG_LEVEL", "DEBUG")
    root = logging.getLogger()
    saved = root.handlers[:]
    saved_level = root.level
    try:
        configure_logging(tmp_path / "logs")
        assert (tmp_path / "logs").is_dir()
        assert root.level == logging.DEBUG
        assert all(any(isinstance(f, RedactingFilter) for f in h.filters) for h in root.handlers)
        assert any(isinstance(h, logging.handlers.RotatingFileHandler) for h in root.handlers)
    finally:
        for handler in root.handlers[:]:
            root.removeHandler(handler)
            handler.close()
        root.setLevel(saved_level)
        for handler in saved:
            root.addHandler(handler)
