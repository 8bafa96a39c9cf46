"""Pytest configuration and fixtures."""

import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from gemini_rest.agent.protocol import ApiAuth
from gemini_rest.agent.raw import RawAgent


def create_async_response(status=200, json_data=None, text=None, url="https://api.gemini.com"):
    """Create a mock aiohttp response usable as an async context manager."""
    resp = AsyncMock()
    resp.status = status
    resp.headers = {"Content-Type": "application/json"}
    resp.url = url
    if text is None:
        text = json.dumps(json_data) if json_data is not None else ""
    resp.text = AsyncMock(return_value=text)
    resp.__aenter__ = AsyncMock(return_value=resp)
    resp.__aexit__ = AsyncMock(return_value=None)
    return resp


def attach_session(agent, method="get", resp=None, side_effect=None):
    """Replace the agent's session with a mock whose ``method`` returns ``resp``."""
    mock_session = MagicMock()
    if side_effect is not None:
        setattr(mock_session, method, MagicMock(side_effect=side_effect))
    else:
        setattr(mock_session, method, MagicMock(return_value=resp))
    agent._ensure_session = AsyncMock(return_value=mock_session)
    return mock_session


@pytest.fixture
def api_key():
    """Test API key."""
    return "account-test_api_key_123456"


@pytest.fixture
def api_secret():
    """Test API secret."""
    return "test_api_secret_789012"


@pytest.fixture
def auth(api_key, api_secret):
    return ApiAuth(api_key, api_secret)


@pytest.fixture
def agent(auth):
    return RawAgent(auth)


@pytest.fixture
def public_agent():
    return RawAgent()


@pytest.fixture
def sample_ticker_response():
    """Sample pubticker response."""
    return {
        "bid": "44999.50",
        "ask": "45000.50",
        "last": "45000.00",
        "volume": {"BTC": "1234.5", "USD": "55552500.0", "timestamp": 1700000000000},
    }


@pytest.fixture
def sample_order_response():
    """Sample order/new response."""
    return {
        "order_id": "106817811",
        "id": "106817811",
        "symbol": "btcusd",
        "exchange": "gemini",
        "avg_execution_price": "0.00",
        "side": "buy",
        "type": "exchange limit",
        "timestamp": "1547220404",
        "timestampms": 1547220404836,
        "is_live": True,
        "is_cancelled": False,
        "is_hidden": False,
        "was_forced": False,
        "executed_amount": "0",
        "options": [],
        "price": "1000.00",
        "original_amount": "1",
        "remaining_amount": "1",
    }


@pytest.fixture
def sample_balances_response():
    """Sample balances response."""
    return [
        {"type": "exchange", "currency": "BTC", "amount": "1154.62034001", "available": "1129.10517279"},
        {"type": "exchange", "currency": "USD", "amount": "18722.79", "available": "14481.62"},
    ]


@pytest.fixture
def make_response():
    """Factory for mock aiohttp responses."""
    return create_async_response


@pytest.fixture
def mock_session():
    """Factory that patches a mock session onto an agent."""
    return attach_session
