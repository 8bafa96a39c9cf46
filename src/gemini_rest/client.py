"""Gemini REST client: one method per exchange endpoint."""

from __future__ import annotations

from typing import Any, Mapping

from .agent.protocol import ApiAuth, GeminiResponse, RawAgentProtocol
from .agent.raw import RawAgent
from .agent.request_config import RequestConfig
from .params import (
    AuctionHistoryParams,
    CancelOrderParams,
    DepositAddressParams,
    OrderBookParams,
    OrderStatusParams,
    PastTradesParams,
    PlaceOrderParams,
    TradeHistoryParams,
    WithdrawCryptoParams,
    as_body,
)

ParamsArg = Mapping[str, Any]


class GeminiClient:
    """Client facade over the request agent.

    Every method maps to a single endpoint; ``raw_agent`` is exposed for
    direct access (custom endpoints, ``sign_message``).
    """

    def __init__(
        self,
        auth: ApiAuth | None = None,
        config: RequestConfig | dict[str, Any] | None = None,
        *,
        raw_agent: RawAgentProtocol | None = None,
    ):
        self.raw_agent = raw_agent or RawAgent(auth)
        self.config = config

    def is_upgraded(self) -> bool:
        return self.raw_agent.is_upgraded()

    def upgrade(self, new_auth: ApiAuth) -> None:
        self.raw_agent.upgrade(new_auth)

    async def close(self) -> None:
        await self.raw_agent.close()

    async def __aenter__(self) -> "GeminiClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def _get(self, endpoint: str, params: Any = None) -> GeminiResponse:
        return await self.raw_agent.get_public_endpoint(endpoint, as_body(params), self.config)

    async def _post(self, endpoint: str, params: Any = None) -> GeminiResponse:
        return await self.raw_agent.post_to_private_endpoint(endpoint, as_body(params), self.config)

    # Public market data

    async def get_symbols(self) -> GeminiResponse:
        """Retrieve all symbols available for trading."""
        return await self._get("symbols")

    async def get_ticker(self, symbol: str) -> GeminiResponse:
        """Recent trading activity for ``symbol``."""
        return await self._get(f"pubticker/{symbol}")

    async def get_order_book(
        self, symbol: str, params: OrderBookParams | ParamsArg | None = None
    ) -> GeminiResponse:
        """Current order book as two arrays, bids and asks."""
        return await self._get(f"book/{symbol}", params)

    async def get_trade_history(
        self, symbol: str, params: TradeHistoryParams | ParamsArg | None = None
    ) -> GeminiResponse:
        """Trades executed since ``timestamp`` (at most 500 per request).

        Without a timestamp the most recent trades are returned.
        """
        return await self._get(f"trades/{symbol}", params)

    async def get_current_auction(self, symbol: str) -> GeminiResponse:
        return await self._get(f"auction/{symbol}")

    async def get_auction_history(
        self, symbol: str, params: AuctionHistoryParams | ParamsArg | None = None
    ) -> GeminiResponse:
        """Auction events since ``since``, optionally with indicative prices."""
        return await self._get(f"auction/{symbol}/history", params)

    # Orders

    async def place_order(self, params: PlaceOrderParams | ParamsArg) -> GeminiResponse:
        """Place a limit order.

        Orders stay open after the session ends unless the key requires a
        heartbeat or ``cancel_all_session_orders`` is sent.
        """
        return await self._post("order/new", params)

    async def cancel_order(self, params: CancelOrderParams | ParamsArg) -> GeminiResponse:
        """Cancel an order. Cancelling an already cancelled order succeeds with no effect."""
        return await self._post("order/cancel", params)

    async def cancel_all_session_orders(self) -> GeminiResponse:
        """Cancel every order opened by this session."""
        return await self._post("order/cancel/session")

    async def cancel_all_active_orders(self) -> GeminiResponse:
        """Cancel all outstanding orders of the account, including ones placed in the UI."""
        return await self._post("order/cancel/all")

    async def get_order_status(self, params: OrderStatusParams | ParamsArg) -> GeminiResponse:
        return await self._post("order/status", params)

    async def get_active_orders(self) -> GeminiResponse:
        return await self._post("orders")

    async def get_past_trades(self, params: PastTradesParams | ParamsArg) -> GeminiResponse:
        return await self._post("mytrades", params)

    async def get_trade_volume(self) -> GeminiResponse:
        return await self._post("tradevolume")

    # Funds

    async def get_available_balances(self) -> GeminiResponse:
        """Available balances in every supported currency."""
        return await self._post("balances")

    async def generate_deposit_address(
        self, currency: str, params: DepositAddressParams | ParamsArg | None = None
    ) -> GeminiResponse:
        """Create a new deposit address for ``currency``, with an optional label."""
        return await self._post(f"deposit/{currency}/newAddress", params)

    async def withdraw_crypto(
        self, currency: str, params: WithdrawCryptoParams | ParamsArg
    ) -> GeminiResponse:
        """Withdraw to a whitelisted address.

        Requires address whitelisting on the account and a key with the
        Fund Manager role.
        """
        return await self._post(f"withdraw/{currency}", params)

    # Session

    async def ping_heartbeat(self) -> GeminiResponse:
        """Keep a heartbeat-enabled session alive when no other private call is made."""
        return await self._post("heartbeat")
