"""Request parameter models for the Gemini endpoints."""

from __future__ import annotations

from typing import Any, Literal, Mapping

from pydantic import BaseModel, Field


class _Params(BaseModel):
    model_config = {"extra": "allow"}

    def to_body(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


class OrderBookParams(_Params):
    limit_bids: int | None = Field(default=None, ge=0)
    limit_asks: int | None = Field(default=None, ge=0)


class TradeHistoryParams(_Params):
    timestamp: str | None = None
    limit_trades: int | None = Field(default=None, ge=0)
    include_breaks: bool | None = None


class AuctionHistoryParams(_Params):
    since: str | None = None
    limit_auction_results: int | None = Field(default=None, ge=0)
    include_indicative: bool | None = None


class PlaceOrderParams(_Params):
    """New order. Only limit orders are accepted by the API."""

    client_order_id: str | None = None
    symbol: str
    amount: str | float
    price: str | float
    side: Literal["buy", "sell"]
    type: str = "exchange limit"
    options: list[str] | None = None


class CancelOrderParams(_Params):
    order_id: str | int


class OrderStatusParams(_Params):
    order_id: str | int


class PastTradesParams(_Params):
    symbol: str
    limit_trades: int | None = Field(default=None, ge=0)
    timestamp: str | None = None


class DepositAddressParams(_Params):
    label: str | None = None


class WithdrawCryptoParams(_Params):
    address: str
    amount: str | float


def as_body(params: _Params | Mapping[str, Any] | None) -> dict[str, Any] | None:
    """Turn a parameter model or plain mapping into a request body."""
    if params is None:
        return None
    if isinstance(params, _Params):
        return params.to_body()
    return {k: v for k, v in params.items() if v is not None}
