"""Symbol normalization for Gemini trading pairs."""

from __future__ import annotations


def normalize_symbol(symbol: str) -> str:
    """Normalize a symbol to Gemini's format.

    Gemini symbols are lowercase with no separator:
    - BTCUSD -> btcusd
    - BTC-USD -> btcusd
    - btc/usd -> btcusd
    """
    if not symbol:
        return symbol
    return symbol.strip().replace("-", "").replace("/", "").replace(" ", "").lower()


def normalize_currency(currency: str) -> str:
    """Normalize a currency code (``BTC`` -> ``btc``)."""
    return currency.strip().lower() if currency else currency
