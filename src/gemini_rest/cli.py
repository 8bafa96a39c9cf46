"""Typer-based CLI for querying the Gemini REST API."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, Awaitable, Callable, List, Optional

import aiohttp
import typer
from rich.console import Console
from rich.table import Table

from .agent.errors import GeminiError
from .agent.normalization import normalize_currency, normalize_symbol
from .agent.signing import PAYLOAD_HEADER, SIGNATURE_HEADER, sign_message

if TYPE_CHECKING:
    from .client import GeminiClient
    from .agent.protocol import GeminiResponse


# Import with local function to avoid circular imports
def _load_settings(config_path: Optional[Path] = None):
    from .config import load_settings
    return load_settings(config_path)

def _create_client_from_settings(settings):
    from .factory import create_client_from_settings
    return create_client_from_settings(settings)

app = typer.Typer(help="Gemini exchange REST API CLI")
console = Console()
logger = logging.getLogger(__name__)

ConfigOption = typer.Option(None, help="Path to config file")


def run_cli(argv: list[str] | None = None) -> None:
    """Run CLI with optional argv parameter."""
    app(argv)


async def _with_client(
    config: Optional[Path],
    call: Callable[["GeminiClient"], Awaitable["GeminiResponse"]],
) -> "GeminiResponse":
    settings = _load_settings(config)
    client = _create_client_from_settings(settings)
    try:
        return await call(client)
    finally:
        await client.close()


def _run(config: Optional[Path], call: Callable[["GeminiClient"], Awaitable["GeminiResponse"]]) -> Any:
    """Run one request and return the decoded body, exiting 1 on failure."""
    try:
        response = asyncio.run(_with_client(config, call))
    except (GeminiError, ValueError, aiohttp.ClientError, asyncio.TimeoutError) as e:
        logger.error("Request failed: %s", e)
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    return response.data


def _print_json(data: Any) -> None:
    console.print_json(json.dumps(data))


def _print_rows(title: str, rows: list[dict[str, Any]], columns: list[str]) -> None:
    table = Table(title=title)
    for column in columns:
        table.add_column(column)
    for row in rows:
        table.add_row(*(str(row.get(column, "")) for column in columns))
    console.print(table)


@app.command()
def symbols(config: Optional[Path] = ConfigOption) -> None:
    """List all tradable symbols."""
    data = _run(config, lambda c: c.get_symbols())
    console.print(", ".join(data or []))


@app.command()
def ticker(
    symbol: str = typer.Argument(..., help="Trading symbol, e.g. btcusd"),
    config: Optional[Path] = ConfigOption,
) -> None:
    """Show the ticker for a symbol."""
    symbol = normalize_symbol(symbol)
    data = _run(config, lambda c: c.get_ticker(symbol))
    _print_json(data)


@app.command()
def book(
    symbol: str = typer.Argument(..., help="Trading symbol"),
    limit_bids: Optional[int] = typer.Option(None, help="Maximum number of bids"),
    limit_asks: Optional[int] = typer.Option(None, help="Maximum number of asks"),
    config: Optional[Path] = ConfigOption,
) -> None:
    """Show the order book for a symbol."""
    symbol = normalize_symbol(symbol)
    params = {"limit_bids": limit_bids, "limit_asks": limit_asks}
    data = _run(config, lambda c: c.get_order_book(symbol, params))

    table = Table(title=f"Order book {symbol}")
    table.add_column("Bid size", justify="right")
    table.add_column("Bid", justify="right", style="green")
    table.add_column("Ask", justify="right", style="red")
    table.add_column("Ask size", justify="right")
    bids = data.get("bids", [])
    asks = data.get("asks", [])
    for i in range(max(len(bids), len(asks))):
        bid = bids[i] if i < len(bids) else {}
        ask = asks[i] if i < len(asks) else {}
        table.add_row(
            str(bid.get("amount", "")),
            str(bid.get("price", "")),
            str(ask.get("price", "")),
            str(ask.get("amount", "")),
        )
    console.print(table)


@app.command()
def trades(
    symbol: str = typer.Argument(..., help="Trading symbol"),
    limit: Optional[int] = typer.Option(None, help="Maximum number of trades"),
    config: Optional[Path] = ConfigOption,
) -> None:
    """Show recent public trades for a symbol."""
    symbol = normalize_symbol(symbol)
    data = _run(config, lambda c: c.get_trade_history(symbol, {"limit_trades": limit}))
    _print_rows(f"Trades {symbol}", data or [], ["tid", "timestamp", "type", "price", "amount"])


@app.command()
def auction(
    symbol: str = typer.Argument(..., help="Trading symbol"),
    config: Optional[Path] = ConfigOption,
) -> None:
    """Show the current auction for a symbol."""
    symbol = normalize_symbol(symbol)
    data = _run(config, lambda c: c.get_current_auction(symbol))
    _print_json(data)


@app.command()
def balances(config: Optional[Path] = ConfigOption) -> None:
    """Show available balances (requires credentials)."""
    data = _run(config, lambda c: c.get_available_balances())
    _print_rows("Balances", data or [], ["currency", "amount", "available"])


@app.command()
def orders(config: Optional[Path] = ConfigOption) -> None:
    """List active orders (requires credentials)."""
    data = _run(config, lambda c: c.get_active_orders())
    _print_rows(
        "Active orders",
        data or [],
        ["order_id", "symbol", "side", "price", "original_amount", "remaining_amount"],
    )


@app.command()
def deposit_address(
    currency: str = typer.Argument(..., help="Currency, e.g. btc"),
    label: Optional[str] = typer.Option(None, help="Address label"),
    config: Optional[Path] = ConfigOption,
) -> None:
    """Generate a new deposit address (requires credentials)."""
    currency = normalize_currency(currency)
    data = _run(config, lambda c: c.generate_deposit_address(currency, {"label": label}))
    _print_json(data)


@app.command()
def heartbeat(config: Optional[Path] = ConfigOption) -> None:
    """Send a session heartbeat (requires credentials)."""
    data = _run(config, lambda c: c.ping_heartbeat())
    _print_json(data)


@app.command()
def sign(
    path: str = typer.Argument(..., help="Absolute request path, e.g. /v1/order/new"),
    secret: str = typer.Option(..., help="API secret used for signing"),
    field: List[str] = typer.Option([], help="Body field as key=value (repeatable)"),
    nonce: Optional[str] = typer.Option(None, help="Fixed nonce (default: now in ms)"),
) -> None:
    """Print the payload and signature for a private request."""
    body: dict[str, str] = {}
    for item in field:
        key, sep, value = item.partition("=")
        if not sep or not key:
            console.print(f"[red]Error:[/red] Invalid field '{item}', expected key=value")
            raise typer.Exit(1)
        body[key] = value

    signature = sign_message(path, body, secret, nonce=nonce)
    table = Table(title="Signature", show_header=False)
    table.add_column("Header")
    table.add_column("Value", overflow="fold")
    table.add_row(PAYLOAD_HEADER, signature.payload)
    table.add_row(SIGNATURE_HEADER, signature.digest)
    console.print(table)
