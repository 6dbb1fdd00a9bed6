"""Order placement use cases built on top of the ExchangeClient.

This module provides the TradingFacade, which places explicit-quantity MARKET
orders and full-balance MARKET orders sized from the live balance and price.
"""

import logging
from decimal import Decimal
from typing import Self

from binance_trader.client import ExchangeClient
from binance_trader.errors import ValidationError
from binance_trader.sizing import FULL_BALANCE_PRECISION, compute_full_balance_quantity
from binance_trader.types import (
    EXPLICIT_QUANTITY_PRECISION,
    JsonArray,
    JsonObject,
    NumericInput,
    OrderRequest,
    Side,
    numeric_to_decimal,
)

log = logging.getLogger(__name__)


def parse_side(side: Side | str) -> Side:
    """Normalize an order side given as enum or case-insensitive string.

    Raises:
        ValidationError: If the side is neither BUY nor SELL

    """
    if isinstance(side, Side):
        return side
    if isinstance(side, str):
        try:
            return Side(side.upper())
        except ValueError:
            pass
    raise ValidationError(f"Invalid order side {side!r}, expected BUY or SELL")


class TradingFacade:
    """Market order placement for one futures account.

    Examples:
        .. code-block:: python

            async with TradingFacade(ExchangeClient(api_key, api_secret)) as trader:
                await trader.place_market_order("BTCUSDT", Side.BUY, 0.01)
                await trader.place_full_balance_order("BTCUSDT", Side.BUY)
    """

    def __init__(
        self,
        client: ExchangeClient,
        full_balance_precision: int = FULL_BALANCE_PRECISION,
    ):
        """Initialize the facade.

        Args:
            client: The exchange client used for every call
            full_balance_precision: Decimals kept when sizing full-balance orders

        """
        self._client = client
        self._full_balance_precision = full_balance_precision
        self._last_known_balance: str | None = None

    @property
    def last_known_balance(self) -> str | None:
        """The last balance fetched through this facade.

        Informational only. Order sizing always fetches a fresh balance.
        """
        return self._last_known_balance

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self._client.close()

    async def place_market_order(
        self, symbol: str, side: Side | str, quantity: NumericInput
    ) -> JsonObject:
        """Place a MARKET order for an explicit quantity.

        The quantity is sent with exactly 3 decimals.

        Args:
            symbol: The trading pair (e.g. "BTCUSDT")
            side: BUY or SELL
            quantity: The order quantity, greater than zero

        Returns:
            JsonObject: The exchange's order response

        Raises:
            ValidationError: If the side or quantity is invalid

        """
        order_side = parse_side(side)
        order_quantity = numeric_to_decimal(quantity)
        if order_quantity is None or order_quantity <= 0:
            raise ValidationError(f"Quantity must be greater than zero, got {quantity}")

        return await self._submit(
            OrderRequest(
                symbol=symbol,
                side=order_side,
                quantity=order_quantity,
                precision=EXPLICIT_QUANTITY_PRECISION,
            )
        )

    async def place_full_balance_order(
        self, symbol: str, side: Side | str, asset: str = "USDT"
    ) -> JsonObject:
        """Place a MARKET order sized to the whole wallet balance.

        Fetches the balance, then the price, then places the order. Each step waits
        for the previous one and any failure stops the chain before an order is sent.

        Args:
            symbol: The trading pair (e.g. "BTCUSDT")
            side: BUY or SELL
            asset: The quote asset whose balance funds the order (default: "USDT")

        Returns:
            JsonObject: The exchange's order response

        Raises:
            InvalidPriceError: If the exchange reports a non-positive price
            UpstreamError: If any exchange call is rejected
            TransportError: If any exchange call cannot complete

        """
        order_side = parse_side(side)

        balance = await self._client.get_balance(asset)
        self._last_known_balance = balance
        price = await self._client.get_current_price(symbol)

        quantity = compute_full_balance_quantity(
            balance, price, self._full_balance_precision
        )
        log.info(
            "Full balance %s order on %s: balance=%s price=%s quantity=%s",
            order_side.value,
            symbol,
            balance,
            price,
            quantity,
        )

        return await self._submit(
            OrderRequest(symbol=symbol, side=order_side, quantity=quantity, precision=None)
        )

    async def get_balance(self, asset: str = "USDT") -> str:
        """Get the wallet balance of ``asset`` ("0" when the account has none)."""
        balance = await self._client.get_balance(asset)
        self._last_known_balance = balance
        log.info("%s balance: %s", asset, balance)
        return balance

    async def refresh_balance(self) -> None:
        """Fetch the balance and record it as the last known balance."""
        await self.get_balance()

    async def get_order_history(self, symbol: str) -> JsonArray:
        """Get all orders placed on ``symbol``."""
        orders = await self._client.get_order_history(symbol)
        log.info("Order history for %s: %s", symbol, orders)
        return orders

    async def get_current_price(self, symbol: str) -> Decimal:
        """Get the latest price of ``symbol``."""
        return await self._client.get_current_price(symbol)

    async def _submit(self, order: OrderRequest) -> JsonObject:
        response = await self._client.place_order(order)
        log.info(
            "Placed %s %s order on %s for %s: status=%s",
            order.side.value,
            order.order_type.value,
            order.symbol,
            order.quantity_string(),
            response.get("status") if isinstance(response, dict) else None,
        )
        return response
