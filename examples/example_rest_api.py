"""
Authenticated REST API Example

This example demonstrates the futures trading client against the Binance testnet.
These endpoints require valid API credentials and allow you to:

Account Information:
- Get the USDT wallet balance
- Get the order history of a symbol

Market Data:
- Get the latest price of a symbol

Trading Operations (disabled unless PLACE_ORDERS is set):
- Place a market order for an explicit quantity
- Place a market order sized to the full balance

Environment Variables Required:
- ENVIRONMENT: "testnet" (default) or "production"
- BINANCE_API_KEY_<ENVIRONMENT>: Your API key
- BINANCE_API_SECRET_<ENVIRONMENT>: Your API secret
- BINANCE_API_URL_<ENVIRONMENT>: Optional base URL override
"""

import asyncio
import logging

from binance_trader import ExchangeClient, Side, TradingFacade, print_data
from binance_trader.env_setup import setup_environment

SYMBOL = "BTCUSDT"
# Flip to True to send real orders to the configured environment
PLACE_ORDERS = False


async def example_auth_rest_api() -> None:
    """Demonstrate the account, market and trading operations."""

    print("=" * 70)
    print("Binance Futures REST API Example")
    print("=" * 70)

    print("\n[Setup] Loading credentials from environment...")
    api_url, api_key, api_secret = setup_environment()
    print(f"[Setup] API Endpoint: {api_url}\n")

    async with TradingFacade(
        ExchangeClient(api_key=api_key, api_secret=api_secret, api_url=api_url)
    ) as trader:
        print("1. BALANCE")
        print_data(await trader.get_balance())

        print("\n2. PRICE")
        print_data(await trader.get_current_price(SYMBOL))

        print("\n3. ORDER HISTORY")
        print_data(await trader.get_order_history(SYMBOL))

        if PLACE_ORDERS:
            print("\n4. MARKET ORDER")
            print_data(await trader.place_market_order(SYMBOL, Side.BUY, 0.01))

            print("\n5. FULL BALANCE ORDER")
            print_data(await trader.place_full_balance_order(SYMBOL, Side.BUY))


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(example_auth_rest_api())
