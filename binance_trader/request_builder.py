"""Assembly of authenticated URLs and headers for each futures endpoint.

Binance verifies the signature against the query string byte for byte, so
parameters are joined in a fixed order, with ``timestamp`` last before
``signature`` and ``signature`` last overall. Values are inserted verbatim.
"""

from typing import Callable

from binance_trader.errors import ConfigurationError, MissingCredentialsError
from binance_trader.helpers import API_KEY_HEADER, current_timestamp_ms
from binance_trader.signer import sign
from binance_trader.types import Credentials, OrderRequest, SignedRequest


ACCOUNT_PATH = "/fapi/v2/account"
PRICE_TICKER_PATH = "/fapi/v1/ticker/price"
ORDER_PATH = "/fapi/v1/order"
ALL_ORDERS_PATH = "/fapi/v1/allOrders"


def build_query_string(params: list[tuple[str, object]]) -> str:
    """Join ordered parameters as ``key=value&key=value``."""
    return "&".join(f"{key}={value}" for key, value in params)


class RequestBuilder:
    """Builds one SignedRequest per call, never reused.

    Args:
        credentials: The API key and secret
        api_url: Base URL of the futures API, without a trailing path
        clock: Source of millisecond timestamps (default: wall clock)

    Raises:
        ConfigurationError: If the key, secret or base URL is empty

    """

    def __init__(
        self,
        credentials: Credentials,
        api_url: str,
        clock: Callable[[], int] = current_timestamp_ms,
    ):
        if not credentials.api_key:
            raise MissingCredentialsError("API key")
        if not credentials.api_secret:
            raise MissingCredentialsError("API secret")
        if not api_url or not api_url.startswith(("http://", "https://")):
            raise ConfigurationError(f"Invalid api_url {api_url!r}")

        self._credentials = credentials
        self._api_url = api_url.rstrip("/")
        self._clock = clock

    @property
    def api_url(self) -> str:
        return self._api_url

    def account_info(self) -> SignedRequest:
        """GET /fapi/v2/account, signed with ``timestamp`` only."""
        return self._signed(ACCOUNT_PATH, [])

    def price_ticker(self, symbol: str) -> SignedRequest:
        """GET /fapi/v1/ticker/price, a public endpoint that needs no signature."""
        query_string = build_query_string([("symbol", symbol)])
        return SignedRequest(
            url=f"{self._api_url}{PRICE_TICKER_PATH}?{query_string}", headers={}
        )

    def place_order(self, order: OrderRequest) -> SignedRequest:
        """POST /fapi/v1/order with symbol, side, type and quantity."""
        return self._signed(
            ORDER_PATH,
            [
                ("symbol", order.symbol),
                ("side", order.side.value),
                ("type", order.order_type.value),
                ("quantity", order.quantity_string()),
            ],
        )

    def order_history(self, symbol: str) -> SignedRequest:
        """GET /fapi/v1/allOrders for one symbol."""
        return self._signed(ALL_ORDERS_PATH, [("symbol", symbol)])

    def _signed(self, path: str, params: list[tuple[str, object]]) -> SignedRequest:
        query_string = build_query_string([*params, ("timestamp", self._clock())])
        signature = sign(self._credentials.api_secret, query_string)
        return SignedRequest(
            url=f"{self._api_url}{path}?{query_string}&signature={signature}",
            headers={API_KEY_HEADER: self._credentials.api_key},
        )
