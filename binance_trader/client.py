"""HTTP API client for the Binance USDⓈ-M futures exchange.

This module provides the ExchangeClient class, which sends signed requests through
an injected HTTP executor and maps every outcome onto the SDK error hierarchy.
"""

import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Self

from binance_trader.errors import (
    BadGateway,
    BadRequest,
    DeserializationError,
    Forbidden,
    GatewayTimeout,
    InternalServerError,
    NotFound,
    RateLimited,
    ServiceUnavailable,
    TransportError,
    Unauthorized,
    UpstreamError,
)
from binance_trader.executors import DEFAULT_HTTP_EXECUTOR, HttpExecutor
from binance_trader.executors.interface import HttpResponse
from binance_trader.helpers import (
    DEFAULT_API_URL,
    create_with,
    current_timestamp_ms,
    redact_headers,
    redact_url,
)
from binance_trader.request_builder import RequestBuilder
from binance_trader.types import (
    AccountInfo,
    Asset,
    Credentials,
    Json,
    JsonArray,
    JsonObject,
    OrderRequest,
    OrderStatus,
    PriceTicker,
    SignedRequest,
)

log = logging.getLogger(__name__)

DEFAULT_BALANCE_ASSET = "USDT"


def raise_response_errors(response: HttpResponse) -> None:
    """Check HTTP response status and raise appropriate errors.

    Validates the response status code and raises pre-defined exceptions for non-2XX
    status codes. The Binance error payload ``{"code": -1022, "msg": "..."}`` is
    folded into the message and kept on the exception. A 2XX response whose body
    is such a payload with a negative code is an error too.

    Args:
        response: The HTTP response to validate

    Raises:
        BadRequest: For 400 status codes
        Unauthorized: For 401 status codes
        Forbidden: For 403 status codes
        NotFound: For 404 status codes
        RateLimited: For 429 (rate limited) and 418 (IP banned) status codes
        UpstreamError: For other 4XX and unexpected status codes, and for error payloads
        InternalServerError: For 500 and other 5XX status codes
        BadGateway: For 502 status codes
        ServiceUnavailable: For 503 status codes
        GatewayTimeout: For 504 status codes

    """
    status = response.status

    body = response.body if isinstance(response.body, dict) else {}

    code = body.get("code")
    msg = body.get("msg")

    succeeded = 200 <= status < 300
    # Binance may report a rejection in the body of a 2xx response
    if succeeded and not (isinstance(code, int) and code < 0 and msg is not None):
        return

    if code is not None and msg is not None:
        error_message = f"[{code}] {msg}"
    elif response.body:
        error_message = str(response.body)
    else:
        error_message = "<no error message>"

    error_code = code if isinstance(code, int) else None
    extra: dict[str, Any] = {
        "body": response.body,
        "headers": response.headers,
        "error_code": error_code,
    }

    if succeeded:
        raise UpstreamError(status, f"Error payload: {error_message}", **extra)

    # 4xx Client Errors
    if status == 400:
        raise BadRequest(status, f"Bad request: {error_message}", **extra)

    if status == 401:
        raise Unauthorized(status, f"Unauthorized: {error_message}", **extra)

    if status == 403:
        raise Forbidden(status, f"Forbidden: {error_message}", **extra)

    if status == 404:
        raise NotFound(status, f"Not found: {error_message}", **extra)

    if status == 418:
        raise RateLimited(status, f"IP banned: {error_message}", **extra)

    if status == 429:
        raise RateLimited(status, f"Rate limit exceeded: {error_message}", **extra)

    if 400 <= status < 500:
        raise UpstreamError(status, f"Client error ({status}): {error_message}", **extra)

    # 5xx Server Errors
    if status == 500:
        raise InternalServerError(
            status, f"Internal server error: {error_message}", **extra
        )

    if status == 502:
        raise BadGateway(status, f"Bad gateway: {error_message}", **extra)

    if status == 503:
        raise ServiceUnavailable(status, f"Service unavailable: {error_message}", **extra)

    if status == 504:
        raise GatewayTimeout(status, f"Gateway timeout: {error_message}", **extra)

    if 500 <= status < 600:
        raise InternalServerError(
            status, f"Server error ({status}): {error_message}", **extra
        )

    # 3xx Redirects or other unexpected status codes
    raise UpstreamError(
        status, f"Unexpected status code ({status}): {error_message}", **extra
    )


class ExchangeClient:
    """Binance USDⓈ-M futures client for account, price and order operations.

    Examples:
        .. code-block:: python

            import asyncio
            import os

            from binance_trader import ExchangeClient, OrderRequest, Side

            async def main():
                async with ExchangeClient(
                    api_key=os.environ["BINANCE_API_KEY_TESTNET"],
                    api_secret=os.environ["BINANCE_API_SECRET_TESTNET"],
                ) as client:
                    print(await client.get_balance())
                    print(await client.get_current_price("BTCUSDT"))

            asyncio.run(main())
    """

    _http_executor: HttpExecutor

    def __init__(
        self,
        api_key: str,
        api_secret: str,
        api_url: str = DEFAULT_API_URL,
        executor: HttpExecutor | None = None,
        clock: Callable[[], int] | None = None,
    ):
        """Initialize the exchange client.

        Args:
            api_key: Your API key, sent as the X-MBX-APIKEY header
            api_secret: Your API secret, used to sign requests
            api_url: Base URL of the futures API (default: testnet)
            executor: Custom HTTP executor (optional, uses default if not provided)
            clock: Millisecond timestamp source (optional, uses the wall clock)

        Raises:
            ConfigurationError: If the key, secret or URL is missing or invalid

        """
        self._request_builder = RequestBuilder(
            Credentials(api_key=api_key, api_secret=api_secret),
            api_url,
            clock=clock if clock is not None else current_timestamp_ms,
        )
        self._http_executor = (
            executor if executor is not None else DEFAULT_HTTP_EXECUTOR()
        )

    @property
    def api_url(self) -> str:
        return self._request_builder.api_url

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP executor."""
        await self._http_executor.close()

    ### ===================================================== Account API =====================================================

    async def get_account_info(self) -> AccountInfo:
        """Get the futures account snapshot.

        Returns:
            AccountInfo: The account's asset balances

        Raises:
            UpstreamError: If the exchange rejects the request
            TransportError: If the request cannot complete

        Endpoint:
            GET /fapi/v2/account

        """
        response = await self.__send("GET", self._request_builder.account_info())

        try:
            assets = [create_with(Asset, asset) for asset in response["assets"]]  # type: ignore
        except (AttributeError, TypeError, KeyError, IndexError, ValueError) as e:
            raise self.__log_failure(
                "Error fetching account info",
                DeserializationError(f"Received invalid account info {response=}"),
            ) from e

        return AccountInfo(assets=assets)

    async def get_balance(self, asset: str = DEFAULT_BALANCE_ASSET) -> str:
        """Get the wallet balance of one asset.

        An asset missing from the account is reported as ``"0"``, not as an error.

        Args:
            asset: The asset symbol (default: "USDT")

        Returns:
            str: The ``walletBalance`` decimal string

        """
        account_info = await self.get_account_info()
        entry = account_info.find_asset(asset)
        return entry.walletBalance if entry is not None else "0"

    ### ===================================================== Market API =====================================================

    async def get_current_price(self, symbol: str) -> Decimal:
        """Get the latest price of a trading pair.

        Args:
            symbol: The trading pair (e.g. "BTCUSDT")

        Returns:
            Decimal: The last traded price, as reported (sign is not checked here)

        Raises:
            DeserializationError: If the response carries no valid price
            UpstreamError: If the exchange rejects the request
            TransportError: If the request cannot complete

        Endpoint:
            GET /fapi/v1/ticker/price

        """
        response = await self.__send("GET", self._request_builder.price_ticker(symbol))

        try:
            ticker = create_with(PriceTicker, response)  # type: ignore
            price = Decimal(ticker.price)
        except (AttributeError, TypeError, ValueError, InvalidOperation) as e:
            raise self.__log_failure(
                f"Error fetching {symbol} price",
                DeserializationError(f"Received invalid price ticker {response=}"),
            ) from e

        if not price.is_finite():
            raise self.__log_failure(
                f"Error fetching {symbol} price",
                DeserializationError(f"Received invalid price ticker {response=}"),
            )

        return price

    ### ===================================================== Trade API =====================================================

    async def place_order(self, order: OrderRequest) -> JsonObject:
        """Submit an order.

        The response is returned as sent by the exchange whatever its status. Only a
        ``FILLED`` order is reported in the debug log.

        Args:
            order: The order to place

        Returns:
            JsonObject: The exchange's order response

        Endpoint:
            POST /fapi/v1/order

        """
        response = await self.__send("POST", self._request_builder.place_order(order))

        if isinstance(response, dict) and response.get("status") == OrderStatus.FILLED.value:
            log.debug("Order filled successfully: %s", response)
        return response  # type: ignore

    async def get_order_history(self, symbol: str) -> JsonArray:
        """Get all orders of one symbol, oldest first.

        Args:
            symbol: The trading pair (e.g. "BTCUSDT")

        Returns:
            JsonArray: The order entries as sent by the exchange

        Endpoint:
            GET /fapi/v1/allOrders

        """
        response = await self.__send("GET", self._request_builder.order_history(symbol))

        if not isinstance(response, list):
            raise self.__log_failure(
                "Error fetching order history",
                DeserializationError(f"Received invalid order history {response=}"),
            )
        return response

    """ Private helpers """

    async def __send(self, method: str, request: SignedRequest) -> Json | None:
        """Send a request and return the decoded body of a successful response.

        Failures are logged here, once, and re-raised.

        Args:
            method: "GET" or "POST"
            request: The assembled URL and headers

        Returns:
            Json: The parsed JSON response body

        """
        log.debug("Request: %s %s", method, redact_url(request.url))
        log.debug("Headers: %s", redact_headers(request.headers))

        try:
            if method == "POST":
                response = await self._http_executor.post(request.url, request.headers)
            else:
                response = await self._http_executor.get(request.url, request.headers)
        except TransportError as e:
            log.error("%s %s failed: %s", method, redact_url(request.url), e)
            raise

        try:
            raise_response_errors(response)
        except UpstreamError as e:
            log.error("%s %s failed: %s", method, redact_url(request.url), e.message)
            log.error("Response data: %s", e.body)
            log.error("Response status: %s", e.status_code)
            log.error("Response headers: %s", e.headers)
            raise

        return response.body  # type: ignore

    def __log_failure(self, context: str, error: DeserializationError) -> DeserializationError:
        log.error("%s: %s", context, error.message)
        return error
