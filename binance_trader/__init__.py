from importlib.metadata import PackageNotFoundError, version

from binance_trader.client import ExchangeClient
from binance_trader.errors import (
    BaseError,
    ConfigurationError,
    InvalidPriceError,
    TransportError,
    UpstreamError,
    ValidationError,
)
from binance_trader.executors import (
    AiohttpHttpExecutor,
    HttpExecutor,
    HttpResponse,
    HttpxHttpExecutor,
)
from binance_trader.helpers import DEFAULT_API_URL, MAINNET_API_URL, print_data
from binance_trader.request_builder import RequestBuilder
from binance_trader.signer import sign
from binance_trader.sizing import compute_full_balance_quantity
from binance_trader.trading import TradingFacade
from binance_trader.types import (
    AccountInfo,
    Asset,
    Credentials,
    OrderRequest,
    OrderStatus,
    OrderType,
    Side,
    SignedRequest,
)


def get_version() -> str:
    try:
        return version("binance-trader")
    except PackageNotFoundError:
        return "0.0.0-unknown"


__version__ = get_version()

__all__ = [
    "AccountInfo",
    "AiohttpHttpExecutor",
    "Asset",
    "BaseError",
    "ConfigurationError",
    "Credentials",
    "DEFAULT_API_URL",
    "ExchangeClient",
    "HttpExecutor",
    "HttpResponse",
    "HttpxHttpExecutor",
    "InvalidPriceError",
    "MAINNET_API_URL",
    "OrderRequest",
    "OrderStatus",
    "OrderType",
    "RequestBuilder",
    "Side",
    "SignedRequest",
    "TradingFacade",
    "TransportError",
    "UpstreamError",
    "ValidationError",
    "compute_full_balance_quantity",
    "get_version",
    "print_data",
    "sign",
]
