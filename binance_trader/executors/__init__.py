from binance_trader.executors.aiohttp import AiohttpHttpExecutor
from binance_trader.executors.defaults import DEFAULT_HTTP_EXECUTOR
from binance_trader.executors.httpx import HttpxHttpExecutor
from binance_trader.executors.interface import HttpExecutor, HttpResponse

__all__ = [
    "HttpExecutor",
    "HttpResponse",
    "HttpxHttpExecutor",
    "AiohttpHttpExecutor",
    "DEFAULT_HTTP_EXECUTOR",
]
