"""HTTP executor implementation using aiohttp.

This module provides async HTTP request handling using an aiohttp ClientSession.
"""

import asyncio
from typing import override

import aiohttp

from binance_trader.errors import (
    BaseError,
    HttpConnectionError,
    TransportError,
    TransportTimeoutError,
)
from binance_trader.executors.interface import HttpExecutor, HttpResponse
from binance_trader.helpers import deserialize_response, get_user_agent, redact_url

DEFAULT_TIMEOUT_SECONDS: float = 10.0


class AiohttpHttpExecutor(HttpExecutor):
    """HTTP executor implementation using aiohttp.

    Manages an aiohttp ClientSession, created lazily on the first request.
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT_SECONDS) -> None:
        """Initialize an AiohttpHttpExecutor.

        Args:
            timeout: Total per-request timeout in seconds.

        """
        self.timeout = timeout
        self._session: aiohttp.ClientSession | None = None

    @override
    async def get(self, url: str, headers: dict[str, str]) -> HttpResponse:
        return await self._send("GET", url, headers)

    @override
    async def post(self, url: str, headers: dict[str, str]) -> HttpResponse:
        return await self._send("POST", url, headers)

    async def _send(self, method: str, url: str, headers: dict[str, str]) -> HttpResponse:
        safe_url = redact_url(url)
        try:
            if self._session is None:
                self._session = aiohttp.ClientSession(
                    timeout=aiohttp.ClientTimeout(total=self.timeout)
                )

            async with self._session.request(
                method,
                url,
                headers={**headers, "User-Agent": get_user_agent()},
            ) as response:
                content = await response.read()
                status = response.status
                response_headers = dict(response.headers)
        except BaseError:
            raise
        except asyncio.TimeoutError as e:
            raise TransportTimeoutError(
                f"{method} request to {safe_url} timed out",
                timeout_seconds=self.timeout,
            ) from e
        except aiohttp.ClientConnectionError as e:
            raise HttpConnectionError(
                f"Failed to connect during {method} request", url=safe_url
            ) from e
        except Exception as e:
            raise TransportError(f"{method} request to {safe_url} failed: {e}") from e
        return HttpResponse(
            status=status,
            body=deserialize_response(content, url, status),
            headers=response_headers,
        )

    @override
    async def close(self) -> None:
        """Close the executor and its underlying aiohttp session."""
        if self._session is not None:
            await self._session.close()
            self._session = None
