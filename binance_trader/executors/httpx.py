"""HTTP executor implementation using httpx.

This module provides async HTTP request handling using the httpx library.
"""

from typing import override

import httpx

from binance_trader.errors import (
    BaseError,
    HttpConnectionError,
    TransportError,
    TransportTimeoutError,
)
from binance_trader.executors.interface import HttpExecutor, HttpResponse
from binance_trader.helpers import deserialize_response, get_user_agent, redact_url

DEFAULT_TIMEOUT_SECONDS: float = 10.0


class HttpxHttpExecutor(HttpExecutor):
    """HTTP executor implementation using httpx.

    Provides async HTTP request execution using ``httpx.AsyncClient``.
    """

    @override
    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        client: httpx.AsyncClient | None = None,
    ):
        """Initialize the HTTPX HTTP executor.

        Args:
            timeout: Per-request timeout in seconds. Defaults to DEFAULT_TIMEOUT_SECONDS.
            client: Optional pre-configured AsyncClient. One is created if not provided.

        """
        self.timeout = timeout
        self.client = client if client is not None else httpx.AsyncClient(timeout=timeout)

    @override
    async def get(self, url: str, headers: dict[str, str]) -> HttpResponse:
        return await self._send("GET", url, headers)

    @override
    async def post(self, url: str, headers: dict[str, str]) -> HttpResponse:
        return await self._send("POST", url, headers)

    async def _send(self, method: str, url: str, headers: dict[str, str]) -> HttpResponse:
        """Send a request and wrap the outcome.

        Raises:
            TransportTimeoutError: If the request times out.
            HttpConnectionError: If there is a connection or network error.
            DeserializationError: If the response body is not valid JSON.
            TransportError: If any other transport-level error occurs.

        """
        safe_url = redact_url(url)
        try:
            response = await self.client.request(
                method,
                url,
                headers={**headers, "User-Agent": get_user_agent()},
            )
        except BaseError:
            raise
        except httpx.TimeoutException as e:
            raise TransportTimeoutError(
                f"{method} request to {safe_url} timed out",
                timeout_seconds=self.timeout,
            ) from e
        except httpx.NetworkError as e:
            raise HttpConnectionError(
                f"Network error during {method} request", url=safe_url
            ) from e
        except Exception as e:
            raise TransportError(f"{method} request to {safe_url} failed: {e}") from e
        return HttpResponse(
            status=response.status_code,
            body=deserialize_response(response.content, url, response.status_code),
            headers=dict(response.headers),
        )

    @override
    async def close(self) -> None:
        """Close the underlying httpx client."""
        await self.client.aclose()
