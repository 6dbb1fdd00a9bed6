"""Abstract interface for HTTP executors.

This module defines the abstract base class that all HTTP executor
implementations must follow, enabling pluggable transport layers.
"""

from abc import ABC, abstractmethod

from binance_trader.types import Json


class HttpResponse:
    """Container for HTTP response data.

    Encapsulates the status code, body, and headers from an HTTP response.
    """

    status: int
    body: Json | str | None
    headers: dict[str, str] | None

    __slots__ = ("status", "body", "headers")

    def __init__(
        self,
        *,
        status: int,
        body: Json | str | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        """Initialize an HTTP response object.

        Args:
            status: The HTTP status code of the response.
            body: The decoded JSON response body, the raw text of a non-JSON error
                body, None for an empty body.
            headers: Optional HTTP response headers as key-value pairs.

        """
        self.status = status
        self.body = body
        self.headers = headers


class HttpExecutor(ABC):
    """Abstract base class for HTTP request executors.

    Executors receive fully assembled URLs (query string and signature included)
    and the headers to attach. They translate library failures into
    TransportError subclasses. The status code is only used to decide whether an
    undecodable body is an error page or a broken success response.
    """

    @abstractmethod
    async def get(self, url: str, headers: dict[str, str]) -> HttpResponse:
        """Send an HTTP GET request.

        Args:
            url: The absolute URL, including the query string.
            headers: Headers to attach to the request.

        Returns:
            An HttpResponse object containing the status, body, and headers.

        """
        ...

    @abstractmethod
    async def post(self, url: str, headers: dict[str, str]) -> HttpResponse:
        """Send an HTTP POST request without a body.

        Args:
            url: The absolute URL, including the query string.
            headers: Headers to attach to the request.

        Returns:
            An HttpResponse object containing the status, body, and headers.

        """
        ...

    async def close(self) -> None:
        """Release any pooled connections held by the executor."""
        return None
