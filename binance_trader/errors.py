"""Exception hierarchy for the Binance trader SDK.

This module defines the public exception hierarchy for the entire SDK. All exceptions
raised by this library inherit from BaseError.

Exception Hierarchy
-------------------
BaseError
├── ValidationError - Client-side input validation failures
│   ├── ConfigurationError - Missing or invalid credentials / base URL
│   └── InvalidPriceError - Non-positive price supplied to order sizing
├── TransportError - Network/protocol-level errors during transmission
└── UpstreamError - API server returned a non-success response
"""

from typing import Any


class BaseError(Exception):
    """Base exception for all SDK errors.

    All exceptions raised by this library inherit from this class, allowing users
    to catch all SDK-related errors with a single except clause.

    This exception should not be raised directly. Use one of the specific subclasses
    instead (UpstreamError, TransportError, ValidationError).
    """

    pass


# ============================================================================
# UPSTREAM ERROR
# ============================================================================


class UpstreamError(BaseError):
    """Exception raised when the exchange returns a non-success response.

    UpstreamError indicates that:
    - The network connection succeeded
    - The request was transmitted and processed by the exchange
    - The exchange answered with a non-2XX status or an error payload

    The status code, decoded body and response headers are kept intact so callers
    can tell rate limiting, signature rejections and insufficient margin apart.
    """

    status_code: int
    message: str
    body: Any
    headers: dict[str, str] | None
    error_code: int | None

    def __init__(
        self,
        status_code: int,
        message: str,
        body: Any = None,
        headers: dict[str, str] | None = None,
        error_code: int | None = None,
    ):
        """Initialize an UpstreamError.

        Args:
            status_code: The HTTP status code returned by the exchange.
            message: Description of the error.
            body: The decoded response body, if any.
            headers: The response headers, if any.
            error_code: The exchange error code (the ``code`` field), if present.

        """
        self.status_code = status_code
        self.message = message
        self.body = body
        self.headers = headers
        self.error_code = error_code
        super().__init__(message)


## 5xx status errors - unexpected - should be reported


class InternalServerError(UpstreamError):
    """Raised when the exchange returns a 500 Internal Server Error."""

    pass


class BadGateway(UpstreamError):
    """Raised when the exchange returns a 502 Bad Gateway error."""

    pass


class ServiceUnavailable(UpstreamError):
    """Raised when the exchange returns a 503 Service Unavailable error."""

    pass


class GatewayTimeout(UpstreamError):
    """Raised when the exchange returns a 504 Gateway Timeout error.

    The request may still have been executed by the matching engine.
    """

    pass


## 4xx status errors


class BadRequest(UpstreamError):
    """Raised when the exchange returns a 400 Bad Request error.

    Binance reports most business rejections (insufficient margin, bad precision,
    unknown symbol) with this status and a negative ``error_code``.
    """

    pass


class Unauthorized(UpstreamError):
    """Raised when the exchange returns a 401 Unauthorized error."""

    pass


class Forbidden(UpstreamError):
    """Raised when the exchange returns a 403 Forbidden error."""

    pass


class NotFound(UpstreamError):
    """Raised when the exchange returns a 404 Not Found error."""

    pass


class RateLimited(UpstreamError):
    """Raised when the exchange returns 429 (rate limited) or 418 (IP banned)."""

    retry_after: str | None

    def __init__(
        self,
        status_code: int,
        message: str,
        body: Any = None,
        headers: dict[str, str] | None = None,
        error_code: int | None = None,
    ):
        """Initialize a RateLimited error.

        Args:
            status_code: 429 or 418.
            message: Description of the error.
            body: The decoded response body, if any.
            headers: The response headers, if any.
            error_code: The exchange error code, if present.

        """
        super().__init__(status_code, message, body, headers, error_code)
        self.retry_after = (headers or {}).get("Retry-After")


# ============================================================================
# TRANSPORT ERROR
# ============================================================================


class TransportError(BaseError):
    """Exception raised when a request could not be carried to or from the exchange.

    TransportError indicates that:
    - The error occurred in the process of transporting data
    - Valid application-level data was not successfully exchanged
    - The error could be transient, but the SDK never retries on its own

    Common causes include DNS resolution failures, refused or reset connections,
    TLS failures, timeouts and undecodable response bodies.
    """

    pass


class HttpConnectionError(TransportError):
    """Raised when a connection cannot be established or is lost."""

    def __init__(self, message: str, url: str | None = None):
        """Initialize an HttpConnectionError.

        Args:
            message: Description of the connection error.
            url: The URL that failed to connect, if available.

        """
        self.message = message
        self.url = url
        if url:
            super().__init__(f"{message} (url: {url})")
        else:
            super().__init__(message)


class TransportTimeoutError(TransportError):
    """Raised when a request times out."""

    def __init__(self, message: str, timeout_seconds: float | None = None):
        """Initialize a TransportTimeoutError.

        Args:
            message: Description of the timeout error.
            timeout_seconds: The timeout duration in seconds, if available.

        """
        self.message = message
        self.timeout_seconds = timeout_seconds
        if timeout_seconds:
            super().__init__(f"{message} (timeout: {timeout_seconds}s)")
        else:
            super().__init__(message)


class DeserializationError(TransportError):
    """Raised when response data cannot be deserialized/decoded."""

    def __init__(self, message: str):
        """Initialize a DeserializationError.

        Args:
            message: Description of the deserialization error.

        """
        self.message = message
        super().__init__(message)



# ============================================================================
# VALIDATION ERROR
# ============================================================================


class ValidationError(BaseError):
    """Exception raised for client-side input validation failures.

    ValidationError indicates that:
    - No network request was attempted for the failing operation
    - The error is due to invalid input from the caller
    - The error can be fixed by correcting the input parameters
    """

    pass


class ConfigurationError(ValidationError):
    """Raised when credentials or the base URL are missing or invalid.

    This is fatal for the client instance and is raised before any network call.
    """

    pass


class MissingCredentialsError(ConfigurationError):
    """Raised when required authentication credentials are missing."""

    def __init__(self, credential_type: str = "API key"):
        """Initialize a MissingCredentialsError.

        Args:
            credential_type: The type of credential that is missing (default: "API key").

        """
        self.credential_type = credential_type
        super().__init__(f"{credential_type} is not set")


class InvalidPriceError(ValidationError):
    """Raised when a zero or negative price is supplied for order sizing."""

    def __init__(self, price: object):
        """Initialize an InvalidPriceError.

        Args:
            price: The rejected price.

        """
        self.price = price
        super().__init__(f"Price must be greater than zero, got {price}")
