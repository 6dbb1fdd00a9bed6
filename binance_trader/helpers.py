"""Helper utilities for the Binance trader SDK.

This module contains utility functions for deserialization, object construction,
log redaction, timestamps and display formatting.
"""

import inspect
import logging
import re
from dataclasses import asdict, is_dataclass
from functools import lru_cache
from time import time_ns
from typing import Any, Callable, Dict, TypeVar

import orjson
from prettyprinter import cpprint

from binance_trader.errors import DeserializationError
from binance_trader.types import Json

log = logging.getLogger(__name__)


# ============================================================================
# CONSTANTS
# ============================================================================

DEFAULT_API_URL: str = "https://testnet.binancefuture.com"
MAINNET_API_URL: str = "https://fapi.binance.com"

API_KEY_HEADER: str = "X-MBX-APIKEY"

REDACTED: str = "<redacted>"


# ============================================================================
# CLIENT IDENTIFICATION
# ============================================================================


@lru_cache(maxsize=1)
def get_user_agent() -> str:
    """Get the client identification string sent as User-Agent."""
    import binance_trader

    return f"BinanceTraderPythonSDK/{binance_trader.__version__}"


# ============================================================================
# OBJECT CONSTRUCTION
# ============================================================================

T = TypeVar("T")


def create_with(func: Callable[..., T], data: Dict[str, Any]) -> T:
    """Create an object from a dictionary, filtering to only valid parameters.

    This allows constructing objects from API responses that may contain
    additional fields beyond what the constructor expects, making the SDK
    more resilient to API changes.

    Args:
        func: Constructor or factory function to call
        data: Dictionary of data to pass as kwargs

    Returns:
        Instance created by calling func with filtered data

    """
    valid_keys = inspect.signature(func).parameters.keys()
    filtered_data = {k: v for k, v in data.items() if k in valid_keys}
    return func(**filtered_data)


# ============================================================================
# DESERIALIZATION
# ============================================================================


def deserialize_response(
    response_body: bytes, url: str, status: int = 200
) -> Json | str | None:
    """Deserialize a JSON response body.

    Error pages from proxies and gateways are often HTML. For a non-2xx status an
    undecodable body is kept as text so the status can still be mapped to an error.

    Args:
        response_body: Response bytes to deserialize
        url: URL that was requested (for error messages)
        status: HTTP status code of the response

    Returns:
        Deserialized JSON object or array, the raw text of a non-JSON error body,
        None for an empty body

    Raises:
        DeserializationError: If a 2xx body cannot be deserialized

    """
    if not response_body:
        return None
    try:
        return orjson.loads(response_body)  # type: ignore
    except orjson.JSONDecodeError as e:
        if not 200 <= status < 300:
            return response_body.decode("utf-8", errors="replace")
        raise DeserializationError(
            f"Failed to parse JSON response from {redact_url(url)}: {e}"
        ) from e


# ============================================================================
# LOG REDACTION
# ============================================================================

_SIGNATURE_PARAM = re.compile(r"(signature=)[^&]*")


def redact_url(url: str) -> str:
    """Replace the signature query parameter value with a placeholder."""
    return _SIGNATURE_PARAM.sub(rf"\g<1>{REDACTED}", url)


def redact_headers(headers: dict[str, str] | None) -> dict[str, str]:
    """Return a copy of the headers with the API key hidden."""
    if not headers:
        return {}
    return {
        name: (REDACTED if name.lower() == API_KEY_HEADER.lower() else value)
        for name, value in headers.items()
    }


# ============================================================================
# TIME UTILITIES
# ============================================================================


def current_timestamp_ms() -> int:
    """Milliseconds since epoch, as expected by the ``timestamp`` parameter.

    Note: This is based on wall time. Binance rejects requests whose timestamp
    is outside ``recvWindow`` (5000ms by default) of server time.
    """
    return time_ns() // 1_000_000


# ============================================================================
# DISPLAY UTILITIES
# ============================================================================


def print_data(response: Any) -> None:
    """Pretty-print response data, handling dataclasses specially.

    Dataclass instances are converted to dictionaries before printing
    for better formatting.

    Args:
        response: Data to print

    """
    if is_dataclass(response) and not isinstance(response, type):
        cpprint(asdict(response))
    else:
        cpprint(response)
