"""Type definitions for the Binance trader SDK.

This module contains type definitions, enums, and dataclasses used throughout
the SDK, organized into logical sections for clarity.
"""

import re
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from enum import Enum
from typing import TypeAlias, overload

from binance_trader.errors import ValidationError

# ============================================================================
# TYPE ALIASES
# ============================================================================

# JSON type hierarchy
JsonObject: TypeAlias = dict[str, "JsonValue"]
JsonArray: TypeAlias = list["JsonValue"]
JsonValue: TypeAlias = None | bool | int | float | str | JsonObject | JsonArray
# Binance answers with either an object or an array at the root
Json: TypeAlias = JsonObject | JsonArray

NumericInput: TypeAlias = Decimal | str | float | int

Timestamp: TypeAlias = int  # milliseconds since epoch


# ============================================================================
# NUMERIC CONVERSION UTILITIES
# ============================================================================

DECIMAL_PATTERN = re.compile(r"^\d+(\.\d+)?$")

# Decimal places Binance accepts for explicit BTCUSDT quantities
EXPLICIT_QUANTITY_PRECISION = 3


@overload
def numeric_to_decimal(n: NumericInput) -> Decimal: ...


@overload
def numeric_to_decimal(n: None) -> None: ...


def numeric_to_decimal(n: NumericInput | None) -> Decimal | None:
    """Convert various numeric input types to Decimal, or None if input is None.

    Strings must be plain non-negative decimals ("12", "0.5"). Floats and ints go
    through ``str`` first so that ``0.1`` becomes ``Decimal("0.1")``.
    """
    if n is None:
        return n
    if isinstance(n, bool):
        raise ValidationError(f"Invalid numeric input type {n} - {type(n)}")
    if isinstance(n, str):
        if not DECIMAL_PATTERN.match(n):
            raise ValidationError(f"Invalid numeric input {n}")
        return Decimal(n)
    if isinstance(n, (int, float)):
        try:
            n = Decimal(str(n))
        except InvalidOperation as e:
            raise ValidationError(f"Invalid numeric input {n}") from e
    if not isinstance(n, Decimal):
        raise ValidationError(f"Invalid numeric input type {n} - {type(n)}")
    if not n.is_finite():
        raise ValidationError(f"Invalid numeric input {n}")
    return n


def full_precision_string(n: Decimal) -> str:
    """Render a decimal without exponent and without trailing zeros."""
    if n == 0:
        return "0"
    return format(n.normalize(), "f")


# ============================================================================
# CORE ENUMS
# ============================================================================


class Side(Enum):
    """Order side (buy/sell)."""

    BUY = "BUY"
    SELL = "SELL"


class OrderType(Enum):
    """Order type."""

    MARKET = "MARKET"


class OrderStatus(Enum):
    """Order status as reported by the futures matching engine."""

    NEW = "NEW"
    PARTIALLY_FILLED = "PARTIALLY_FILLED"
    FILLED = "FILLED"
    CANCELED = "CANCELED"
    REJECTED = "REJECTED"
    EXPIRED = "EXPIRED"
    EXPIRED_IN_MATCH = "EXPIRED_IN_MATCH"


# ============================================================================
# CREDENTIALS & REQUESTS
# ============================================================================


@dataclass(frozen=True)
class Credentials:
    """API key and secret used to authenticate signed requests."""

    api_key: str = field(repr=False)
    api_secret: str = field(repr=False)


@dataclass(frozen=True)
class SignedRequest:
    """A fully assembled request: final URL plus headers.

    Public endpoints are built as SignedRequest too, with no signature in the
    URL and an empty header map.
    """

    url: str
    headers: dict[str, str]


@dataclass
class OrderRequest:
    """A MARKET order to be submitted.

    ``precision`` is the number of decimals the quantity is rendered with.
    ``None`` sends the quantity as-is, without trailing zeros.
    """

    symbol: str
    side: Side
    quantity: Decimal
    order_type: OrderType = OrderType.MARKET
    precision: int | None = EXPLICIT_QUANTITY_PRECISION

    def quantity_string(self) -> str:
        """Render the quantity as it appears in the query string."""
        if self.precision is None:
            return full_precision_string(self.quantity)
        return format(
            self.quantity.quantize(
                Decimal(1).scaleb(-self.precision), rounding=ROUND_HALF_UP
            ),
            "f",
        )


# ============================================================================
# ACCOUNT TYPES
# ============================================================================


@dataclass
class Asset:
    asset: str
    walletBalance: str
    availableBalance: str


@dataclass
class AccountInfo:
    """Snapshot of the futures account, reduced to the asset list."""

    assets: list[Asset]

    def find_asset(self, asset: str) -> Asset | None:
        """Return the entry for ``asset`` or None when the account has none."""
        for entry in self.assets:
            if entry.asset == asset:
                return entry
        return None


@dataclass
class PriceTicker:
    symbol: str
    price: str
