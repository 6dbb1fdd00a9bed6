"""Order sizing from the available balance.

Quantities derived from the balance are floored, never rounded, so the order
never asks for more than the wallet can fund.
"""

import logging
from decimal import ROUND_DOWN, Decimal, localcontext

from binance_trader.errors import InvalidPriceError, ValidationError
from binance_trader.types import NumericInput, numeric_to_decimal

log = logging.getLogger(__name__)

FULL_BALANCE_PRECISION = 6


def floor_to_precision(value: Decimal, precision: int) -> Decimal:
    """Truncate ``value`` toward zero at ``precision`` decimal places."""
    return value.quantize(Decimal(1).scaleb(-precision), rounding=ROUND_DOWN)


def compute_full_balance_quantity(
    balance: NumericInput,
    price: NumericInput,
    precision: int = FULL_BALANCE_PRECISION,
) -> Decimal:
    """Compute how much of the base asset the whole balance buys at ``price``.

    Args:
        balance: The quote asset balance, usually the ``walletBalance`` string
        price: The current market price of the pair
        precision: Number of decimals to keep (default: 6)

    Returns:
        Decimal: ``balance / price`` floored at ``precision`` decimals, never negative

    Raises:
        InvalidPriceError: If price is zero or negative
        ValidationError: If balance or price is not a valid number

    Example:
        .. code-block:: python

            compute_full_balance_quantity("100", 3)  # Decimal("33.333333")

    """
    if balance is None or price is None:
        raise ValidationError(f"Balance and price are required, got {balance=} {price=}")

    # plain decimal strings are unsigned, so catch "-5" before parsing
    if isinstance(price, str) and price.strip().startswith("-"):
        raise InvalidPriceError(price)

    price_decimal = numeric_to_decimal(price)
    if price_decimal <= 0:
        raise InvalidPriceError(price)

    balance_decimal = numeric_to_decimal(balance)

    try:
        # truncate the quotient too, and keep enough digits for the integer part
        with localcontext() as ctx:
            ctx.rounding = ROUND_DOWN
            ctx.prec = max(
                ctx.prec,
                balance_decimal.adjusted() - price_decimal.adjusted() + precision + 2,
            )
            quantity = floor_to_precision(balance_decimal / price_decimal, precision)
    except (ArithmeticError, ValueError) as e:
        raise ValidationError(
            f"Cannot size an order from {balance=} at {price=} with {precision=}"
        ) from e

    log.debug(
        "Sized order: balance=%s price=%s quantity=%s",
        balance_decimal,
        price_decimal,
        quantity,
    )
    return quantity
