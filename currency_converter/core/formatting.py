"""
Amount formatting and parsing.

Renders amounts to a fixed number of decimal places followed by the
currency code, and reads such strings back.
"""

import math
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Tuple

DECIMAL_PLACE_OPTIONS: Tuple[int, ...] = (0, 2, 4, 6)

CLOCK_FORMAT = "%A, %B %d, %Y - %H:%M:%S"
TIMESTAMP_FORMAT = "%b %d, %H:%M:%S"

# Tokens for amounts with no fixed-point form
INFINITY_TOKEN = "Infinity"
NAN_TOKEN = "NaN"


def validate_decimal_places(decimal_places: int) -> int:
    """Check decimal places against the supported options.

    Raises:
        ValueError: If decimal_places is not one of DECIMAL_PLACE_OPTIONS
    """
    if decimal_places not in DECIMAL_PLACE_OPTIONS:
        raise ValueError(
            f"decimal places must be one of {list(DECIMAL_PLACE_OPTIONS)}, got {decimal_places}"
        )
    return decimal_places


def round_amount(amount: float, decimal_places: int) -> Decimal:
    """Round an amount half away from zero.

    Rounding is applied to the shortest decimal representation of the
    float, so 2.675 rounds to 2.68 at two places.

    Args:
        amount: Amount to round
        decimal_places: One of DECIMAL_PLACE_OPTIONS

    Returns:
        Rounded amount with exactly decimal_places digits after the point

    Raises:
        ValueError: If decimal_places is not supported or amount is not finite
    """
    validate_decimal_places(decimal_places)
    if not math.isfinite(amount):
        raise ValueError(f"cannot round non-finite amount {amount!r}")
    value = Decimal(repr(float(amount)))
    quantum = Decimal(1).scaleb(-decimal_places)

    with localcontext() as ctx:
        # Enough digits to hold the integer part plus the requested fraction
        ctx.prec = max(ctx.prec, value.adjusted() + decimal_places + 2)
        return value.quantize(quantum, rounding=ROUND_HALF_UP)


def format_amount(amount: float, decimal_places: int, code: str) -> str:
    """Format an amount as "<fixed-point amount> <code>", e.g. "85.00 EUR".

    Non-finite amounts render as "Infinity", "-Infinity" or "NaN".
    """
    validate_decimal_places(decimal_places)
    if math.isnan(amount):
        return f"{NAN_TOKEN} {code}"
    if math.isinf(amount):
        sign = "-" if amount < 0 else ""
        return f"{sign}{INFINITY_TOKEN} {code}"

    rounded = round_amount(amount, decimal_places)
    return f"{rounded:f} {code}"


def parse_amount(text: str) -> float:
    """Parse the leading numeric token of a formatted amount.

    Returns:
        The parsed value, or 0.0 if the text has no usable number
    """
    tokens = text.split()
    if not tokens:
        return 0.0

    try:
        value = float(tokens[0])
    except ValueError:
        return 0.0

    if not math.isfinite(value):
        return 0.0
    return value


def format_clock(moment: datetime) -> str:
    """Full date and time for the live clock line."""
    return moment.strftime(CLOCK_FORMAT)


def format_timestamp(moment: datetime) -> str:
    """Short timestamp stored on history records."""
    return moment.strftime(TIMESTAMP_FORMAT)
