"""
Currency conversion through the reference currency.
"""

from .currencies import Currency


def convert(amount: float, from_currency: Currency, to_currency: Currency) -> float:
    """Convert an amount between two currencies.

    The amount is first expressed in the reference currency and then in
    the target currency. Converting a currency to itself returns the
    amount unchanged.

    Args:
        amount: Non-negative amount in from_currency
        from_currency: Currency the amount is expressed in
        to_currency: Currency to convert into

    Returns:
        Amount expressed in to_currency
    """
    if from_currency == to_currency:
        return amount

    reference_amount = amount / from_currency.rate
    return reference_amount * to_currency.rate
