"""
Currency Conversion

All calculations run in PLN. A revenue figure entered in EUR is converted
to PLN with to_base(); results are shown in EUR with to_display(), its
exact inverse for the same exchange rate.

Copyright (c) 2026 Andre. All rights reserved.
"""

from calculators.trip_models import Currency, SECONDARY_CURRENCY


def to_base(amount: float, exchange_rate: float) -> float:
    """
    Convert an EUR amount to PLN.

    A true zero is returned unchanged so that an empty revenue never turns
    into a tiny non-zero value.
    """
    if amount == 0:
        return amount
    return amount * exchange_rate


def to_display(amount_base: float, target_currency: Currency, exchange_rate: float) -> float:
    """
    Convert a PLN amount to the currency it is displayed in.

    Args:
        amount_base: Amount in PLN
        target_currency: Currency to display
        exchange_rate: PLN per 1 EUR (must be > 0)

    Returns:
        amount_base / exchange_rate for EUR, amount_base otherwise
    """
    if Currency(target_currency) == SECONDARY_CURRENCY:
        return amount_base / exchange_rate
    return amount_base
