from calculators.currency import to_display
from calculators.trip_models import Currency


def _group(value: float, decimals: int, thousands: str, decimal_point: str) -> str:
    text = f"{value:,.{decimals}f}"
    return text.replace(",", "\0").replace(".", decimal_point).replace("\0", thousands)


def _trim_decimals(value: float, min_decimals: int, max_decimals: int) -> str:
    text = f"{value:.{max_decimals}f}"
    whole, frac = text.split(".")
    frac = frac.rstrip("0").ljust(min_decimals, "0")
    return f"{whole}.{frac}"


def format_money(value: float, currency: Currency = Currency.PLN) -> str:
    """1 234,56 zł / 1.234,56 €"""
    if Currency(currency) == Currency.EUR:
        return f"{_group(value, 2, '.', ',')} €"
    return f"{_group(value, 2, chr(0xA0), ',')} zł"


def format_result_currency(value_pln: float, currency: Currency, exchange_rate: float) -> str:
    return format_money(to_display(value_pln, currency, exchange_rate), currency)


def format_unit_rate(rate_pln: float, unit: str, currency: Currency, exchange_rate: float) -> str:
    """Per-unit rate with 2 to 4 decimals, e.g. '0,0930 EUR/km'."""
    value = to_display(rate_pln, currency, exchange_rate)
    text = _trim_decimals(value, 2, 4).replace(".", ",")
    return f"{text} {Currency(currency).value}/{unit}"


def format_distance(km: float) -> str:
    return f"{_group(km, 0, chr(0xA0), ',')} km"
