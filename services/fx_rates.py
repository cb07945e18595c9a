"""
EUR/PLN Exchange Rate Service

Fetches the current EUR -> PLN rate (PLN per 1 EUR) used to convert EUR
revenue into PLN.

Sources, in order:
1. European Central Bank reference rate (SDMX API, latest observation)
2. yfinance market quote (EURPLN=X)

A fetched value replaces the held rate only if it is a finite positive
number. On any failure the calculator keeps the rate it already has.

API Documentation: https://data.ecb.europa.eu/help/api/data
"""

import math
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Callable, Optional

import requests
import yfinance as yf

from utils.logging_config import setup_logger, get_perf_logger

logger = setup_logger(__name__)


class RateFetchError(Exception):
    """Raised when no valid EUR/PLN rate could be obtained."""


def validate_rate(value) -> float:
    """
    Accept a fetched rate only if it is a finite number > 0.

    Raises:
        RateFetchError: If the value is unusable
    """
    try:
        rate = float(value)
    except (TypeError, ValueError) as e:
        raise RateFetchError(f"Invalid rate format received: {value!r}") from e

    if not math.isfinite(rate) or rate <= 0:
        raise RateFetchError(f"Invalid rate value received: {value!r}")
    return rate


class ECBRateProvider:
    """
    European Central Bank reference rate provider.

    The ECB publishes foreign currency per 1 EUR, which for PLN is exactly
    the rate the calculator needs.
    """

    API_URL = "https://data-api.ecb.europa.eu/service/data/EXR/D.{currency}.EUR.SP00.A"

    SDMX_NAMESPACES = {
        'generic': 'http://www.sdmx.org/resources/sdmxml/schemas/v2_1/data/generic',
    }

    def __init__(self, timeout: float = 10.0, session: Optional[requests.Session] = None):
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            "User-Agent": "FreightTripCalculator/1.0",
            "Accept": "application/xml"
        })

    def fetch_latest(self, currency: str = "PLN") -> float:
        """
        Fetch the latest published rate of currency per 1 EUR.

        Raises:
            RateFetchError: On transport, parse or validation failure
        """
        url = self.API_URL.format(currency=currency.upper())

        try:
            response = self.session.get(url, params={"lastNObservations": 1}, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise RateFetchError(f"ECB API request failed: {e}") from e

        try:
            root = ET.fromstring(response.content)
        except ET.ParseError as e:
            raise RateFetchError(f"Failed to parse ECB response: {e}") from e

        obs_values = root.findall('.//generic:ObsValue', self.SDMX_NAMESPACES)
        if obs_values and obs_values[-1].attrib.get('value'):
            return validate_rate(obs_values[-1].attrib['value'])

        # Non-namespaced fallback
        for element in root.iter():
            if element.tag.endswith('ObsValue') and 'value' in element.attrib:
                return validate_rate(element.attrib['value'])

        raise RateFetchError(f"No {currency}/EUR observation in ECB response")


class YFinanceRateProvider:
    """Market quote fallback via yfinance."""

    TICKER = "EURPLN=X"

    def fetch_latest(self) -> float:
        """
        Raises:
            RateFetchError: If yfinance returns no usable close price
        """
        try:
            history = yf.Ticker(self.TICKER).history(period='5d')
        except Exception as e:
            raise RateFetchError(f"yfinance request failed: {e}") from e

        if history is None or history.empty or 'Close' not in history:
            raise RateFetchError(f"No data returned for {self.TICKER}")

        price = history['Close'].dropna()
        if price.empty:
            raise RateFetchError(f"No close price for {self.TICKER}")

        return validate_rate(price.iloc[-1])


def fetch_eur_pln_rate(timeout: float = 10.0) -> float:
    """
    Get the current EUR -> PLN rate.

    Args:
        timeout: HTTP timeout in seconds for the ECB request

    Returns:
        PLN per 1 EUR, finite and > 0

    Raises:
        RateFetchError: If neither source produced a valid rate
    """
    with get_perf_logger(logger, "fetch_eur_pln_rate", threshold_ms=3000):
        try:
            rate = ECBRateProvider(timeout=timeout).fetch_latest("PLN")
            logger.info(f"ECB rate fetched: EUR/PLN = {rate:.4f}")
            return rate
        except RateFetchError as e:
            logger.warning(f"ECB rate unavailable, trying yfinance: {e}")

        rate = YFinanceRateProvider().fetch_latest()
        logger.info(f"yfinance rate fetched: EUR/PLN = {rate:.4f}")
        return rate


@dataclass(frozen=True)
class RateRefreshResult:
    """Outcome of a refresh: the rate to hold and, on failure, why it was kept."""
    rate: float
    updated: bool
    error: Optional[str] = None


def refresh_exchange_rate(
    current_rate: float,
    fetcher: Callable[[], float] = fetch_eur_pln_rate,
) -> RateRefreshResult:
    """
    Try to replace the held rate with a freshly fetched one.

    Never raises: on failure the current rate is kept and the error message
    names it.

    Args:
        current_rate: Rate currently in use
        fetcher: Callable returning the new rate (fetch_eur_pln_rate by default)
    """
    try:
        rate = validate_rate(fetcher())
    except Exception as e:  # provider boundary, any failure keeps the held rate
        logger.error(f"Exchange rate refresh failed, keeping {current_rate:.4f}: {e}")
        return RateRefreshResult(
            rate=current_rate,
            updated=False,
            error=f"Could not fetch the exchange rate. Using the previous rate: {current_rate:.4f}",
        )

    return RateRefreshResult(rate=rate, updated=True)
