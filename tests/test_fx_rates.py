"""
Unit Tests for the EUR/PLN Rate Service

Network access is mocked: ECB responses are canned SDMX documents and
yfinance is patched out.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

import math
from unittest.mock import MagicMock, patch

import pandas as pd
import pytest
import requests

from services.fx_rates import (
    ECBRateProvider,
    YFinanceRateProvider,
    RateFetchError,
    fetch_eur_pln_rate,
    refresh_exchange_rate,
    validate_rate,
)


SDMX_RESPONSE = b"""<?xml version="1.0" encoding="UTF-8"?>
<message:GenericData xmlns:message="http://www.sdmx.org/resources/sdmxml/schemas/v2_1/message"
    xmlns:generic="http://www.sdmx.org/resources/sdmxml/schemas/v2_1/data/generic">
  <message:DataSet>
    <generic:Series>
      <generic:Obs>
        <generic:ObsDimension value="2024-06-14"/>
        <generic:ObsValue value="4.3675"/>
      </generic:Obs>
    </generic:Series>
  </message:DataSet>
</message:GenericData>
"""


def mock_session(content=SDMX_RESPONSE, error=None):
    session = MagicMock()
    session.headers = {}
    if error is not None:
        session.get.side_effect = error
    else:
        response = MagicMock()
        response.content = content
        response.raise_for_status.return_value = None
        session.get.return_value = response
    return session


class TestValidateRate:

    def test_accepts_positive(self):
        assert validate_rate("4.3675") == pytest.approx(4.3675)

    @pytest.mark.parametrize("value", [0, -1.0, math.inf, math.nan, "abc", None])
    def test_rejects_unusable(self, value):
        with pytest.raises(RateFetchError):
            validate_rate(value)


class TestECBRateProvider:

    def test_parses_latest_observation(self):
        session = mock_session()
        rate = ECBRateProvider(timeout=5.0, session=session).fetch_latest("PLN")

        assert rate == pytest.approx(4.3675)
        url = session.get.call_args[0][0]
        assert "D.PLN.EUR.SP00.A" in url
        assert session.get.call_args[1]["timeout"] == 5.0
        assert session.get.call_args[1]["params"] == {"lastNObservations": 1}

    def test_transport_error(self):
        session = mock_session(error=requests.ConnectionError("offline"))
        with pytest.raises(RateFetchError, match="request failed"):
            ECBRateProvider(session=session).fetch_latest()

    def test_unparsable_response(self):
        with pytest.raises(RateFetchError, match="parse"):
            ECBRateProvider(session=mock_session(content=b"<html")).fetch_latest()

    def test_no_observation(self):
        with pytest.raises(RateFetchError, match="No PLN/EUR observation"):
            ECBRateProvider(session=mock_session(content=b"<empty/>")).fetch_latest()

    def test_non_positive_value(self):
        content = SDMX_RESPONSE.replace(b"4.3675", b"0")
        with pytest.raises(RateFetchError):
            ECBRateProvider(session=mock_session(content=content)).fetch_latest()


class TestYFinanceRateProvider:

    @patch("services.fx_rates.yf.Ticker")
    def test_last_close(self, ticker):
        ticker.return_value.history.return_value = pd.DataFrame({"Close": [4.30, 4.31, float("nan")]})
        assert YFinanceRateProvider().fetch_latest() == pytest.approx(4.31)

    @patch("services.fx_rates.yf.Ticker")
    def test_empty_history(self, ticker):
        ticker.return_value.history.return_value = pd.DataFrame()
        with pytest.raises(RateFetchError):
            YFinanceRateProvider().fetch_latest()


class TestFetchEurPlnRate:

    @patch("services.fx_rates.YFinanceRateProvider")
    @patch("services.fx_rates.ECBRateProvider")
    def test_ecb_first(self, ecb, yfinance):
        ecb.return_value.fetch_latest.return_value = 4.35
        assert fetch_eur_pln_rate(timeout=2.0) == 4.35
        ecb.assert_called_once_with(timeout=2.0)
        yfinance.assert_not_called()

    @patch("services.fx_rates.YFinanceRateProvider")
    @patch("services.fx_rates.ECBRateProvider")
    def test_falls_back_to_yfinance(self, ecb, yfinance):
        ecb.return_value.fetch_latest.side_effect = RateFetchError("down")
        yfinance.return_value.fetch_latest.return_value = 4.29
        assert fetch_eur_pln_rate() == 4.29

    @patch("services.fx_rates.YFinanceRateProvider")
    @patch("services.fx_rates.ECBRateProvider")
    def test_both_fail(self, ecb, yfinance):
        ecb.return_value.fetch_latest.side_effect = RateFetchError("down")
        yfinance.return_value.fetch_latest.side_effect = RateFetchError("also down")
        with pytest.raises(RateFetchError):
            fetch_eur_pln_rate()


class TestRefreshExchangeRate:

    def test_success_replaces_rate(self):
        result = refresh_exchange_rate(4.30, fetcher=lambda: 4.3675)
        assert result.updated
        assert result.rate == pytest.approx(4.3675)
        assert result.error is None

    def test_failure_keeps_rate(self):
        def offline():
            raise RateFetchError("offline")

        result = refresh_exchange_rate(4.30, fetcher=offline)
        assert not result.updated
        assert result.rate == 4.30
        assert "4.3000" in result.error

    def test_unexpected_error_keeps_rate(self):
        def broken():
            raise RuntimeError("boom")

        assert refresh_exchange_rate(4.30, fetcher=broken).rate == 4.30

    @pytest.mark.parametrize("bad", [0.0, -4.0, math.inf, math.nan])
    def test_invalid_value_keeps_rate(self, bad):
        result = refresh_exchange_rate(4.30, fetcher=lambda: bad)
        assert not result.updated
        assert result.rate == 4.30
