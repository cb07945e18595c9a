"""
Unit Tests for History Amounts in the Display Currency

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from app.ui.i18n import DICTIONARY, LANGUAGES
from app.ui.utils import format_result_currency
from calculators.trip_models import Currency


class TestHistoryAmounts:
    """Stored PLN profits are shown in whatever currency the results use."""

    def test_pln_profit_shown_in_euro(self):
        assert format_result_currency(430.0, Currency.EUR, 4.30) == "100,00 €"

    def test_loss_shown_in_euro(self):
        assert format_result_currency(-2150.0, Currency.EUR, 4.30) == "-500,00 €"

    def test_pln_display_unchanged(self):
        assert format_result_currency(1234.56, Currency.PLN, 4.30) == "1\u00a0234,56 zł"


class TestHistoryTexts:

    def test_every_language_has_history_actions(self):
        for language in LANGUAGES:
            texts = DICTIONARY[language]
            assert texts['clear_history']
            assert texts['no_filter_results']

    def test_languages_share_keys(self):
        assert DICTIONARY['pl'].keys() == DICTIONARY['en'].keys()
