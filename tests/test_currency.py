"""
Unit Tests for PLN/EUR Conversion

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

import pytest

from calculators.currency import to_base, to_display
from calculators.trip_models import Currency


class TestToBase:

    def test_eur_to_pln(self):
        assert to_base(500.0, 4.30) == pytest.approx(2150.0)

    def test_zero_stays_zero(self):
        assert to_base(0.0, 4.30) == 0.0
        assert to_base(0, 4.30) == 0


class TestToDisplay:

    def test_pln_unchanged(self):
        assert to_display(2150.0, Currency.PLN, 4.30) == 2150.0

    def test_eur_divides_by_rate(self):
        assert to_display(2150.0, Currency.EUR, 4.30) == pytest.approx(500.0)

    def test_accepts_currency_code(self):
        """Plain string codes work like the enum members."""
        assert to_display(430.0, "EUR", 4.30) == pytest.approx(100.0)

    def test_negative_amounts(self):
        assert to_display(-430.0, Currency.EUR, 4.30) == pytest.approx(-100.0)
