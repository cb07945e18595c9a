"""
Unit Tests for Pre-Save Validation

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

import math
from dataclasses import replace

from calculators.trip_models import TripInputs, FlatAmount, PerKmRate
from calculators.trip_validator import TripValidator, ValidationIssue, validate_for_save


def categories(issues):
    return {issue.category for issue in issues if issue.is_error}


class TestTripValidator:

    def test_complete_trip_is_valid(self, scenario_a, scenario_b):
        validator = TripValidator()
        assert validator.validate_for_save(scenario_a) == []
        assert validator.validate_for_save(scenario_b) == []

    def test_missing_distance(self):
        issues = validate_for_save(TripInputs(distance_km=None, revenue=FlatAmount(2000.0)))
        assert categories(issues) == {ValidationIssue.CATEGORY_DISTANCE}

    def test_zero_distance(self):
        issues = validate_for_save(TripInputs(distance_km=0.0, revenue=FlatAmount(2000.0)))
        assert categories(issues) == {ValidationIssue.CATEGORY_DISTANCE}

    def test_missing_freight_amount(self):
        issues = validate_for_save(TripInputs(distance_km=500.0, revenue=FlatAmount(None)))
        assert categories(issues) == {ValidationIssue.CATEGORY_REVENUE}

    def test_missing_rate_per_km(self):
        """In per-km mode the freight amount is irrelevant."""
        issues = validate_for_save(TripInputs(distance_km=500.0, revenue=PerKmRate(None)))
        assert categories(issues) == {ValidationIssue.CATEGORY_REVENUE}
        assert "Rate per km" in issues[0].message

    def test_empty_form_reports_both(self):
        assert categories(validate_for_save(TripInputs())) == {
            ValidationIssue.CATEGORY_DISTANCE,
            ValidationIssue.CATEGORY_REVENUE,
        }

    def test_negative_values(self):
        issues = validate_for_save(TripInputs(distance_km=-1.0, revenue=FlatAmount(-5.0)))
        assert categories(issues) == {ValidationIssue.CATEGORY_DISTANCE, ValidationIssue.CATEGORY_REVENUE}

    def test_unknown_tax_residency(self, scenario_a):
        issues = validate_for_save(replace(scenario_a, tax_residency="Atlantyda"))
        assert categories(issues) == {ValidationIssue.CATEGORY_TAX}

    def test_bad_exchange_rate(self, scenario_a):
        for rate in [0.0, -4.3, math.inf, math.nan]:
            issues = validate_for_save(replace(scenario_a, exchange_rate=rate))
            assert categories(issues) == {ValidationIssue.CATEGORY_EXCHANGE_RATE}

    def test_validator_resets_between_runs(self, scenario_a):
        validator = TripValidator()
        validator.validate_for_save(TripInputs())
        assert validator.validate_for_save(scenario_a) == []
