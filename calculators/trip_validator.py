"""
Trip Input Validation

Checks run before a trip is saved to the history. Problems are returned as
ValidationIssue objects for the UI to show inline; nothing is raised and no
record is created while an ERROR-level issue is present.

Copyright (c) 2026 Andre. All rights reserved.
"""

import math
from typing import List

from calculators.trip_models import TripInputs
from calculators.tax_calculators import list_available_jurisdictions


class ValidationIssue:
    """Represents a problem with the trip inputs."""

    SEVERITY_ERROR = "ERROR"
    SEVERITY_WARNING = "WARNING"

    CATEGORY_DISTANCE = "distance"
    CATEGORY_REVENUE = "revenue"
    CATEGORY_TAX = "tax_residency"
    CATEGORY_EXCHANGE_RATE = "exchange_rate"

    def __init__(self, severity: str, category: str, message: str):
        self.severity = severity
        self.category = category
        self.message = message

    @property
    def is_error(self) -> bool:
        return self.severity == self.SEVERITY_ERROR

    def __repr__(self) -> str:
        return f"ValidationIssue({self.severity}, {self.category}, {self.message!r})"


class TripValidator:
    """Validates trip inputs before save."""

    def __init__(self):
        self.issues: List[ValidationIssue] = []

    def validate_for_save(self, inputs: TripInputs) -> List[ValidationIssue]:
        """Run all checks and return the issues found."""
        self.issues = []

        self.check_distance(inputs)
        self.check_revenue(inputs)
        self.check_tax_residency(inputs)
        self.check_exchange_rate(inputs)

        return self.issues

    def check_distance(self, inputs: TripInputs):
        if not inputs.distance_km:
            self._error(ValidationIssue.CATEGORY_DISTANCE, "Distance is required to save a trip")
        elif inputs.distance_km < 0:
            self._error(ValidationIssue.CATEGORY_DISTANCE, "Distance cannot be negative")

    def check_revenue(self, inputs: TripInputs):
        if inputs.is_rate_per_km_mode:
            value, label = inputs.rate_per_km, "Rate per km"
        else:
            value, label = inputs.freight_amount, "Freight amount"

        if not value:
            self._error(ValidationIssue.CATEGORY_REVENUE, f"{label} is required to save a trip")
        elif value < 0:
            self._error(ValidationIssue.CATEGORY_REVENUE, f"{label} cannot be negative")

    def check_tax_residency(self, inputs: TripInputs):
        if inputs.tax_residency not in list_available_jurisdictions():
            self._error(ValidationIssue.CATEGORY_TAX, f"Unknown tax residency: {inputs.tax_residency}")

    def check_exchange_rate(self, inputs: TripInputs):
        rate = inputs.exchange_rate
        if not (isinstance(rate, (int, float)) and math.isfinite(rate) and rate > 0):
            self._error(ValidationIssue.CATEGORY_EXCHANGE_RATE, f"Exchange rate must be positive, got {rate}")

    def _error(self, category: str, message: str):
        self.issues.append(ValidationIssue(ValidationIssue.SEVERITY_ERROR, category, message))


def validate_for_save(inputs: TripInputs) -> List[ValidationIssue]:
    """Convenience wrapper around TripValidator."""
    return TripValidator().validate_for_save(inputs)
